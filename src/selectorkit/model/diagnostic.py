"""Diagnostic model: structured findings from selector document validation."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Diagnostic:
    """A single problem found in a selector document.

    Attributes:
        rule: Identifier of the check that produced this diagnostic
            (``part_order``, ``part_unique`` or ``structure``).
        message: Human-readable description of the problem.
        path: Location inside the document, e.g. ``$.left.parts[2]``.
    """

    rule: str
    message: str
    path: str = "$"

    def __str__(self) -> str:
        return f"ERROR [{self.path}]: {self.message}"
