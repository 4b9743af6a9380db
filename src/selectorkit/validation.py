"""Document validator: reports every problem in a selector document.

Unlike :func:`selectorkit.document.from_dict`, which stops at the first bad
part, the validator keeps walking the tree and collects a
:class:`~selectorkit.model.diagnostic.Diagnostic` per problem.
"""

from __future__ import annotations

from typing import Any

from selectorkit.document import DEFAULT_MAX_DEPTH, node_kind, parse_part
from selectorkit.errors import DocumentError, OrderError, SelectorError, UniqueError
from selectorkit.model.diagnostic import Diagnostic
from selectorkit.model.selector import CompoundSelector

__all__ = ["validate", "validate_or_raise", "ValidationError"]


class ValidationError(SelectorError):
    """Raised when a selector document produces diagnostics."""

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = diagnostics
        messages = [str(d) for d in diagnostics]
        super().__init__(
            f"Validation failed with {len(messages)} error(s): " + "; ".join(messages)
        )


def validate(data: Any, max_depth: int = DEFAULT_MAX_DEPTH) -> list[Diagnostic]:
    """Check *data* and return all diagnostics (empty when valid)."""
    diagnostics: list[Diagnostic] = []
    _check(data, "$", 0, max_depth, diagnostics)
    return diagnostics


def validate_or_raise(data: Any, max_depth: int = DEFAULT_MAX_DEPTH) -> None:
    """Run validation; raises :class:`ValidationError` if anything was found."""
    diagnostics = validate(data, max_depth=max_depth)
    if diagnostics:
        raise ValidationError(diagnostics)


def _check(
    data: Any, path: str, depth: int, max_depth: int, out: list[Diagnostic]
) -> None:
    if depth > max_depth:
        out.append(
            Diagnostic("structure", f"Selector nesting exceeds {max_depth} levels", path)
        )
        return
    try:
        kind = node_kind(data, path)
    except DocumentError as exc:
        out.append(Diagnostic("structure", exc.reason, path))
        return

    if kind == "complex":
        _check(data["left"], f"{path}.left", depth + 1, max_depth, out)
        _check(data["right"], f"{path}.right", depth + 1, max_depth, out)
        return

    # Failed parts are skipped; the selector is unchanged after a rejected add.
    selector = CompoundSelector()
    for index, part in enumerate(data["parts"]):
        part_path = f"{path}.parts[{index}]"
        try:
            selector.add(*parse_part(part, part_path))
        except DocumentError as exc:
            out.append(Diagnostic("structure", exc.reason, part_path))
        except OrderError as exc:
            out.append(Diagnostic("part_order", str(exc), part_path))
        except UniqueError as exc:
            out.append(Diagnostic("part_unique", str(exc), part_path))
