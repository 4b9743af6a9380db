"""Selector documents: a JSON representation of selector trees.

A compound node lists its parts in the order they are applied::

    {"parts": [{"kind": "element", "value": "a"}, {"kind": "pseudo-class", "value": "focus"}]}

A complex node joins two nodes::

    {"left": {...}, "combinator": ">", "right": {...}}

Loading replays every part through the selector mutators, so documents obey
the same ordering and uniqueness rules as hand-written builder chains.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from selectorkit.errors import DocumentError, SelectorError
from selectorkit.model.part import PartKind
from selectorkit.model.selector import ComplexSelector, CompoundSelector, Selector

__all__ = ["to_dict", "from_dict", "dumps", "loads"]

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 64


def to_dict(selector: Selector) -> dict[str, Any]:
    """Convert *selector* into a JSON-compatible dict.

    Compound parts are written in canonical order, so the result always
    loads back without errors.
    """
    if isinstance(selector, ComplexSelector):
        return {
            "left": to_dict(selector.left),
            "combinator": selector.token,
            "right": to_dict(selector.right),
        }
    if isinstance(selector, CompoundSelector):
        return {
            "parts": [
                {"kind": kind.label, "value": value}
                for kind, value in selector.parts()
            ]
        }
    raise TypeError(f"Cannot serialise {type(selector).__name__}")


def from_dict(data: Any, max_depth: int = DEFAULT_MAX_DEPTH) -> Selector:
    """Build a selector from a document node.

    Raises:
        DocumentError: the document is malformed or nested too deeply.
        OrderError: a compound node lists parts out of order.
        UniqueError: a compound node repeats a singleton part.
    """
    return _build(data, "$", 0, max_depth)


def dumps(selector: Selector, indent: int | None = 2) -> str:
    return json.dumps(to_dict(selector), indent=indent)


def loads(text: str, max_depth: int = DEFAULT_MAX_DEPTH) -> Selector:
    """Parse JSON *text* and build the selector it describes."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DocumentError(f"Invalid JSON: {exc.msg}") from exc
    return from_dict(data, max_depth=max_depth)


# ---------------------------------------------------------------------------
# Internals
# ---------------------------------------------------------------------------


def node_kind(data: Any, path: str) -> str:
    """Classify a document node as ``"compound"`` or ``"complex"``.

    Shared with the validator so both agree on what a well-formed node is.
    """
    if not isinstance(data, dict):
        raise DocumentError("Node must be an object", path)
    if "parts" in data:
        if not isinstance(data["parts"], list):
            raise DocumentError("'parts' must be a list", path)
        return "compound"
    if "left" in data and "right" in data:
        combinator = data.get("combinator")
        if not isinstance(combinator, str):
            raise DocumentError("'combinator' must be a string", path)
        return "complex"
    raise DocumentError("Node needs either 'parts' or 'left' and 'right'", path)


def parse_part(part: Any, path: str) -> tuple[PartKind, str]:
    """Read one ``{"kind": ..., "value": ...}`` entry."""
    if not isinstance(part, dict):
        raise DocumentError("Part must be an object", path)
    try:
        kind = PartKind.from_label(part.get("kind"))
    except ValueError as exc:
        raise DocumentError(str(exc), path) from exc
    value = part.get("value")
    if not isinstance(value, str):
        raise DocumentError("Part value must be a string", path)
    return kind, value


def _build(data: Any, path: str, depth: int, max_depth: int) -> Selector:
    if depth > max_depth:
        raise DocumentError(f"Selector nesting exceeds {max_depth} levels", path)

    if node_kind(data, path) == "complex":
        left = _build(data["left"], f"{path}.left", depth + 1, max_depth)
        right = _build(data["right"], f"{path}.right", depth + 1, max_depth)
        return ComplexSelector(left=left, combinator=data["combinator"], right=right)

    selector = CompoundSelector()
    for index, part in enumerate(data["parts"]):
        part_path = f"{path}.parts[{index}]"
        kind, value = parse_part(part, part_path)
        try:
            selector.add(kind, value)
        except SelectorError:
            logger.debug("Part rejected at %s", part_path)
            raise
    logger.debug("Built compound selector %r at %s", selector.stringify(), path)
    return selector
