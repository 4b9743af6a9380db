"""Error hierarchy for selectorkit."""
from __future__ import annotations

ORDER_ERROR = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)

UNIQUE_ERROR = (
    "Element, id and pseudo-element should not occur more than one time "
    "inside the selector"
)


class SelectorError(Exception):
    """Base error for all selectorkit errors."""


class OrderError(SelectorError):
    """A part was added after a part of a later category."""

    def __init__(self, message: str = ORDER_ERROR) -> None:
        super().__init__(message)


class UniqueError(SelectorError):
    """Element, id or pseudo-element was set a second time."""

    def __init__(self, message: str = UNIQUE_ERROR) -> None:
        super().__init__(message)


class DocumentError(SelectorError):
    """Raised when a selector document is structurally malformed."""

    def __init__(self, message: str, path: str = "$") -> None:
        self.reason = message
        self.path = path
        super().__init__(f"{message} (at {path})")
