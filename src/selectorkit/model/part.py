"""Part kinds and combinators: the vocabulary of a selector."""

from __future__ import annotations

from enum import Enum


class PartKind(Enum):
    """A category of simple selector, in the order CSS requires.

    Each member carries its rank (position in the required order), the text
    rendered around a value, and whether it may occur only once.
    """

    ELEMENT = ("element", 1, "", "", True)
    ID = ("id", 2, "#", "", True)
    CLASS = ("class", 3, ".", "", False)
    ATTR = ("attr", 4, "[", "]", False)
    PSEUDO_CLASS = ("pseudo-class", 5, ":", "", False)
    PSEUDO_ELEMENT = ("pseudo-element", 6, "::", "", True)

    def __init__(
        self, label: str, rank: int, prefix: str, suffix: str, unique: bool
    ) -> None:
        self.label = label
        self.rank = rank
        self.prefix = prefix
        self.suffix = suffix
        self.unique = unique

    def render(self, value: str) -> str:
        return f"{self.prefix}{value}{self.suffix}"

    @classmethod
    def from_label(cls, label: str) -> PartKind:
        """Look up a kind by its document label (e.g. ``"pseudo-class"``)."""
        for kind in cls:
            if kind.label == label:
                return kind
        raise ValueError(f"Unknown part kind: {label!r}")


class Combinator(str, Enum):
    """The four CSS combinators.

    ``combine`` accepts any string; these are provided for readability.
    """

    DESCENDANT = " "
    CHILD = ">"
    NEXT_SIBLING = "+"
    SUBSEQUENT_SIBLING = "~"
