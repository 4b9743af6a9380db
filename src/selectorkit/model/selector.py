"""Selector model: compound (simple-form) and complex (combined) selectors."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from selectorkit.errors import OrderError, UniqueError
from selectorkit.model.part import Combinator, PartKind

logger = logging.getLogger(__name__)


class Selector:
    """Base class for both selector shapes.

    A selector is either a :class:`CompoundSelector` holding simple-selector
    parts or a :class:`ComplexSelector` joining two selectors with a
    combinator.
    """

    def stringify(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.stringify()


class CompoundSelector(Selector):
    """A single compound selector such as ``a#main.link[href]:hover::before``.

    Parts are added with the fluent mutators, which must be called in the
    order element, id, class, attr, pseudo-class, pseudo-element. Calls at the
    same rank may repeat, except for the singleton kinds (element, id and
    pseudo-element). A mutator that raises leaves the selector untouched.
    """

    def __init__(self) -> None:
        self._element = ""
        self._id: str | None = None
        self._classes: list[str] = []
        self._attrs: list[str] = []
        self._pseudo_classes: list[str] = []
        self._pseudo_element: str | None = None
        self._rank = 0

    # --- read access ----------------------------------------------------------

    @property
    def rank(self) -> int:
        """Rank of the latest category touched; 0 when empty."""
        return self._rank

    @property
    def element_name(self) -> str:
        return self._element

    @property
    def id_name(self) -> str:
        return self._id or ""

    @property
    def classes(self) -> tuple[str, ...]:
        return tuple(self._classes)

    @property
    def attributes(self) -> tuple[str, ...]:
        return tuple(self._attrs)

    @property
    def pseudo_classes(self) -> tuple[str, ...]:
        return tuple(self._pseudo_classes)

    @property
    def pseudo_element_name(self) -> str:
        return self._pseudo_element or ""

    def parts(self) -> list[tuple[PartKind, str]]:
        """Return every part as ``(kind, value)`` in canonical order."""
        result: list[tuple[PartKind, str]] = []
        if self._element:
            result.append((PartKind.ELEMENT, self._element))
        if self._id is not None:
            result.append((PartKind.ID, self._id))
        result.extend((PartKind.CLASS, v) for v in self._classes)
        result.extend((PartKind.ATTR, v) for v in self._attrs)
        result.extend((PartKind.PSEUDO_CLASS, v) for v in self._pseudo_classes)
        if self._pseudo_element is not None:
            result.append((PartKind.PSEUDO_ELEMENT, self._pseudo_element))
        return result

    # --- mutators -------------------------------------------------------------

    def element(self, value: str) -> CompoundSelector:
        return self.add(PartKind.ELEMENT, value)

    def id(self, value: str) -> CompoundSelector:
        return self.add(PartKind.ID, value)

    def class_(self, value: str) -> CompoundSelector:
        return self.add(PartKind.CLASS, value)

    def attr(self, value: str) -> CompoundSelector:
        return self.add(PartKind.ATTR, value)

    def pseudo_class(self, value: str) -> CompoundSelector:
        return self.add(PartKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> CompoundSelector:
        return self.add(PartKind.PSEUDO_ELEMENT, value)

    def add(self, kind: PartKind, value: str) -> CompoundSelector:
        """Add one part of *kind*, enforcing order and uniqueness.

        Raises:
            OrderError: a part of a later category was already added.
            UniqueError: *kind* is a singleton that is already set.
        """
        if self._rank > kind.rank:
            logger.debug(
                "Rejected %s %r: rank %d already reached", kind.label, value, self._rank
            )
            raise OrderError()
        if kind.unique and self._is_set(kind):
            logger.debug("Rejected %s %r: already set", kind.label, value)
            raise UniqueError()

        if kind is PartKind.ELEMENT:
            self._element = value
        elif kind is PartKind.ID:
            self._id = value
        elif kind is PartKind.CLASS:
            self._classes.append(value)
        elif kind is PartKind.ATTR:
            self._attrs.append(value)
        elif kind is PartKind.PSEUDO_CLASS:
            self._pseudo_classes.append(value)
        else:
            self._pseudo_element = value
        self._rank = max(self._rank, kind.rank)
        logger.debug("Added %s %r", kind.label, value)
        return self

    def _is_set(self, kind: PartKind) -> bool:
        # An empty element name renders nothing and does not count as set;
        # an empty id or pseudo-element still renders its prefix.
        if kind is PartKind.ELEMENT:
            return bool(self._element)
        if kind is PartKind.ID:
            return self._id is not None
        return self._pseudo_element is not None

    # --- serialisation --------------------------------------------------------

    def stringify(self) -> str:
        return "".join(kind.render(value) for kind, value in self.parts())

    def __repr__(self) -> str:
        return f"CompoundSelector({self.stringify()!r})"


@dataclass(frozen=True)
class ComplexSelector(Selector):
    """Two selectors joined by a combinator token.

    The token is kept verbatim and always rendered with one space on each
    side, so the descendant combinator ``" "`` renders as three spaces.
    """

    left: Selector
    combinator: str
    right: Selector

    @property
    def token(self) -> str:
        if isinstance(self.combinator, Combinator):
            return self.combinator.value
        return self.combinator

    def stringify(self) -> str:
        return f"{self.left.stringify()} {self.token} {self.right.stringify()}"

