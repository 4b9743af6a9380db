"""Facade for creating selectors: one seed method per part kind plus combine."""

from __future__ import annotations

from selectorkit.model.part import Combinator
from selectorkit.model.selector import ComplexSelector, CompoundSelector, Selector

__all__ = ["SelectorFactory", "builder"]


class SelectorFactory:
    """Entry point for building selectors.

    Each seed method returns a new :class:`CompoundSelector` holding one
    part, ready for further chaining::

        builder.element("a").attr('href$=".png"').pseudo_class("focus")

    :meth:`combine` joins two finished selectors into a
    :class:`ComplexSelector`.
    """

    def element(self, value: str) -> CompoundSelector:
        return CompoundSelector().element(value)

    def id(self, value: str) -> CompoundSelector:
        return CompoundSelector().id(value)

    def class_(self, value: str) -> CompoundSelector:
        return CompoundSelector().class_(value)

    def attr(self, value: str) -> CompoundSelector:
        return CompoundSelector().attr(value)

    def pseudo_class(self, value: str) -> CompoundSelector:
        return CompoundSelector().pseudo_class(value)

    def pseudo_element(self, value: str) -> CompoundSelector:
        return CompoundSelector().pseudo_element(value)

    def combine(
        self, left: Selector, combinator: str | Combinator, right: Selector
    ) -> ComplexSelector:
        """Join *left* and *right* with *combinator*, kept verbatim."""
        return ComplexSelector(left=left, combinator=combinator, right=right)


builder = SelectorFactory()
