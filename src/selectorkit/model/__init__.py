"""Selector model layer -- public type re-exports."""

from selectorkit.model.diagnostic import Diagnostic
from selectorkit.model.part import Combinator, PartKind
from selectorkit.model.selector import ComplexSelector, CompoundSelector, Selector

__all__ = [
    # part
    "PartKind",
    "Combinator",
    # selector
    "Selector",
    "CompoundSelector",
    "ComplexSelector",
    # diagnostic
    "Diagnostic",
]
