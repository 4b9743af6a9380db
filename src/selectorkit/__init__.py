"""selectorkit: a fluent builder for CSS selectors."""

__version__ = "0.1.0"

from selectorkit.builder import SelectorFactory, builder  # noqa: E402
from selectorkit.errors import (  # noqa: E402
    DocumentError,
    OrderError,
    SelectorError,
    UniqueError,
)
from selectorkit.model import (  # noqa: E402
    Combinator,
    ComplexSelector,
    CompoundSelector,
    PartKind,
    Selector,
)

__all__ = [
    "__version__",
    "SelectorFactory",
    "builder",
    "Selector",
    "CompoundSelector",
    "ComplexSelector",
    "PartKind",
    "Combinator",
    "SelectorError",
    "OrderError",
    "UniqueError",
    "DocumentError",
]
