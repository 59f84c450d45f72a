"""cssbuilder: fluent construction of CSS selectors with grammar checks."""

__version__ = "0.1.0"

from cssbuilder.model import Combinator, Fragment, FragmentKind  # noqa: E402
from cssbuilder.selector import (  # noqa: E402
    CombineError,
    CombinedSelector,
    DuplicateFragmentError,
    OrderError,
    Selector,
    SelectorBuilder,
    SelectorError,
    builder,
    combine,
)

__all__ = [
    "CombineError",
    "CombinedSelector",
    "Combinator",
    "DuplicateFragmentError",
    "Fragment",
    "FragmentKind",
    "OrderError",
    "Selector",
    "SelectorBuilder",
    "SelectorError",
    "builder",
    "combine",
]
