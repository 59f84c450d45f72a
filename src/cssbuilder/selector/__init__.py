from cssbuilder.selector.builder import Selector
from cssbuilder.selector.combined import CombinedSelector, Operand, combine
from cssbuilder.selector.errors import (
    CombineError,
    DuplicateFragmentError,
    OrderError,
    SelectorError,
)
from cssbuilder.selector.factory import SelectorBuilder, builder

__all__ = [
    "CombineError",
    "CombinedSelector",
    "DuplicateFragmentError",
    "Operand",
    "OrderError",
    "Selector",
    "SelectorBuilder",
    "SelectorError",
    "builder",
    "combine",
]
