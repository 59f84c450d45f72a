from cssbuilder.model.combinator import Combinator
from cssbuilder.model.diagnostic import Diagnostic, Severity
from cssbuilder.model.fragment import KIND_ORDER, Fragment, FragmentKind

__all__ = [
    "Combinator",
    "Diagnostic",
    "Fragment",
    "FragmentKind",
    "KIND_ORDER",
    "Severity",
]
