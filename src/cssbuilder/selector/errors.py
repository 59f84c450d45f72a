"""Selector builder error types."""

from __future__ import annotations

from cssbuilder.model.fragment import KIND_ORDER, FragmentKind

DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time "
    "inside the selector"
)
ORDER_MESSAGE = f"Selector parts should be arranged in the following order: {KIND_ORDER}"


class SelectorError(Exception):
    """Base error for malformed selector construction."""


class DuplicateFragmentError(SelectorError):
    """Raised when a second element, id or pseudo-element is added."""

    def __init__(self, kind: FragmentKind) -> None:
        self.kind = kind
        super().__init__(DUPLICATE_MESSAGE)


class OrderError(SelectorError):
    """Raised when a fragment is added after a fragment of a later kind."""

    def __init__(self, kind: FragmentKind, after: FragmentKind) -> None:
        self.kind = kind
        self.after = after
        super().__init__(ORDER_MESSAGE)


class CombineError(SelectorError):
    """Raised when selectors cannot be combined as requested."""
