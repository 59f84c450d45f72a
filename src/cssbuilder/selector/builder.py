"""Mutable accumulator of selector fragments with grammar checks."""

from __future__ import annotations

import logging

from cssbuilder.model.fragment import Fragment, FragmentKind
from cssbuilder.selector.errors import DuplicateFragmentError, OrderError

log = logging.getLogger("cssbuilder.selector")


class Selector:
    """A compound selector built one fragment at a time.

    Each fragment-adding method validates the new fragment against the
    fragments already present, appends it, and returns ``self`` so calls
    can be chained::

        Selector().element("a").attr('href$=".png"').pseudo_class("focus")

    A rejected fragment raises and leaves the selector unchanged.
    """

    def __init__(self) -> None:
        self._fragments: list[Fragment] = []

    # --- fragment adders ------------------------------------------------------

    def element(self, name: str) -> Selector:
        return self.add(Fragment(FragmentKind.ELEMENT, name))

    def id(self, name: str) -> Selector:
        return self.add(Fragment(FragmentKind.ID, name))

    def class_(self, name: str) -> Selector:
        return self.add(Fragment(FragmentKind.CLASS, name))

    def attr(self, spec: str) -> Selector:
        return self.add(Fragment(FragmentKind.ATTRIBUTE, spec))

    def pseudo_class(self, name: str) -> Selector:
        return self.add(Fragment(FragmentKind.PSEUDO_CLASS, name))

    def pseudo_element(self, name: str) -> Selector:
        return self.add(Fragment(FragmentKind.PSEUDO_ELEMENT, name))

    def add(self, fragment: Fragment) -> Selector:
        """Validate and append *fragment*.

        Raises:
            DuplicateFragmentError: the kind may occur once and is present.
            OrderError: a fragment of a later kind is already present.
        """
        self._check(fragment)
        self._fragments.append(fragment)
        log.debug("Added %s fragment %r", fragment.kind.value, fragment.render())
        return self

    def _check(self, fragment: Fragment) -> None:
        kind = fragment.kind
        if kind.unique and kind in self.kinds:
            log.debug("Rejected %r: duplicate %s", fragment.render(), kind.value)
            raise DuplicateFragmentError(kind)
        # Compare against the highest rank anywhere, not just the last fragment.
        latest = max(self._fragments, key=lambda f: f.rank, default=None)
        if latest is not None and latest.rank > fragment.rank:
            log.debug(
                "Rejected %r: %s after %s", fragment.render(), kind.value, latest.kind.value
            )
            raise OrderError(kind, latest.kind)

    # --- accessors ------------------------------------------------------------

    @property
    def fragments(self) -> tuple[Fragment, ...]:
        return tuple(self._fragments)

    @property
    def kinds(self) -> list[FragmentKind]:
        return [f.kind for f in self._fragments]

    def copy(self) -> Selector:
        """Return an independent selector holding the same fragments."""
        clone = Selector()
        clone._fragments = list(self._fragments)
        return clone

    def serialize(self) -> str:
        """Render the fragments in the order they were added."""
        return "".join(f.render() for f in self._fragments)

    # --- dunder helpers -------------------------------------------------------

    def __len__(self) -> int:
        return len(self._fragments)

    def __str__(self) -> str:
        return self.serialize()

    def __repr__(self) -> str:
        return f"Selector({self.serialize()!r})"
