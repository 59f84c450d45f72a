"""Factory entry points: each returns a fresh selector seeded with one part."""

from __future__ import annotations

from typing import Sequence

from cssbuilder.model.combinator import Combinator
from cssbuilder.selector.builder import Selector
from cssbuilder.selector.combined import CombinedSelector, Operand, combine


class SelectorBuilder:
    """Starting point for fluent selector construction.

    Example::

        builder.combine(
            builder.element("div").id("main").class_("container"),
            "+",
            builder.element("table").id("data"),
        ).serialize()
        # 'div#main.container + table#data'
    """

    def element(self, name: str) -> Selector:
        return Selector().element(name)

    def id(self, name: str) -> Selector:
        return Selector().id(name)

    def class_(self, name: str) -> Selector:
        return Selector().class_(name)

    def attr(self, spec: str) -> Selector:
        return Selector().attr(spec)

    def pseudo_class(self, name: str) -> Selector:
        return Selector().pseudo_class(name)

    def pseudo_element(self, name: str) -> Selector:
        return Selector().pseudo_element(name)

    def combine(
        self, left: Operand, combinator: Combinator | str, right: Operand
    ) -> CombinedSelector:
        return combine([left, right], [combinator])

    def combine_all(
        self, operands: Sequence[Operand], combinators: Sequence[Combinator | str]
    ) -> CombinedSelector:
        return combine(operands, combinators)


builder = SelectorBuilder()
