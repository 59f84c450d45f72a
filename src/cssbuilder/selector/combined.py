"""Combined selectors: operands joined by combinator tokens."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence, Union

from cssbuilder.model.combinator import Combinator
from cssbuilder.selector.builder import Selector
from cssbuilder.selector.errors import CombineError

log = logging.getLogger("cssbuilder.selector")

Operand = Union[Selector, "CombinedSelector"]


@dataclass(frozen=True)
class CombinedSelector:
    """Two or more selectors joined left to right by combinators.

    Holds no fragments of its own; serialization recurses into the
    operands and pads every combinator with one space on each side.
    """

    operands: tuple[Operand, ...]
    combinators: tuple[Combinator, ...]

    def __post_init__(self) -> None:
        if len(self.operands) < 2:
            raise CombineError(
                f"At least two selectors are required, got {len(self.operands)}"
            )
        if len(self.combinators) != len(self.operands) - 1:
            raise CombineError(
                f"Expected {len(self.operands) - 1} combinator(s) for "
                f"{len(self.operands)} selectors, got {len(self.combinators)}"
            )
        for position, operand in enumerate(self.operands):
            if not isinstance(operand, (Selector, CombinedSelector)):
                raise CombineError(
                    f"Operand {position} must be a Selector or CombinedSelector, "
                    f"got {type(operand).__name__}"
                )

    def serialize(self) -> str:
        parts = [self.operands[0].serialize()]
        for combinator, operand in zip(self.combinators, self.operands[1:]):
            parts.append(combinator.padded)
            parts.append(operand.serialize())
        return "".join(parts)

    def __str__(self) -> str:
        return self.serialize()


def _snapshot(operand: Operand) -> Operand:
    if isinstance(operand, Selector):
        return operand.copy()
    return operand


def _to_combinator(token: Combinator | str) -> Combinator:
    try:
        return Combinator(token)
    except ValueError:
        valid = ", ".join(repr(c.token) for c in Combinator)
        raise CombineError(f"Unknown combinator {token!r}; expected one of {valid}") from None


def combine(
    operands: Sequence[Operand], combinators: Sequence[Combinator | str]
) -> CombinedSelector:
    """Join *operands* with *combinators* (one fewer combinator than operands).

    Selector operands are copied, so the returned combination is unaffected
    by later changes to them.
    """
    resolved = tuple(_to_combinator(t) for t in combinators)
    combined = CombinedSelector(
        operands=tuple(_snapshot(o) for o in operands),
        combinators=resolved,
    )
    log.debug(
        "Combined %d selectors with %s",
        len(combined.operands),
        [c.token for c in resolved],
    )
    return combined
