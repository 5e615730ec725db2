"""Physical and mathematical constants available as single-key symbols."""

from __future__ import annotations

from dataclasses import dataclass

import sympy as sp

from .config import OPERATOR_CHARS, ROOT_SYMBOL


@dataclass(frozen=True)
class ConstantDefinition:
    """A constant key and the expression text it expands to."""

    symbol: str
    expansion: str

    def __post_init__(self) -> None:
        if len(self.symbol) != 1:
            raise ValueError(f"Constant symbol must be one character: {self.symbol!r}")
        if self.symbol.isdigit() or self.symbol in OPERATOR_CHARS or self.symbol == ROOT_SYMBOL:
            raise ValueError(f"Constant symbol clashes with expression syntax: {self.symbol!r}")


# Order matters: expansion runs in table order
CONSTANT_TABLE: tuple[ConstantDefinition, ...] = (
    ConstantDefinition("π", str(sp.N(sp.pi, 20))),
    ConstantDefinition("K", "9 * 10^9"),  # Coulomb constant
    ConstantDefinition("h", "6.626 * 10^-34"),  # Planck constant
    ConstantDefinition("c", "3 * 10^8"),  # speed of light
)

_BY_SYMBOL = {definition.symbol: definition for definition in CONSTANT_TABLE}


def expand(symbol: str) -> str:
    """Return the expansion text for a constant symbol.

    Raises:
        KeyError: If the symbol is not a known constant
    """
    return _BY_SYMBOL[symbol].expansion
