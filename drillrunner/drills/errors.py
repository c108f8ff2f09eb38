"""Error-handling drills: name tags, token costs and positive integers."""

from __future__ import annotations

import enum
from dataclasses import dataclass

PROCESSING_FEE = 1
COST_PER_ITEM = 5

_EMPTY = "cannot parse integer from empty string"
_INVALID_DIGIT = "invalid digit found in string"
_TOO_LARGE = "number too large to fit in target type"
_TOO_SMALL = "number too small to fit in target type"


def _parse_int(text: str, bits: int = 64, signed: bool = True) -> int:
    """Parse a decimal integer of a fixed width, strictly.

    Only an optional sign followed by ASCII digits is accepted; no spaces or
    underscores. Raises ValueError with a message describing the problem.
    """
    if not text:
        raise ValueError(_EMPTY)
    negative = False
    digits = text
    if text[0] in "+-":
        if len(text) == 1:
            raise ValueError(_INVALID_DIGIT)
        if text[0] == "+":
            digits = text[1:]
        elif signed:
            negative = True
            digits = text[1:]
    if not all("0" <= c <= "9" for c in digits):
        raise ValueError(_INVALID_DIGIT)

    value = -int(digits) if negative else int(digits)
    if signed:
        low, high = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    else:
        low, high = 0, (1 << bits) - 1
    if value > high:
        raise ValueError(_TOO_LARGE)
    if value < low:
        raise ValueError(_TOO_SMALL)
    return value


def generate_nametag_text(name: str) -> str:
    """Return the name tag text; raise ValueError for an empty name."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Token cost of buying the typed quantity of items, fee included.

    Raises ValueError when the quantity is not a valid 32-bit integer.
    """
    qty = _parse_int(item_quantity, bits=32)
    return qty * COST_PER_ITEM + PROCESSING_FEE


class CreationError(ValueError):
    """A value cannot become a PositiveNonzeroInteger."""

    class Kind(enum.Enum):
        NEGATIVE = "number is negative"
        ZERO = "number is zero"

    def __init__(self, kind: CreationError.Kind) -> None:
        super().__init__(kind.value)
        self.kind = kind


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise CreationError(CreationError.Kind.NEGATIVE)
        if self.value == 0:
            raise CreationError(CreationError.Kind.ZERO)


class ParsePosNonzeroError(ValueError):
    """Parsing text into a PositiveNonzeroInteger failed.

    Exactly one of ``creation`` and ``parse_int`` is set.
    """

    def __init__(
        self,
        *,
        creation: CreationError | None = None,
        parse_int: ValueError | None = None,
    ) -> None:
        if (creation is None) == (parse_int is None):
            raise TypeError("exactly one of creation and parse_int must be given")
        super().__init__(str(creation if creation is not None else parse_int))
        self.creation = creation
        self.parse_int = parse_int


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse text as a positive, nonzero 64-bit integer."""
    try:
        value = _parse_int(text, bits=64)
    except ValueError as err:
        raise ParsePosNonzeroError(parse_int=err) from err
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as err:
        raise ParsePosNonzeroError(creation=err) from err