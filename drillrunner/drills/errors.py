"""Drills on reporting and propagating errors."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed integer of the given width, strictly, without whitespace."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _INTEGER.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > 2 ** (bits - 1) - 1:
        raise ValueError("number too large to fit in target type")
    if value < -(2 ** (bits - 1)):
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Return nametag text; an empty name is refused."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Five tokens per item plus a one-token processing fee."""
    processing_fee = 1
    cost_per_item = 5
    qty = _parse_int(item_quantity, 32)
    total = qty * cost_per_item + processing_fee
    if not -(2**31) <= total <= 2**31 - 1:
        raise OverflowError("attempt to compute cost with overflow")
    return total


def purchase(tokens: int, item_quantity: str) -> str:
    """Describe the outcome of buying the given quantity with the given tokens."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        return "You can't afford that many!"
    return f"You now have {tokens - cost} tokens."


class CreationKind(enum.Enum):
    """Why a positive nonzero integer could not be created."""

    NEGATIVE = "number is negative"
    ZERO = "number is zero"


class CreationError(ValueError):
    """The value was not positive and nonzero."""

    def __init__(self, kind: CreationKind) -> None:
        super().__init__(kind.value)
        self.kind = kind


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer known to be greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise CreationError(CreationKind.NEGATIVE)
        if self.value == 0:
            raise CreationError(CreationKind.ZERO)


class ParsePosNonzeroError(ValueError):
    """Parsing failed either on the digits or on the value's sign."""

    def __init__(self, error: ValueError) -> None:
        super().__init__(str(error))
        self.error = error

    @property
    def creation(self) -> CreationKind | None:
        """The creation failure, or None if the text was not an integer."""
        if isinstance(self.error, CreationError):
            return self.error.kind
        return None


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse text into a positive nonzero integer."""
    try:
        value = _parse_int(text, 64)
    except ValueError as err:
        raise ParsePosNonzeroError(err) from err
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as err:
        raise ParsePosNonzeroError(err) from err