"""Drills on structs, enums, traits, generics and small data machines."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from dataclasses import dataclass, field
from functools import singledispatch
from typing import Generic, NamedTuple, TypeVar, Union

T = TypeVar("T")

_U16_MAX = 2**16 - 1


@dataclass
class Point:
    """A position on a small grid."""

    x: int
    y: int


@dataclass(frozen=True)
class ChangeColor:
    """Set the machine's color to an RGB triple."""

    color: tuple[int, int, int]


@dataclass(frozen=True)
class Echo:
    """Print a line of text."""

    text: str


@dataclass(frozen=True)
class Move:
    """Move the machine to a point."""

    point: Point


@dataclass(frozen=True)
class Quit:
    """Ask the machine to stop."""


Message = Union[ChangeColor, Echo, Move, Quit]


@dataclass
class MachineState:
    """A machine reacting to messages by changing its color, position or status."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    quit: bool = False

    def process(self, message: Message) -> None:
        """Apply one message to the state."""
        match message:
            case ChangeColor(color):
                self.color = color
            case Echo(text):
                print(text)
            case Move(point):
                self.position = point
            case Quit():
                self.quit = True
            case _:
                raise TypeError(f"unknown message: {message!r}")


@dataclass
class ColorClassic:
    """A color with named components."""

    red: int
    green: int
    blue: int


class ColorTuple(NamedTuple):
    """A color addressed by position."""

    red: int
    green: int
    blue: int


@dataclass(frozen=True)
class UnitLike:
    """A type with no fields at all."""

    def __repr__(self) -> str:
        return "UnitLike"


@dataclass
class Order:
    """A customer order."""

    name: str
    year: int
    made_by_phone: bool
    made_by_mobile: bool
    made_by_email: bool
    item_number: int
    count: int


def create_order_template() -> Order:
    """An order to base other orders on."""
    return Order(
        name="Bob",
        year=2019,
        made_by_phone=False,
        made_by_mobile=False,
        made_by_email=True,
        item_number=123,
        count=0,
    )


@dataclass
class Package:
    """A package to ship between two countries."""

    sender_country: str
    recipient_country: str
    weight_in_grams: int

    def __post_init__(self) -> None:
        if self.weight_in_grams <= 0:
            raise ValueError("Can not ship a weightless package.")

    def is_international(self) -> bool:
        return self.sender_country != self.recipient_country

    def get_fees(self, cents_per_gram: int) -> int:
        return self.weight_in_grams * cents_per_gram


@singledispatch
def append_bar(value):
    """Append "Bar": to a string as text, to a list of strings as a new element."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register
def _(value: str) -> str:
    return value + "Bar"


@append_bar.register
def _(value: list) -> list:
    return [*value, "Bar"]


class Licensed:
    """Anything that carries licensing information."""

    def licensing_info(self) -> str:
        return "Some information"


@dataclass
class SomeSoftware(Licensed):
    """Software with a numeric version."""

    version_number: int = 0


@dataclass
class OtherSoftware(Licensed):
    """Software with a textual version."""

    version_number: str = ""


def compare_license_types(software: Licensed, software_two: Licensed) -> bool:
    """True when both carry the same licensing information."""
    return software.licensing_info() == software_two.licensing_info()


@dataclass
class Wrapper(Generic[T]):
    """Holds a value of any type."""

    value: T


@dataclass(frozen=True)
class Cons:
    """A cell of a cons list; the list ends with None."""

    value: int
    next: Cons | None = None


def create_empty_list() -> Cons | None:
    return None


def create_non_empty_list() -> Cons | None:
    return Cons(1, None)


def maybe_icecream(time_of_day: int) -> int | None:
    """Pieces of ice cream left at the given hour, or None for an impossible hour."""
    if not 0 <= time_of_day <= _U16_MAX:
        raise ValueError(f"{time_of_day} is not an unsigned 16-bit integer")
    if time_of_day < 22:
        return 5
    if 0 < time_of_day < 24:
        return 0
    return None


def abs_all(values: Sequence[int]) -> Sequence[int]:
    """Make every element non-negative, copying only when a change is needed.

    A list is changed in place and returned. Any other sequence is returned
    as it is when nothing is negative, and copied into a new list otherwise.
    """
    if isinstance(values, MutableSequence) and isinstance(values, list):
        for index, value in enumerate(values):
            if value < 0:
                values[index] = -value
        return values
    if any(value < 0 for value in values):
        return [abs(value) for value in values]
    return values


_ACTIONS = ("uppercase", "trim", "append")


@dataclass(frozen=True)
class Command:
    """A string transformation: "uppercase", "trim" or "append" ``count`` times "bar"."""

    action: str
    count: int = 0

    def __post_init__(self) -> None:
        if self.action not in _ACTIONS:
            raise ValueError(f"unknown action: {self.action!r}")
        if self.count < 0:
            raise ValueError("count must not be negative")


def transformer(items: Sequence[tuple[str, Command]]) -> list[str]:
    """Apply each command to its string."""
    output = []
    for text, command in items:
        if command.action == "uppercase":
            output.append(text.upper())
        elif command.action == "trim":
            output.append(text.strip())
        else:
            output.append(text + "bar" * command.count)
    return output


def _format_grade(grade: float | str) -> str:
    if isinstance(grade, float) and grade.is_integer():
        return str(int(grade))
    return str(grade)


@dataclass
class ReportCard:
    """A student's report card with a numeric or alphabetical grade."""

    grade: float | str
    student_name: str
    student_age: int

    def print(self) -> str:
        """Return the report line; students under 12 always get A+."""
        if self.student_age < 12:
            return f"{self.student_name} ({self.student_age}) - achieved a grade of A+"
        return (
            f"{self.student_name} ({self.student_age}) - achieved a grade of "
            f"{_format_grade(self.grade)}"
        )