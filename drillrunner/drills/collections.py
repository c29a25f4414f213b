"""Drills on maps, lists and iterator-style processing of collections."""

from __future__ import annotations

import enum
import math
import re
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass

_U8_MAX = 2**8 - 1
_U64_MAX = 2**64 - 1
_UNSIGNED = re.compile(r"\+?[0-9]+")


def default_fruit_basket() -> dict[str, int]:
    """A basket of at least three kinds of fruit and at least five pieces."""
    return {"banana": 2, "apple": 2, "pear": 2}


class Fruit(enum.Enum):
    """Kinds of fruit that may go into a basket."""

    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fill_fruit_basket(basket: dict[Fruit, int]) -> None:
    """Add one of every kind of fruit not already in the basket, in place."""
    for fruit in Fruit:
        basket.setdefault(fruit, 1)


@dataclass
class Team:
    """A team's name with the goals it scored and conceded."""

    name: str
    goals_scored: int = 0
    goals_conceded: int = 0

    def record(self, scored: int, conceded: int) -> None:
        """Add the goals of one match, refusing totals above 255."""
        goals_scored = self.goals_scored + scored
        goals_conceded = self.goals_conceded + conceded
        if goals_scored > _U8_MAX or goals_conceded > _U8_MAX:
            raise OverflowError("attempt to add with overflow")
        self.goals_scored = goals_scored
        self.goals_conceded = goals_conceded


def _parse_goals(text: str) -> int:
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _UNSIGNED.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > _U8_MAX:
        raise ValueError("number too large to fit in target type")
    return value


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def build_scores_table(results: str) -> dict[str, Team]:
    """Build a table of teams from lines of "team1,team2,goals1,goals2"."""
    scores: dict[str, Team] = {}
    for line in _lines(results):
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"expected 4 fields in {line!r}, found {len(fields)}")
        team_1_name, team_2_name = fields[0], fields[1]
        team_1_score = _parse_goals(fields[2])
        team_2_score = _parse_goals(fields[3])
        scores.setdefault(team_1_name, Team(team_1_name)).record(
            team_1_score, team_2_score
        )
        scores.setdefault(team_2_name, Team(team_2_name)).record(
            team_2_score, team_1_score
        )
    return scores


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """A fixed array and a list holding the same elements."""
    array = (10, 20, 30, 40)
    vector = [10, 20, 30, 40]
    return array, vector


def vec_loop(values: list[int]) -> list[int]:
    """Double every element of the list in place and return the same list."""
    for index, value in enumerate(values):
        values[index] = value * 2
    return values


def vec_map(values: Iterable[int]) -> list[int]:
    """Return a new list with every element doubled."""
    return [value * 2 for value in values]


def capitalize_first(text: str) -> str:
    """Upper-case the first character of text: "hello" -> "Hello"."""
    if not text:
        return ""
    return text[0].upper() + text[1:]


def capitalize_words_vector(words: Iterable[str]) -> list[str]:
    """Capitalize each word: ["hello", "world"] -> ["Hello", "World"]."""
    return [capitalize_first(word) for word in words]


def capitalize_words_string(words: Iterable[str]) -> str:
    """Capitalize each word and join them: ["hello", " ", "world"] -> "Hello World"."""
    return "".join(capitalize_first(word) for word in words)


class DivisionError(ArithmeticError):
    """A division could not produce a whole result."""


class NotDivisibleError(DivisionError):
    """The dividend is not evenly divisible by the divisor."""

    def __init__(self, dividend: int, divisor: int) -> None:
        super().__init__(f"{dividend} is not divisible by {divisor}")
        self.dividend = dividend
        self.divisor = divisor

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NotDivisibleError):
            return NotImplemented
        return (self.dividend, self.divisor) == (other.dividend, other.divisor)

    def __hash__(self) -> int:
        return hash((self.dividend, self.divisor))


class DivideByZeroError(DivisionError):
    """The divisor was zero."""

    def __init__(self) -> None:
        super().__init__("division by zero")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DivideByZeroError):
            return NotImplemented
        return True

    def __hash__(self) -> int:
        return hash(DivideByZeroError)


def divide(a: int, b: int) -> int:
    """Divide a by b when a is evenly divisible by b."""
    if b == 0:
        raise DivideByZeroError()
    if a % b != 0:
        raise NotDivisibleError(a, b)
    return a // b


_NUMBERS = (27, 297, 38502, 81)
_DIVISOR = 27


def result_with_list() -> list[int]:
    """Divide each sample number by 27; the first failure is raised."""
    return [divide(n, _DIVISOR) for n in _NUMBERS]


def _try_divide(a: int, b: int) -> int | DivisionError:
    try:
        return divide(a, b)
    except DivisionError as err:
        return err


def list_of_results() -> list[int | DivisionError]:
    """Divide each sample number by 27, keeping each failure in place as its error."""
    return [_try_divide(n, _DIVISOR) for n in _NUMBERS]


def factorial(num: int) -> int:
    """Factorial of an unsigned 64-bit number, refusing results that do not fit."""
    if num < 0:
        raise ValueError(f"{num} is not an unsigned integer")
    result = math.prod(range(1, num + 1))
    if result > _U64_MAX:
        raise OverflowError("attempt to multiply with overflow")
    return result


class Progress(enum.Enum):
    """How far an exercise has been completed."""

    NONE = "none"
    SOME = "some"
    COMPLETE = "complete"


def count_for(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Count entries with the given progress using an explicit loop."""
    count = 0
    for progress in progress_map.values():
        if progress is value:
            count += 1
    return count


def count_iterator(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Count entries with the given progress using a generator."""
    return sum(1 for progress in progress_map.values() if progress is value)


def count_collection_for(
    collection: Sequence[Mapping[str, Progress]], value: Progress
) -> int:
    """Count entries with the given progress across maps using explicit loops."""
    count = 0
    for progress_map in collection:
        for progress in progress_map.values():
            if progress is value:
                count += 1
    return count


def count_collection_iterator(
    collection: Iterable[Mapping[str, Progress]], value: Progress
) -> int:
    """Count entries with the given progress across maps using generators."""
    return sum(count_iterator(progress_map, value) for progress_map in collection)