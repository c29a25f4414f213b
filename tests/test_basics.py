import pytest

from drillrunner.drills.basics import (
    bigger,
    calculate_price_of_apples,
    compose_me,
    current_favorite_color,
    foo_if_fizz,
    is_a_color_word,
    is_even,
    longest,
    replace_me,
    sale_price,
    square,
    trim_me,
)


@pytest.mark.parametrize("quantity, price", [(35, 70), (40, 80), (41, 41), (65, 65)])
def test_calculate_price_of_apples(quantity, price):
    assert calculate_price_of_apples(quantity) == price


def test_ten_is_bigger_than_eight():
    assert bigger(10, 8) == 10


def test_fortytwo_is_bigger_than_thirtytwo():
    assert bigger(32, 42) == 42


@pytest.mark.parametrize(
    "word, expected", [("fizz", "foo"), ("fuzz", "bar"), ("literally anything", "baz")]
)
def test_foo_if_fizz(word, expected):
    assert foo_if_fizz(word) == expected


def test_trim_a_string():
    assert trim_me("Hello!     ") == "Hello!"
    assert trim_me("  What's up!") == "What's up!"
    assert trim_me("   Hola!  ") == "Hola!"


def test_compose_a_string():
    assert compose_me("Hello") == "Hello world!"
    assert compose_me("Goodbye") == "Goodbye world!"


def test_replace_a_string():
    assert replace_me("I think cars are cool") == "I think balloons are cool"
    assert replace_me("I love to look at cars") == "I love to look at balloons"


def test_is_even():
    assert is_even(4)
    assert not is_even(3)


def test_sale_price_discounts():
    assert sale_price(51) == 48
    assert sale_price(52) == 42


def test_square():
    assert square(3) == 9


def test_longest():
    assert longest("abcd", "xyz") == "abcd"
    assert longest("long string is long", "xyz") == "long string is long"
    assert longest("ab", "cd") == "cd"


def test_colors():
    assert current_favorite_color() == "blue"
    assert is_a_color_word("green")
    assert not is_a_color_word("purple")