"""Small drills on variables, functions, conditionals and strings."""


def calculate_price_of_apples(quantity: int) -> int:
    """Two per apple, or one per apple for orders over 40."""
    return quantity * 2 if quantity <= 40 else quantity


def is_even(num: int) -> bool:
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Ten off even prices, three off odd ones."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    return num * num


def bigger(a: int, b: int) -> int:
    return a if a > b else b


def foo_if_fizz(fizzish: str) -> str:
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"


def longest(x: str, y: str) -> str:
    """The longer string by UTF-8 length; y wins ties."""
    return x if len(x.encode("utf-8")) > len(y.encode("utf-8")) else y


def current_favorite_color() -> str:
    return "blue"


def is_a_color_word(attempt: str) -> bool:
    return attempt in ("green", "blue", "red")


def trim_me(text: str) -> str:
    return text.strip()


def compose_me(text: str) -> str:
    return text + " world!"


def replace_me(text: str) -> str:
    return text.replace("cars", "balloons")