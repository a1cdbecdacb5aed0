"""Solutions to Beecrowd beginner problems."""

from __future__ import annotations

from collections.abc import Callable


class _Tokens:
    """Whitespace-separated tokens read from judge input."""

    def __init__(self, text: str) -> None:
        self._items = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._items)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def number(self) -> int:
        return int(self.word())


def hello_world() -> str:
    """Return the greeting of problem 1000."""
    return "Hello World!"


def extremely_basic(a: int, b: int) -> int:
    """Return the sum asked for by problem 1001."""
    return a + b


def _solve_1000(text: str) -> str:
    return f"{hello_world()}\n"


def _solve_1001(text: str) -> str:
    tokens = _Tokens(text)
    a = tokens.number()
    b = tokens.number()
    return f"X = {extremely_basic(a, b)}\n"


_PROBLEMS: dict[str, Callable[[str], str]] = {
    "1000": _solve_1000,
    "1001": _solve_1001,
}


def problems() -> dict[str, Callable[[str], str]]:
    """Map each problem id to a function turning judge input into judge output."""
    return dict(_PROBLEMS)


def solve(problem: str, text: str) -> str:
    """Answer the judge input ``text`` for ``problem``."""
    try:
        solver = _PROBLEMS[problem]
    except KeyError:
        raise KeyError(f"unknown problem: {problem!r}") from None
    return solver(text)