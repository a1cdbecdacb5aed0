"""Solutions to Codeforces problems rated 900."""

from __future__ import annotations

from collections.abc import Callable

_DANGER_RUN = 7
# Indexed by whether the situation is dangerous.
_FOOTBALL_ANSWERS = ("NO", "YES")


class _Tokens:
    """Whitespace-separated tokens read from judge input."""

    def __init__(self, text: str) -> None:
        self._items = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._items)
        except StopIteration:
            raise ValueError("unexpected end of input") from None


def is_dangerous(situation: str) -> bool:
    """Whether seven or more players of one team stand in a row."""
    return "0" * _DANGER_RUN in situation or "1" * _DANGER_RUN in situation


def _solve_96a(text: str) -> str:
    situation = _Tokens(text).word()
    return _FOOTBALL_ANSWERS[is_dangerous(situation)]


_PROBLEMS: dict[str, Callable[[str], str]] = {
    "96A": _solve_96a,
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