"""Solutions to Codeforces problems rated 800."""

from __future__ import annotations

import itertools
import string
from collections.abc import Callable, Iterable, Sequence

_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_MATRIX_SIZE = 5
_CENTRE = _MATRIX_SIZE // 2
# Indexed by whether Bob wins.
_BLACKBOARD_PLAYERS = ("Alice", "Bob")
# Indexed by whether the watermelon can be split.
_WATERMELON_ANSWERS = ("No\n", "Yes\n")


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

    def numbers(self, count: int) -> list[int]:
        return [self.number() for _ in range(count)]


def beautiful_matrix_moves(matrix: Iterable[Iterable[int]]) -> int:
    """Moves needed to bring the single 1 of a 5x5 matrix to its centre."""
    rows = [list(row) for row in matrix]
    if len(rows) != _MATRIX_SIZE or any(len(row) != _MATRIX_SIZE for row in rows):
        raise ValueError("matrix must be 5 by 5")
    positions = [
        (i, j) for i, row in enumerate(rows) for j, value in enumerate(row) if value == 1
    ]
    if not positions:
        raise ValueError("matrix holds no 1")
    i, j = positions[-1]
    return abs(i - _CENTRE) + abs(j - _CENTRE)


def bit_plus_plus(statements: Iterable[str]) -> int:
    """Final value of x after running Bit++ statements from zero."""
    return sum(
        1 if statement.startswith("+") or statement.endswith("+") else -1
        for statement in statements
    )


def blackboard_winner(n: int) -> str:
    """Winner of the blackboard game for the given n."""
    bob_wins = n % 4 == 0
    return _BLACKBOARD_PLAYERS[bob_wins]


def domino_count(m: int, n: int) -> int:
    """Most 2x1 dominoes that fit on an m by n board."""
    return m * n // 2


def helpful_maths(expression: str) -> str:
    """Rewrite a sum so its summands appear in non-decreasing order."""
    return "+".join(sorted(c for c in expression if c != "+"))


def next_round_count(k: int, scores: Sequence[int]) -> int:
    """Participants advancing: positive scores at least the k-th place score."""
    scores = list(scores)
    if not 1 <= k <= len(scores):
        raise ValueError("k must lie between 1 and the number of scores")
    threshold = scores[k - 1]
    return sum(1 for score in scores if score >= threshold and score > 0)


def shares_common_digit(x: int, y: int) -> bool:
    """Whether the decimal forms of x and y have a character in common."""
    return bool(set(str(x)) & set(str(y)))


def smallest_shared_digit(x: int) -> int:
    """Smallest non-negative y sharing a digit with x."""
    return next(y for y in itertools.count() if shares_common_digit(x, y))


def compare_ignoring_case(s: str, t: str) -> int:
    """Compare two strings ignoring ASCII case: -1, 0 or 1."""
    a = s.translate(_LOWER)
    b = t.translate(_LOWER)
    return (a > b) - (a < b)


def team_count(problems: Iterable[Sequence[int]]) -> int:
    """Problems for which at least two of the three friends are sure."""
    total = 0
    for votes in problems:
        votes = list(votes)
        if len(votes) != 3:
            raise ValueError("each problem needs exactly three votes")
        if votes.count(1) > 1:
            total += 1
    return total


def can_split_watermelon(n: int) -> bool:
    """Whether n splits into two positive even parts."""
    return n > 2 and n % 2 == 0


def abbreviate(word: str) -> str:
    """Abbreviate words longer than ten characters."""
    if len(word) > 10:
        return f"{word[0]}{len(word) - 2}{word[-1]}"
    return word


def fix_word_case(word: str) -> str:
    """Upper-case the word if most letters are capitals, else lower-case it."""
    upper = sum(c in string.ascii_uppercase for c in word)
    if upper > len(word) - upper:
        return word.translate(_UPPER)
    return word.translate(_LOWER)


def shrink_permutation(n: int) -> list[int]:
    """A permutation of 1..n for the Shrink problem."""
    return [*range(2, n + 1), 1]


def tournament_can_survive(j: int, k: int, strengths: Sequence[int]) -> bool:
    """Whether player j (1-based) can be among the last k players."""
    strengths = list(strengths)
    if not 1 <= j <= len(strengths):
        raise ValueError("j must lie between 1 and the number of players")
    strongest = max([0, *strengths])
    if strengths[j - 1] == strongest:
        return True
    return k >= 2


def _solve_263a(text: str) -> str:
    tokens = _Tokens(text)
    matrix = [tokens.numbers(_MATRIX_SIZE) for _ in range(_MATRIX_SIZE)]
    return str(beautiful_matrix_moves(matrix))


def _solve_282a(text: str) -> str:
    tokens = _Tokens(text)
    count = tokens.number()
    return str(bit_plus_plus([tokens.word() for _ in range(count)]))


def _solve_2123a(text: str) -> str:
    tokens = _Tokens(text)
    cases = tokens.number()
    return "".join(f"{blackboard_winner(tokens.number())}\n" for _ in range(cases))


def _solve_50a(text: str) -> str:
    tokens = _Tokens(text)
    m = tokens.number()
    n = tokens.number()
    return f"{domino_count(m, n)}\n"


def _solve_339a(text: str) -> str:
    return f"{helpful_maths(_Tokens(text).word())}\n"


def _solve_158a(text: str) -> str:
    tokens = _Tokens(text)
    n = tokens.number()
    k = tokens.number()
    return f"{next_round_count(k, tokens.numbers(n))}\n"


def _solve_2126a(text: str) -> str:
    tokens = _Tokens(text)
    cases = tokens.number()
    return "".join(f"{smallest_shared_digit(tokens.number())}\n" for _ in range(cases))


def _solve_112a(text: str) -> str:
    first, second, *_ = [*text.splitlines(), "", ""]
    return f"{compare_ignoring_case(first, second)}\n"


def _solve_231a(text: str) -> str:
    tokens = _Tokens(text)
    count = tokens.number()
    return f"{team_count(tokens.numbers(3) for _ in range(count))}\n"


def _solve_4a(text: str) -> str:
    weight = _Tokens(text).number()
    return _WATERMELON_ANSWERS[can_split_watermelon(weight)]


def _solve_71a(text: str) -> str:
    tokens = _Tokens(text)
    cases = tokens.number()
    return "".join(f"{abbreviate(tokens.word())}\n" for _ in range(cases))


def _solve_59a(text: str) -> str:
    return fix_word_case(_Tokens(text).word())


def _solve_2117b(text: str) -> str:
    tokens = _Tokens(text)
    cases = tokens.number()
    return "".join(
        " ".join(map(str, shrink_permutation(tokens.number()))) + "\n"
        for _ in range(cases)
    )


def _solve_2123b(text: str) -> str:
    tokens = _Tokens(text)
    cases = tokens.number()
    lines = []
    for _ in range(cases):
        n = tokens.number()
        j = tokens.number()
        k = tokens.number()
        survives = tournament_can_survive(j, k, tokens.numbers(n))
        lines.append("YES\n" if survives else "NO\n")
    return "".join(lines)


_PROBLEMS: dict[str, Callable[[str], str]] = {
    "263A": _solve_263a,
    "282A": _solve_282a,
    "2123A": _solve_2123a,
    "50A": _solve_50a,
    "339A": _solve_339a,
    "158A": _solve_158a,
    "2126A": _solve_2126a,
    "112A": _solve_112a,
    "231A": _solve_231a,
    "4A": _solve_4a,
    "71A": _solve_71a,
    "59A": _solve_59a,
    "2117B": _solve_2117b,
    "2123B": _solve_2123b,
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