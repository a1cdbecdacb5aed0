import pytest

from judgekit import rating900


@pytest.mark.parametrize(
    "situation, expected",
    [
        ("001001", False),
        ("1000000001", True),
        ("0000000", True),
        ("1111111", True),
        ("111111", False),
        ("000000111111", False),
        ("01111111", True),
    ],
)
def test_is_dangerous(situation, expected):
    assert rating900.is_dangerous(situation) is expected


def test_solve_answers_yes_and_no():
    assert rating900.solve("96A", "1000000001\n") == "YES"
    assert rating900.solve("96A", "001001\n") == "NO"


def test_solve_rejects_empty_input():
    with pytest.raises(ValueError):
        rating900.solve("96A", "")


def test_solve_rejects_unknown_problem():
    with pytest.raises(KeyError):
        rating900.solve("nope", "0")


def test_problems_lists_football_and_is_a_copy():
    table = rating900.problems()
    assert set(table) == {"96A"}
    table.clear()
    assert "96A" in rating900.problems()