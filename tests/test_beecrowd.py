import pytest

from judgekit import beecrowd


def test_hello_world_text():
    assert beecrowd.hello_world() == "Hello World!"


def test_solve_1000_ignores_input():
    assert beecrowd.solve("1000", "") == "Hello World!\n"
    assert beecrowd.solve("1000", "anything at all") == beecrowd.solve("1000", "")


@pytest.mark.parametrize("a,b", [(0, 0), (3, 4), (-7, 2), (100000, -99999)])
def test_extremely_basic_is_commutative(a, b):
    assert beecrowd.extremely_basic(a, b) == beecrowd.extremely_basic(b, a)


@pytest.mark.parametrize("a", [0, 5, -12, 123456])
def test_extremely_basic_zero_is_identity(a):
    assert beecrowd.extremely_basic(a, 0) == a


def test_extremely_basic_pinned_value():
    assert beecrowd.extremely_basic(10, 9) == 19


def test_solve_1001_format():
    assert beecrowd.solve("1001", "10\n9\n") == "X = 19\n"


@pytest.mark.parametrize("a,b", [(1, 2), (-5, -6), (0, 42)])
def test_solve_1001_matches_function(a, b):
    expected = f"X = {beecrowd.extremely_basic(a, b)}\n"
    assert beecrowd.solve("1001", f"{a} {b}") == expected


def test_solve_1001_missing_operand():
    with pytest.raises(ValueError):
        beecrowd.solve("1001", "7")


def test_solve_1001_non_integer():
    with pytest.raises(ValueError):
        beecrowd.solve("1001", "7 seven")


def test_solve_unknown_problem():
    with pytest.raises(KeyError):
        beecrowd.solve("9999", "")


def test_problems_agree_with_solve():
    table = beecrowd.problems()
    assert set(table) == {"1000", "1001"}
    for problem, solver in table.items():
        assert solver("2 3") == beecrowd.solve(problem, "2 3")


def test_problems_returns_a_copy():
    table = beecrowd.problems()
    table.clear()
    assert len(beecrowd.problems()) == 2