# judgekit

Solutions to a set of introductory online-judge problems: Beecrowd beginner
problems and Codeforces problems rated 800 and 900. Each problem is available
as a plain Python function. You can also run each problem on judge-style input
text and get back the output the judge expects.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Using the functions

Each group of problems lives in its own module:

- `judgekit.beecrowd`: Beecrowd beginner problems (`hello_world`, `extremely_basic`)
- `judgekit.rating800`: Codeforces problems rated 800 (`beautiful_matrix_moves`,
  `bit_plus_plus`, `blackboard_winner`, `domino_count`, `helpful_maths`,
  `next_round_count`, `shares_common_digit`, `smallest_shared_digit`,
  `compare_ignoring_case`, `team_count`, `can_split_watermelon`, `abbreviate`,
  `fix_word_case`, `shrink_permutation`, `tournament_can_survive`)
- `judgekit.rating900`: Codeforces problems rated 900 (`is_dangerous`)

```python
from judgekit.rating800 import abbreviate, domino_count, helpful_maths
from judgekit.rating900 import is_dangerous

abbreviate("localization")        # "l10n"
abbreviate("word")                # "word"
helpful_maths("3+2+1")            # "1+2+3"
domino_count(3, 3)                # 4
is_dangerous("00100110111111101") # True
```

Some functions check their input. If it is invalid they raise `ValueError`.
For example, `beautiful_matrix_moves` raises it for a matrix that is not 5 by 5.

## Running a problem on judge input

Every problem module has a `problems()` function. It returns a dictionary from
problem id to solver, for example `"1000"` and `"1001"` in `judgekit.beecrowd`,
`"71A"` or `"2123B"` in `judgekit.rating800`, and `"96A"` in `judgekit.rating900`.

`solve(problem, text)` takes the full input text, formatted the way the judge
gives it, and returns the output the judge expects:

```python
from judgekit import beecrowd, rating800

beecrowd.solve("1000", "")              # "Hello World!\n"
beecrowd.solve("1001", "10 9")          # "X = 19\n"
rating800.solve("71A", "2\nword\nlocalization\n")  # "word\nl10n\n"
```

An unknown problem id raises `KeyError`. Input that ends too early raises
`ValueError`.

## What is not included

The package has no command-line program. To feed it judge input, read the
input yourself, for example from standard input, and pass the text to `solve`.
It covers only the problems listed above. It has no problems rated above 900.