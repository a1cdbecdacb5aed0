"""Solutions to Beecrowd beginner and Codeforces 800 and 900 rated problems."""

__version__ = "0.1.0"