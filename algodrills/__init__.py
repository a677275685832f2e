"""Classic algorithm drills: graph search, backtracking, greedy and dynamic programming."""

__version__ = "0.1.0"