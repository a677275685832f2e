# algodrills

A small collection of classic algorithm exercises, each written as a plain
function that takes ordinary Python values and returns its answer. It is
meant for study and practice: read a function, call it with your own input,
and compare with what you expected.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Functions |
| --- | --- |
| `algodrills.knapsack` | `max_value` – 0/1 knapsack over `(weight, value)` items and a weight capacity |
| `algodrills.grid` | `ripening_days` – days for ripeness to spread through a grid (multi-source BFS), `-1` if some cell never ripens; `escape_route` – alphabetically first maze walk of exactly `k` moves, or `"impossible"` |
| `algodrills.graph_search` | `infected_count`, `dfs_order`, `bfs_order` over numbered nodes (smaller numbers first); `adjacency_dfs`, `adjacency_bfs` over an adjacency list; `return_distances` – fewest roads from each source to a destination |
| `algodrills.shortest_path` | `min_install_cost` – binary search over a 0/1-weight Dijkstra, with some cables free; `min_bridge_cost` – Kruskal minimum spanning tree |
| `algodrills.sequences` | Lists of length-`m` sequences in ascending order: `distinct_permutations`, `increasing_combinations`, `repeated_products`, `nondecreasing_sequences` over `1..n`; their `value_*` variants over given values and `unique_*` variants with duplicates removed; `format_sequences` to render them one per line |
| `algodrills.greedy` | `supervisor_count`, `book_walk`, `card_string`, `coin_count`, `max_meetings`, `min_expression`, `atm_wait`, `covered_length` |
| `algodrills.dynamic` | `longest_increasing`, `tiling_count` (3 × n board, modulo 1,000,000,007), `max_pulse_sum` |
| `algodrills.demos` | `container_demo`, `sort_demo`, `random_matrix`, `graph_representations`, `main` |

## Examples

```python
from algodrills.dynamic import longest_increasing, tiling_count
from algodrills.greedy import min_expression
from algodrills.sequences import format_sequences, increasing_combinations

longest_increasing([10, 20, 10, 30, 20, 50])   # 4
tiling_count(2)                                # 3
min_expression("55-50+40")                     # -35

print(format_sequences(increasing_combinations(4, 2)), end="")
# 1 2
# 1 3
# ...
```

Invalid input, such as a negative capacity or sequence length, raises
`ValueError`. Where the exercise itself defines a sentinel answer, that
answer is returned instead (for example `-1` when no result exists, or
`"impossible"` from `escape_route`).

## Command line

The package installs one command, which prints short walk-throughs of
Python containers, sorting, and graph representations of a random weighted
graph:

```
algodrills-demo [containers|sort|graph|all] [--seed SEED] [--size SIZE]
```

With no argument every demonstration is printed. `--seed` makes the random
graph reproducible and `--size` sets its number of vertices (0 to 26,
default 5). The graph section headings are printed in Korean.

## What it does not do

The exercises are library functions only. There is no command that reads an
exercise's input from standard input or a file; call the functions from
Python with the values you want to try.