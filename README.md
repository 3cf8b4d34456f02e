# algokit

Classic algorithms as plain Python functions and classes: range-query
structures (sparse tables, segment trees, Fenwick trees, a persistent array),
modular combinatorics, number theory, matrix exponentiation, string matching
and integer plane geometry.

It uses only the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `algokit.range_static` | `SparseTable` (`fold`, `overlap`), `PrefixGrid` (`count`), `static_range_sums`, `static_range_minimums`, `range_xors`, `forest_queries` |
| `algokit.point_trees` | `SumTree`, `MinTree`, `RangeAddTree`; `dynamic_range_sums`, `dynamic_range_minimums`, `range_update_queries` |
| `algokit.forest2d` | `ForestTree`, a 2-D binary indexed tree over a grid of `.` and `*` cells, and `forest_queries_ii` |
| `algokit.searches` | `MaxTree` (`first_at_least`, `add`) with `hotel_queries`; `CountTree` (`find_kth`, `remove`) with `list_removals` |
| `algokit.lazy` | `PolynomialTree` and `AssignAddTree` with lazy propagation; `polynomial_queries`, `range_updates_and_sums` |
| `algokit.persistent` | `PersistentSumArray`, an immutable array whose `with_value` returns a new version; `range_queries_and_copies` |
| `algokit.max_trees` | `PizzeriaTree`, `PrefixSumTree`, `SubarraySumTree` and their query functions |
| `algokit.offline` | `distinct_values_queries`, `increasing_array_queries`, `salary_queries` |
| `algokit.combinatorics` | `modular_inverse`, `bracket_sequences`, `derangements`, `creating_strings`, `distributing_apples`, `prime_multiples`, `dice_probability` |
| `algokit.number_theory` | `power_mod`, `exponentiation`, `exponentiation_ii`, `common_divisors` (largest gcd of any pair), `divisor_count_table`, `counting_divisors`, `josephus` |
| `algokit.matrices` | `matrix_multiply`, `matrix_power`, `fibonacci`, `graph_paths`, `throwing_dice` |
| `algokit.strings` | `z_function`, `finding_borders`, `string_matching`, `Trie`, `word_combinations` |
| `algokit.geometry` | `Point`, `Location`, `point_location`, `segments_intersect`, `Placement`, `segment_contains`, `point_in_polygon`, `polygon_area`, `polygon_lattice_points` |
| `algokit.hull` | `convex_hull`, `minimum_distance` (squared) |

Methods of the tree classes take 0-based indexes and half-open
`(left, right)` ranges. The `*_queries` style functions take 1-based,
inclusive operations as tuples and return a list of answers. Counts that are
taken modulo 10^9 + 7 (`combinatorics`, `matrices`, `word_combinations`,
`exponentiation`) are returned reduced. Out-of-range indexes raise
`IndexError`; meaningless arguments raise `ValueError`.

`polygon_area` returns twice the polygon's area, so that it stays an integer.

## Examples

```python
from algokit.point_trees import SumTree
from algokit.combinatorics import bracket_sequences
from algokit.strings import string_matching
from algokit.geometry import Point, polygon_area

tree = SumTree([3, 2, 4, 5, 1, 1, 5, 3])
tree.set(3, 10)
tree.sum(1, 5)                      # 2 + 4 + 10 + 1 = 17

bracket_sequences(6)                # 5
string_matching("saippuakauppias", "pp")   # 2

square = [Point(0, 0), Point(2, 0), Point(2, 2), Point(0, 2)]
polygon_area(square)                # twice the area: 8
```

```python
from algokit.persistent import PersistentSumArray

base = PersistentSumArray([1, 2, 3])
changed = base.with_value(0, 10)
base.sum(0, 3), changed.sum(0, 3)   # (6, 15)
```

## What it does not do

The package is a library only. It has no command-line program and does not
read problem input from standard input or print answers; callers pass Python
values to the functions and get the results back.