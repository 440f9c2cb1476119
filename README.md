# algokit

A collection of classic data structures and algorithms in plain Python,
with no third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algokit.heap` | `heap_sort`, `find_kth_largest`, and a `PriorityQueue` ordered by a comparison function (largest on top by default; pass `operator.gt` for smallest on top) |
| `algokit.containers` | FIFO `Queue`, LIFO `Stack`, and `SharedStack`, two stacks numbered 1 and 2 sharing one fixed capacity (55 by default) |
| `algokit.sorting` | `quicksort` (Hoare partitioning) and `merge_sort` (stable) |
| `algokit.hashing` | `OpenAddressingTable` (linear probing) and `ChainedTable` (separate chaining) for integer keys, plus `is_anagram`, `intersection`, `intersect` |
| `algokit.matching` | `prefix_table`, `kmp_search`, `naive_search`, `replace_all`, `saddle_points` |
| `algokit.sparse` | `Triple` and `SparseMatrix` in triple form, with `parse`, `add`/`+`, `subtract`/`-` and `render` |
| `algokit.dp` | `unique_paths`, `unique_paths_with_obstacles`, `integer_break`, `num_trees`, `massage`, `rob`, `knapsack`, and the `main` entry point of the command below |
| `algokit.linked_list` | `LinkedList` (doubly linked, sentinel head) and `IndexedList` (index-based access that ignores out-of-range additions and deletions) |
| `algokit.dynarray` | `DynamicArray` with explicit `capacity`, `reserve` and `resize`; capacity starts at 2 and doubles when full |
| `algokit.rbtree` | `Color` and `RedBlackTree` with `insert`, `erase`, ordered iteration, `preorder`, `render` and the invariant check `black_height` |
| `algokit.traversal` | `TreeNode` and iterative `preorder`, `inorder`, `postorder` |
| `algokit.pascal` | `generate` for Pascal's triangle and `sort_by_second` |
| `algokit.grid_search` | `knight_distances`, `all_paths`, `count_islands`, `count_islands_bfs`, `max_island_area`, `max_island_area_bfs` and the generator `knight_tours` |
| `algokit.dates` | a `Date` type with chronological ordering, day arithmetic (`+`, `+=`), `days_in_month` and `parse`, and `sum_to` |

## Examples

```python
from algokit.heap import find_kth_largest
from algokit.matching import kmp_search
from algokit.dp import integer_break
from algokit.rbtree import RedBlackTree

find_kth_largest([3, 2, 1, 5, 6, 4], 2)     # 5
kmp_search("abcdabcdef", "cde", 0)           # 6
integer_break(10)                            # 36

tree = RedBlackTree([50, 81, 19, 32, 65])
tree.erase(32)
list(tree)                                   # [19, 50, 65, 81]
```

The hash tables have a fixed number of slots chosen at construction (10 by
default). `render()` returns a tab-separated view with slot numbers on the
first line and the stored keys below:

```python
from algokit.hashing import OpenAddressingTable

table = OpenAddressingTable(10)
for key in (50, 81, 191, 32, 65):
    table.insert(key)                        # returns the slot used
table.search(191)                            # the slot holding 191, or None
print(table.render())
```

## Command line

`algokit-knapsack` solves the 0/1 knapsack problem from standard input. The
input holds the number of items and the knapsack capacity, followed by one
`volume value` pair per item, all as whitespace-separated integers:

```
$ printf '3 5\n2 10\n4 5\n1 4\n' | algokit-knapsack
14
9
```

It prints two lines: the best total value whose volume does not exceed the
capacity, and the best total value whose volume fills the capacity exactly
(0 when no selection fills it).

## Limits

- `algokit-knapsack` is the only command; everything else is used as a library.
- The hash tables never grow: `OpenAddressingTable.insert` raises
  `OverflowError` once every slot is taken, and `SharedStack.push` does the
  same when the shared capacity is used up.
- Nothing is stored on disk; all structures live in memory only.