# dsakit

Classic data structures and algorithms in plain Python, with no
dependencies outside the standard library.

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
| `dsakit.trees` | `TreeNode`; iterative `inorder` and `preorder`; `all_traversals`, which returns the inorder, preorder and postorder lists in one pass |
| `dsakit.segment_tree` | `NumArray`: `update(index, val)` and inclusive `sum_range(left, right)` |
| `dsakit.sorting` | `merge_sort` and `quick_sort` (both return a new list), `sort_colors` (sorts 0s, 1s and 2s in place) |
| `dsakit.arrays` | `merge_sorted_in_place` (gap method), `majority_element` (Moore voting), `next_permutation` (in place, wrapping around) |
| `dsakit.hashmap` | `MyHashMap`: integer keys and values with `put`, `get` (-1 when absent) and `remove` |
| `dsakit.parking` | `ParkingLot`, `Vehicle`, `Slot`, `SlotStatus`, `Ticket`, `NoAvailableSlotError` |
| `dsakit.optimization` | `coin_change`, `cherry_pickup`, `max_non_adjacent_sum`, `count_subsets_with_sum`, `knapsack`, `unbounded_knapsack`, `cut_rod` |
| `dsakit.subsequences` | `longest_common_subsequence`, `longest_common_substring`, `all_longest_common_subsequences`, `shortest_common_supersequence`, `num_distinct` |
| `dsakit.searching` | `max_valid_answer`, `binary_search`, `find_peak_element`, `search_sorted_matrix`, `find_pages`, `length_of_lis`, `median_of_sorted_arrays` |
| `dsakit.graphs` | `build_undirected`, `bfs_distances`, `bfs_order`, `bfs_levels`, `shortest_path`, `dfs`, `eventual_safe_nodes`, `count_strongly_connected` |
| `dsakit.windows` | `max_window_sum`, `longest_subarray_with_sum` |
| `dsakit.tasks` | `run_task`, `run_tasks`: named counting tasks writing lines side by side on threads |

Invalid input (a negative amount or capacity, an empty sequence where an
element is needed, a node outside the graph) raises `ValueError` or
`IndexError`.

## Examples

```python
from dsakit.sorting import merge_sort
from dsakit.optimization import coin_change
from dsakit.subsequences import longest_common_subsequence
from dsakit.segment_tree import NumArray

merge_sort([4, 2, 1, 3, 5, 6, 11, 8, 9, 10])   # [1, 2, 3, 4, 5, 6, 8, 9, 10, 11]
coin_change([1, 2, 5], 11)                      # 3
longest_common_subsequence("abcde", "ace")      # 3

ranges = NumArray([1, 3, 5])
ranges.sum_range(0, 2)   # 9
ranges.update(1, 2)
ranges.sum_range(0, 2)   # 8
```

A parking lot has three levels, each with three slots of every size
(1, 2 and 3). A vehicle goes into the first free slot of exactly its size;
`park` returns a `Ticket`, and `NoAvailableSlotError` is raised when none
is free:

```python
from dsakit.parking import ParkingLot, Vehicle

lot = ParkingLot()
car = Vehicle(1, 100)
ticket = lot.park(car)
print(ticket)            # Ticket #: 100 Spot #: 0
lot.parked_spot(car)     # 0
lot.unpark(car)
```

`unpark` and `parked_spot` raise `KeyError` for a vehicle that is not parked.

## Command-line tools

`dsakit-shortest-path` reads an undirected graph from a file, or from
standard input when no file or `-` is given: the number of nodes `n`, then
`n` edges as pairs of node numbers from `0` to `n-1`. It prints the number
of nodes on a shortest path from node 0 to node `n-1` and then the path,
numbering nodes from 1, or a message that the last node cannot be reached:

```
dsakit-shortest-path graph.txt
dsakit-shortest-path < graph.txt
```

`dsakit-tasks` runs one thread per task name (by default `A` and `B`); each
prints `Task <name><i>` for `i` from 0, waiting before every line:

```
dsakit-tasks
dsakit-tasks X Y Z --count 3 --delay 0.5
```

`--count` sets the lines per task (default 10) and `--delay` the seconds
to wait before each line (default 1).