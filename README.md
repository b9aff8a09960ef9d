# algolab

A collection of classic algorithms written as plain Python functions. It
has no dependencies beyond the standard library. It covers sorting, bit
tricks, binary search, array and matrix problems, backtracking, dynamic
programming, graph traversal and shortest paths, singly and doubly linked
lists, bracket matching and a sum segment tree.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

`algolab-sort` reads whitespace-separated integers from standard input: a
count, then that many values. It prints five blocks, one each for
selection, bubble, insertion, merge and quick sort. Every block is a title
line followed by the sorted values, each value followed by a space. The
blocks are separated by a line holding a single space. The command exits
with a usage error when the input is missing, is not made of integers, or
holds fewer values than the count.

```
echo "5 4 1 3 5 2" | algolab-sort
```

## Library overview

| Module | What it offers |
| --- | --- |
| `algolab.sorting` | `selection_sort`, `bubble_sort`, `insertion_sort`, `merge_sort`, `quick_sort` (each returns a new sorted list), `main` |
| `algolab.bits` | `to_binary`, `from_binary`, `is_power_of_two`, `odd_even`, `bit_operations`, `is_kth_bit_set`, `set_rightmost_unset`, `unset_rightmost_set`, `xor_swap` |
| `algolab.backtracking` | `arrangements`, `n_queens`, `palindrome_partitions`, `generate_parentheses`, `solve_sudoku`, `word_exists` |
| `algolab.brackets` | `is_valid_brackets` |
| `algolab.segment_tree` | `SegmentTree` with point `update` and inclusive range-sum `query` |
| `algolab.dp` | `coin_combinations`, `dice_combinations`, `fibonacci`, `min_path_sum`, `max_non_adjacent_sum`, `min_coins`, `ninja_training` |
| `algolab.graph_traversal` | `build_adjacency`, `format_adjacency`, `bfs`, `dfs`, `dfs_recursive`, `has_cycle_bfs`, `has_cycle_dfs` |
| `algolab.graph_paths` | `dijkstra`, `topo_sort_kahn`, `topo_sort_dfs`, `dag_shortest_paths`, `unit_shortest_paths` |
| `algolab.searching` | `binary_search`, `binary_search_recursive`, `search_insert`, `search_range`, `search_rotated`, `search_rotated_with_duplicates`, `find_min_rotated`, `find_peak`, `single_non_duplicate`, `kth_missing_positive`, `kth_missing_positive_linear`, `ship_within_days`, `smallest_divisor`, `min_bouquet_days`, `min_eating_speed` |
| `algolab.sums` | `two_sum`, `two_sum_sorted`, `three_sum`, `four_sum`, `median_of_two`, `merge_intervals`, `max_distance`, `merge_sorted_into` |
| `algolab.matrix` | `pascal_triangle`, `rotate_matrix`, `spiral_order`, `set_zeroes` |
| `algolab.arrays` | `leaders`, `max_profit`, `longest_consecutive`, `longest_consecutive_sorted`, `single_number`, `frequency_sort`, `majority_element`, `majority_elements`, `majority_elements_voting`, `rotate`, `rotate_by_copy`, `rearrange_alternating`, `move_zeroes`, `missing_number`, `missing_number_scan`, `missing_number_counting`, `next_permutation`, `max_consecutive_ones`, `max_subarray`, `remove_duplicates`, `sort_colors` |
| `algolab.linked_list` | `Node`, `from_values`, `to_list`, `iter_nodes`, `format_list`, `prepend`, `length`, `contains`, `delete_node` |
| `algolab.list_problems` | `remove_nth_from_end`, `has_cycle`, `detect_cycle`, `intersection_node`, `reverse_list`, `reverse_list_recursive` |
| `algolab.list_transforms` | `delete_middle`, `is_palindrome`, `reverse_k_group`, `odd_even_list`, `rotate_right`, `middle_node` |
| `algolab.doubly_linked` | `DoublyNode`, `from_values`, `to_list`, `format_list`, `delete_at`, `insert_after` |

## Conventions worth knowing

- Functions that reorder a list in place return `None`. These are
  `rotate`, `rotate_by_copy`, `move_zeroes`, `next_permutation`,
  `sort_colors`, `rotate_matrix`, `set_zeroes` and `merge_sorted_into`.
  `remove_duplicates` also works in place and returns the count of
  distinct values. `solve_sudoku` fills the board in place and returns
  whether it succeeded.
- "Not found" answers are `-1` (or `(-1, -1)` for index pairs), except in
  `search_rotated_with_duplicates`, `has_cycle*` and `word_exists`, which
  return booleans. `detect_cycle` and `intersection_node` return `None`
  when there is no such node.
- `two_sum` returns `(later index, earlier index)`. `four_sum` lists each
  quadruple as the two smallest values, then the largest, then the third.
- `build_adjacency`, `bfs`, `dfs` and `format_adjacency` number vertices
  from 1 and leave index 0 unused. The cycle checks and everything in
  `graph_paths` treat every index from 0 as a vertex. Unreachable vertices
  get distance `-1`.
- `coin_combinations` and `dice_combinations` count ordered sequences
  modulo 1 000 000 007.
- In `bit_operations` the bit position is 1-based. In `is_kth_bit_set` it
  is 0-based.
- `delete_at` uses a 1-based position. `insert_after` uses a 0-based
  position. Both raise `IndexError` when the position does not exist.
- Invalid arguments raise `ValueError`, for example empty inputs where a
  value is needed, negative sizes, or a k of zero.

## Examples

```python
from algolab.sorting import merge_sort
from algolab.backtracking import generate_parentheses
from algolab.segment_tree import SegmentTree
from algolab.linked_list import from_values, to_list
from algolab.list_problems import reverse_list

merge_sort([5, 2, 9, 1])          # [1, 2, 5, 9]
generate_parentheses(2)           # ['(())', '()()']

tree = SegmentTree([1, 3, 5, 7, 9, 11])
tree.query(1, 3)                  # 15
tree.update(1, 10)
tree.query(1, 3)                  # 22

to_list(reverse_list(from_values([1, 2, 3])))   # [3, 2, 1]
```

## What it does not do

`algolab-sort` is the only command. Every other algorithm is available
only as a library function that takes Python values. Nothing reads graphs,
grids or boards from files or standard input. The segment tree supports
point updates only; it has no range updates and no lazy propagation.