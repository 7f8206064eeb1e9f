# algokit

A small library of classic algorithm routines on arrays, strings, numbers,
linked lists, binary trees and grids. It has no runtime dependencies and
needs Python 3.10 or later.

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

| Module | What it holds |
| --- | --- |
| `algokit.nodes` | `ListNode`, `TreeNode`, `list_from_values`, `list_to_values`, `tree_from_level_order`, `tree_to_level_order` |
| `algokit.linked_lists` | `add_two_numbers`, `remove_nth_from_end`, `merge_two_lists`, `merge_k_lists`, `swap_pairs`, `reverse_k_group` |
| `algokit.trees` | `inorder_traversal`, `level_order`, `generate_trees`, `num_trees`, `is_valid_bst`, `recover_tree`, `is_same_tree`, `is_symmetric` |
| `algokit.sums` | `add`, `two_sum`, `three_sum`, `three_sum_closest`, `four_sum`, `max_area`, `trap` |
| `algokit.arrays` | `find_median_sorted_arrays`, `remove_duplicates`, `remove_element`, `next_permutation`, `search_rotated`, `search_range`, `search_insert`, `first_missing_positive`, `jump`, `max_sub_array` |
| `algokit.strings` | `length_of_longest_substring`, `longest_palindrome`, `convert_zigzag`, `my_atoi`, `longest_common_prefix`, `is_valid_parentheses`, `str_str`, `find_substring`, `longest_valid_parentheses`, `count_and_say`, `group_anagrams` |
| `algokit.patterns` | `regex_match` (`.` and `*`) and `wildcard_match` (`?` and `*`) |
| `algokit.numbers` | `reverse_integer`, `is_palindrome_number`, `int_to_roman`, `roman_to_int`, `divide`, `multiply_strings`, `my_pow` |
| `algokit.combinatorics` | `letter_combinations`, `generate_parenthesis`, `combination_sum`, `combination_sum2`, `permute`, `permute_unique` |
| `algokit.grids` | `is_valid_sudoku`, `solve_sudoku`, `rotate`, `spiral_order` |

## Examples

```python
from algokit.sums import two_sum
from algokit.numbers import int_to_roman, roman_to_int
from algokit.nodes import list_from_values, list_to_values
from algokit.linked_lists import add_two_numbers

two_sum([2, 7, 11, 15], 9)          # [1, 0]: the later index comes first
int_to_roman(1994)                  # "MCMXCIV"
roman_to_int("MCMXCIV")             # 1994

total = add_two_numbers(list_from_values([2, 4, 3]), list_from_values([5, 6, 4]))
list_to_values(total)               # [7, 0, 8]
```

Iterating over a `ListNode` yields the values from that node to the end of
the list.

Trees are built from and written out as level-order lists, with `None` for a
missing child. `tree_from_level_order` raises `ValueError` when values are
left over that no node can hold; `tree_to_level_order` drops trailing `None`
entries.

```python
from algokit.nodes import tree_from_level_order
from algokit.trees import level_order, is_symmetric

root = tree_from_level_order([3, 9, 20, None, None, 15, 7])
level_order(root)                   # [[3], [9, 20], [15, 7]]
is_symmetric(root)                  # False
```

## Behaviour worth knowing

- Some routines work in place: `next_permutation`, `remove_duplicates`,
  `remove_element`, `rotate`, `solve_sudoku`, `recover_tree`, `swap_pairs`,
  `reverse_k_group`, `remove_nth_from_end` and `merge_two_lists` change or
  relink what they are given. `merge_k_lists` and `add_two_numbers` build new
  lists.
- `remove_element` moves the kept values to the front in ascending order.
- `solve_sudoku` returns `True` when it fills the board and `False`, with the
  board unchanged, when there is no solution.
- `generate_trees` may share subtrees between the trees it returns.
- `permute` returns permutations in lexicographic order from the sorted values;
  `permute_unique` starts from the given arrangement and wraps around.
- `reverse_integer`, `my_atoi` and `divide` keep their results within the
  signed 32-bit range: `reverse_integer` gives 0 on overflow, the others clamp.
- Invalid input raises `ValueError` (for example an empty list for
  `max_sub_array`, a non-square matrix for `rotate`, a pattern starting with
  `*` for `regex_match`); `divide` by zero and `my_pow(0, n)` with negative `n`
  raise `ZeroDivisionError`.

## What it does not do

algokit is a library only: it has no command-line interface and keeps no
state between calls.