# drills

Short, self-contained solutions to classic coding-interview exercises. They cover
singly linked lists, binary trees, integer puzzles, string scanning, searching,
counting and array rearrangement. The package uses only the standard library.

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

- `drills.linked_list` has the `ListNode` dataclass (`val`, `next`; iterating over a
  node yields it and every node after it), the helpers `build_list` and
  `list_values`, and `has_cycle`, `get_intersection_node`, `remove_nth_from_end`,
  `add_two_numbers`, `remove_elements`, `reverse_list`, `merge_two_lists`,
  `pair_sum`, `merge_k_lists`, `is_palindrome_list`, `rotate_right` and
  `delete_duplicates`.
- `drills.trees` has the `TreeNode` dataclass (`val`, `left`, `right`) and
  `is_same_tree`, `preorder_traversal`, `postorder_traversal` and `search_bst`.
- `drills.numbers` has `subtract_product_and_sum`, `hamming_weight`,
  `is_power_of_two`, `colored_cells`, `is_ugly`, `difference_of_sums`,
  `triangle_type`, `is_perfect_square`, `my_sqrt`, `reverse_integer` (0 when the
  result leaves the signed 32-bit range) and `is_palindrome_number`.
- `drills.strings` has `count_good_substrings`, `find_words_containing`,
  `clear_digits`, `length_of_last_word` and `find_restaurant`.
- `drills.searching` has `first_bad_version` (takes the predicate as its second
  argument), `search_rotated`, `search_rotated_with_duplicates`,
  `peak_index_in_mountain_array` and `target_indices`.
- `drills.counting` has `two_sum`, `num_equiv_domino_pairs`, `single_number`,
  `num_identical_pairs`, `count_good_triplets`, `three_consecutive_odds`,
  `contains_duplicate`, `contains_nearby_duplicate`, `find_duplicate`,
  `first_missing_positive`, `find_disappeared_numbers`, `distribute_candies`,
  `find_error_nums`, `num_rabbits`, `find_even_numbers` and
  `num_of_unplaced_fruits`.
- `drills.rearrange` has `last_stone_weight`, `maximum_units`, `apply_operations`,
  `remove_duplicates`, `remove_element`, `move_zeroes`, `min_sum`,
  `can_place_flowers`, `find_max_average` and `merge`. `remove_duplicates`,
  `remove_element`, `move_zeroes` and `merge` change the list they are given.

Where an exercise has no answer, the function returns `None`: `two_sum`,
`find_duplicate`, `first_bad_version`, `search_rotated`,
`peak_index_in_mountain_array`, `get_intersection_node` and `min_sum` do so.
Inputs outside what an exercise allows, such as an out-of-range `n` for
`remove_nth_from_end` or a negative number for `my_sqrt`, raise `ValueError`.

## Example

```python
from drills.linked_list import build_list, list_values, reverse_list
from drills.numbers import reverse_integer
from drills.searching import first_bad_version

print(list_values(reverse_list(build_list([1, 2, 3]))))   # [3, 2, 1]
print(reverse_integer(-123))                               # -321
print(first_bad_version(10, lambda v: v >= 4))             # 4
```

## What it does not do

`drills` is a library of functions only. It has no command-line program, reads
no input files and prints nothing; call the functions from your own code or
from the tests.