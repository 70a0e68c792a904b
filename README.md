# dsapuzzles

Solutions to a set of classic algorithm exercises and to two puzzle events,
written as plain Python functions. There are no third-party dependencies.

## Contents

### `dsapuzzles.leetcode`

- `tree`: `TreeNode`, `is_same_tree`, `is_symmetric`,
  `is_symmetric_recursive`, `max_depth`, `preorder_traversal`,
  `inorder_traversal`, `postorder_traversal`.
- `bst`: `search_bst`, `bst_from_preorder`, `diameter_of_binary_tree`,
  `level_order`.
- `linked_list`: `ListNode`, `from_values`, `to_values`, `reverse_list`,
  `merge_two_lists`, `middle_node`, `add_two_numbers`.
- `arrays`: `two_sum`, `max_profit`, `majority_element`, `hamming_weight`,
  `contains_duplicate`, `add`, `remove_duplicates`, `next_greater_element`,
  `flood_fill`, `max_area`, `longest_consecutive`, `three_sum`, `find_min`,
  `product_except_self`, `search_rotated`, `top_k_frequent`, `permute`,
  `sort_colors`.
- `strings`: `roman_to_int`, `longest_common_prefix`, `is_palindrome`,
  `is_valid`, `is_anagram`, `str_str`, `length_of_longest_substring`,
  `group_anagrams`.
- `structures`: `MyStack` (holds at most 100 integers) and `MyQueue`
  (a queue built from two stacks). Popping or peeking when empty raises
  `IndexError`.

### `dsapuzzles.codyssi`

Each solver takes the puzzle input as text and returns the answers.

- `summer_at_the_lab`: `handling_the_budget`, `sensors_and_circuits`,
  `unformatted_readings` (with `to_base65`), `traversing_the_country`.
- Journey to Atlantis, one module per problem, each with a `solve(text)`:
  `compass_calibration`, `absurd_arithmetic`, `supplies_in_surplus`,
  `aeolian_transmissions`, `patron_islands`, `lotus_scramble`,
  `siren_disruption`, `risky_shortcut`, `windy_bargain`, `cyclops_chaos`,
  `games_in_a_storm`, `laestrygonian_guards`, `crucial_crafting`.
  Most return a tuple of three answers; `crucial_crafting.solve` returns one.

### `dsapuzzles.everybody_codes`

Kingdom of Algorithmia quests: `farmlands`, `runes_of_power`,
`mining_maestro`, `smiths_puzzle`, `clap_dance`, `tree_of_titans` and
`racing`. Most expose `part1`, `part2` and `part3` taking the input text;
`clap_dance` parts take a floor from `parse_dance_floor`, and `racing`
offers `parse_devices`, `parse_track`, `run_laps`, `rank_device_plans`,
`all_plans` and `winning_plans_count`.

## Installation

```
pip install .
```

## Using the library

```python
from dsapuzzles.leetcode.arrays import two_sum
from dsapuzzles.leetcode.strings import roman_to_int
from dsapuzzles.everybody_codes.smiths_puzzle import part1

two_sum([3, 2, 4], 6)          # [1, 2]
roman_to_int("MCMXCIV")        # 1994
part1("3\n4\n7\n8")            # strikes needed to level the nails
```

## Running the puzzles

The `dsapuzzles` command reads puzzle inputs from a directory and prints the
answers of every part as a tree:

```
dsapuzzles                      # Kingdom of Algorithmia quests
dsapuzzles codyssi              # Summer at the Lab and Journey to Atlantis
dsapuzzles --input path/to/inputs
```

The input directory defaults to `input` and is laid out as:

```
input/
  codyssi/summer_at_the_lab/problem1.txt ... problem4.txt
  codyssi/journey_to_atlantis/problem1.txt ... problem14.txt
  everybody_codes/kingdom_of_algorithmia/questN/part1.txt ... part3.txt
  everybody_codes/kingdom_of_algorithmia/quest7/part2_track.txt
  everybody_codes/kingdom_of_algorithmia/quest7/part3_track.txt
```

A missing or malformed input file makes the command print an error and
exit with status 1.

## What is not included

- No puzzle inputs ship with the package; supply your own.
- Journey to Atlantis problem 12 has no solver, and `problem12.txt` is not
  read. Problem 14 answers only its first part.

## Tests

```
pip install .[test]
pytest
```