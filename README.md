# algokit

A small collection of classic algorithms and well-known puzzle solutions,
written as plain Python functions with no third-party dependencies.

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
| `algokit.searching` | `binary_search` (index or -1), `first_greater`, `last_less` (element or -1) on ascending sequences |
| `algokit.sorting` | `quick_sort`, returning a new ascending list |
| `algokit.trees` | `TreeNode`, iterative `inorder` / `preorder` / `postorder` and their `*_recursive` counterparts, `build_preorder`, `build_level_order`, `parse_value` |
| `algokit.tree_diameter` | `farthest_node`, `max_weighted_path` for trees with weighted nodes and edges |
| `algokit.arrays` | `box_delivering`, `largest_altitude`, `count_balls`, `closest_cost`, `nearest_valid_point`, `reinitialize_permutation`, `split_array_same_average`, `sum_subseq_widths` |
| `algokit.text` | `num_different_integers`, `are_sentences_similar`, `digit_count`, `min_distance`, `custom_sort_string`, `num_matching_subseq` |
| `algokit.numeric` | `soup_servings`, `nth_magical_number` |
| `algokit.freq_stack` | `FreqStack`, a stack whose `pop` returns the most frequent value, the most recently pushed among ties |

Invalid input raises `ValueError` (for example a malformed tree token, a
wrong number of edges, or an odd `n` for `reinitialize_permutation`);
popping an empty `FreqStack` raises `IndexError`.

## Examples

```python
from algokit.searching import binary_search, first_greater, last_less
from algokit.sorting import quick_sort
from algokit.text import min_distance
from algokit.freq_stack import FreqStack

values = [2, 4, 5, 7, 9, 10]
binary_search(values, 7)   # 3
first_greater(values, 7)   # 9
last_less(values, 7)       # 5

quick_sort([10, 2, 5, 3, 1, 7])  # [1, 2, 3, 5, 7, 10]

min_distance("horse", "ros")  # 3

stack = FreqStack()
for value in (5, 7, 5, 7, 4, 5):
    stack.push(value)
stack.pop()  # 5
```

Trees can be built from a sequence of tokens, with `"null"` marking an
absent child:

```python
from algokit.trees import build_level_order, preorder

root = build_level_order("1 2 3 null null 4 5 null null null null".split())
preorder(root)  # [1, 2, 3, 4, 5]
```

## Command-line tools

Both commands read whitespace-separated tokens from standard input. On bad
input they print an error to standard error and exit with status 1.

`algokit-tree` reads a binary tree in level order (`null` for a missing
child) and prints its preorder traversal, one value per line. With
`--preorder` it reads the tokens in preorder instead:

```
echo "1 2 3 null null 4 5 null null null null" | algokit-tree
echo "1 2 null null 3 null null" | algokit-tree --preorder
```

`algokit-diameter` reads a node count `n`, then `n` node weights, then
`n - 1` edges as `a b length` with 1-based node numbers, and prints the
largest total of path length plus the weights of the path's two end nodes:

```
printf "3\n1 2 3\n1 2 4\n2 3 5\n" | algokit-diameter
```

This prints `13`.