# drillbook

A collection of small, classic programming exercises written as plain Python
functions: array manipulation, simple string transforms, and graph and tree
traversals. Each function takes ordinary Python values and returns a new
value; inputs are never modified.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `drillbook.arrays`

- `frequency_count(arr, p)`: how many times each value from 1 to `p` occurs in `arr`. The result has the length of `arr`: it is padded with zeros, or cut short if `p` is larger.
- `xor_adjacent(arr)` and `or_adjacent(arr)`: combine each element with its right neighbour. The last element is left unchanged; an empty input gives an empty list.
- `largest(arr)`: the largest element.
- `count_occurrences(arr, x)`: how many times `x` occurs in `arr`.
- `max_times_min(a, b)`: the maximum of `a` multiplied by the minimum of `b`.
- `reverse_squared_sum(arr)`: with `arr` reversed, the sum of the squares at even positions minus the sum of the squares at odd positions.
- `convert_to_wave(arr)`: swap each consecutive pair of elements; an unpaired last element stays in place. A sorted list becomes wave-shaped.
- `find_single(arr)`: the XOR of all elements, which is the element that appears an odd number of times when only one does.
- `factorial(n)` and `fibonacci(n)` (with `fibonacci(0) == 0`).
- `mth_half(n, m)`: `n` halved `m - 1` times, each time by integer division rounding toward zero.
- `min_max(arr)`: a `(minimum, maximum)` pair.
- `maximize_money(n, k)`: the money collected from every other house out of `n`, each holding `k`.
- `reversed_array(arr)` and `sum_elements(arr)`.
- `value_equal_to_index(arr)`: the values that equal their 1-based position.

`largest`, `max_times_min`, `find_single` and `min_max` raise `ValueError` on an
empty sequence; `factorial` and `fibonacci` raise `ValueError` for negative
arguments.

### `drillbook.text`

- `is_palindrome(s)`: whether `s` reads the same backwards.
- `first_letters(s)`: the first character of `s` and every character that follows a space.
- `remove_duplicates(s)`: keep only the first occurrence of each character, in order.
- `modify_case(s)`: uppercase the whole string if its first character is an ASCII letter `A`–`Z`, otherwise lowercase it.

### `drillbook.graphs`

Vertices are numbered from 1 to `n`. Edges are given as pairs of vertices; a
vertex outside `1..n` raises `ValueError`.

- `count_connected_components(n, edges)`: the number of connected components of an undirected graph.
- `has_cycle_undirected(n, edges)`: whether the component containing vertex 1 has a cycle. Other components are not examined.
- `has_cycle_directed(n, edges)`: whether a directed graph has a cycle anywhere.
- `shortest_path_length(n, edges)`: the number of edges on a shortest path from vertex 1 to vertex `n` in an undirected graph, or `None` if `n` cannot be reached.
- `tree_diameter(n, edges)`: the number of edges on the longest path in a tree.
- `tree_depths(n, edges)`: the depth of vertices 1 to `n` when the tree is rooted at vertex 1.
- `subtree_sizes(n, edges)`: the subtree size of vertices 1 to `n` when the tree is rooted at vertex 1.

The three tree functions raise `ValueError` unless the edges form a connected
tree on `n` vertices (exactly `n - 1` edges).

## Example

```python
from drillbook.arrays import convert_to_wave
from drillbook.graphs import tree_diameter
from drillbook.text import remove_duplicates

convert_to_wave([1, 2, 3, 4, 5])           # [2, 1, 4, 3, 5]
remove_duplicates("geeksforgeeks")         # "geksfor"
tree_diameter(4, [(1, 2), (2, 3), (2, 4)]) # 2
```

## What it does not do

drillbook is a library only. It has no command-line program and does not read
test cases from standard input; call the functions from Python with the values
you want to check.