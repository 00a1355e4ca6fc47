# dsakit

Classic algorithms on lists, strings, grids and small integer-labelled graphs,
written as plain functions and two graph classes. There are no runtime
dependencies.

## Install

```
pip install .
```

## Modules

### `dsakit.sorting`

Each function accepts any iterable and returns a new list; the input is not
modified.

- `bubble_sort`, `insertion_sort`, `merge_sort` (stable), `quick_sort`
  (first element of each range as pivot).
- `count_sort(text)` returns a new string with the characters of `text` sorted
  by code point. Characters above code point 255 raise `ValueError`.
- `sort_012(values)` sorts a sequence of only 0, 1 and 2 by counting; any other
  value raises `ValueError`.
- `wave_sort(values)` returns the values arranged so that
  `a[0] >= a[1] <= a[2] >= a[3] <= ...`.

### `dsakit.arrays`

- `first_non_repeating(values)`: the first element occurring exactly once, or
  `None`.
- `most_frequent(values)`: the most common element, ties going to the smallest
  value; `ValueError` on empty input.
- `reverse_copy(values)` returns a reversed list; `reverse_in_place(values)`
  reverses a list in place and returns `None`.
- `binary_search(values, target)`: an index of `target` in ascending `values`,
  or `-1`.
- `max_subarray_sum(values)`: largest sum of a non-empty contiguous run
  (Kadane's algorithm); `ValueError` on empty input.
- `largest_row_sum(matrix)`: `(sum, row_index)` of the row with the largest
  sum, the first row winning ties; `ValueError` on an empty matrix.
- `leaders(values)`: elements greater than everything to their right, listed
  rightmost first.
- `move_zeros_to_end(values)`: a new list with zeros moved to the end, other
  elements in their original order.
- `product_except_self(values)`: for each position the product of all other
  elements; a single-element input gives `[0]`.
- `subarray_with_sum(values, target)`: 1-based inclusive `(start, end)` of the
  first contiguous run summing to `target`, or `None`. Values and target must be
  non-negative, otherwise `ValueError`.

### `dsakit.backtracking`

- `generate_braces(n)`: brace strings of `n` pairs, each level built from the
  one before by forming `{s}`, `s{}` and `{}s`, with the last string of each
  level dropped. `n` below 1 raises `ValueError`.
- `combination_sum(candidates, target)`: every combination of the positive
  `candidates`, each usable any number of times, that sums to `target`.
- `solve_n_queens(n)`: every placement of `n` non-attacking queens, each as a
  list of row strings made of `Q` and `.`.
- `search_maze(maze)`: every path from the top-left to the bottom-right cell of
  a square grid (0 marks a wall), as strings of `D`, `L`, `R`, `U` moves in
  lexicographic order, never visiting a cell twice. A non-square maze raises
  `ValueError`.
- `solve_sudoku(board)`: fills the `.` cells of a 9x9 board of characters and
  returns the completed grid as a new list of rows, or `None` if there is no
  solution. The given board is left untouched; a malformed board raises
  `ValueError`.

### `dsakit.graphs`

- `bfs_order(adjacency, start)` and `dfs_order(adjacency, start)` return the
  nodes reachable from `start` in breadth-first or depth-first preorder.
  `adjacency` is either a sequence of neighbour lists or a mapping from node to
  neighbours.
- `DirectedGraph(vertex_count)` with `add_edge(source, target)` and
  `is_cyclic()` (self-loops count as cycles).
- `UndirectedGraph(vertex_count)` with `add_edge(u, v)`, `is_cyclic()`,
  `bfs(start)` and `dfs(start)`.

Vertices are the integers `0 .. vertex_count - 1`; any other vertex raises
`ValueError`.

## Example

```python
from dsakit.sorting import merge_sort
from dsakit.arrays import max_subarray_sum
from dsakit.backtracking import combination_sum
from dsakit.graphs import UndirectedGraph

merge_sort([12, 11, 13, 5, 6, 7])                # [5, 6, 7, 11, 12, 13]
max_subarray_sum([-2, -3, 4, -1, -2, 1, 5, -3])  # 7
combination_sum([2, 3, 4, 5], 7)                 # [[2, 2, 3], [2, 5], [3, 4]]

g = UndirectedGraph(5)
for u, v in [(0, 1), (1, 2), (1, 3), (0, 4)]:
    g.add_edge(u, v)
g.bfs(0)                                         # [0, 1, 4, 2, 3]
g.is_cyclic()                                    # False
```

## What it does not do

dsakit is a library only: it has no command-line tool and reads no input from
files or the terminal. Call its functions from your own code.

## Tests

```
pip install ".[test]"
pytest
```