# marvin

Finds routes across grid maps of digit costs with weighted A* search.

## Map format

A map is a text file of rows that all have the same width. Each cell is a
digit `0`–`9` giving the cost of stepping onto it. The cell marked `M` is
the start and the cell marked `G` is the goal; both cost `0`.

```
M1191
13119
1111G
```

If a marker appears more than once, its last occurrence is used. If a
marker is missing, that end is placed on the first cell. An empty map,
rows of different widths, or any character other than a digit, `M` or `G`
is rejected with a `ValueError`.

## Command line

```
pip install .
marvin path/to/map.txt
```

The search runs five times, with heuristic weights 5, 4, 3, 2 and 1. Each
run that reaches the goal prints one line of moves: `U` (up), `D` (down),
`L` (left) and `R` (right). Movement is four-way only. The heuristic is the
weight times the Manhattan distance to the goal.

Without a map file, the program prints `Usage: marvin <map file>` and exits
with status 1. If the file cannot be read or parsed, the program writes the
error to standard error and exits with status 1.

## Library use

```python
from marvin.grid import load_grid, parse_grid
from marvin.search import find_path, path_to_moves, solve

grid = parse_grid("M11\n191\n11G\n")
print(solve(grid, 1))                  # move string, or None if unreachable
path = find_path(grid, 1)              # list of cell indexes, or None
print(path_to_moves(path, grid.columns))
```

`Grid` is a frozen dataclass with the fields `rows`, `columns`, `cells` (the
digits, row by row), `start` and `goal`. It also has a `size` property and a
`cost(index)` method. `load_grid(path)` reads a map from a file.

## Helper modules

- `marvin.chars`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `to_lower` and `to_upper` on integer code points (ASCII only),
  plus `atoi` and `itoa`.
- `marvin.strings`: `split`, `strchr`, `strrchr`, `strnstr`, `strncmp`,
  `strtrim`, `substr`, `strlcpy`, `strlcat`, `strmapi` and `striteri`.
  Searches return an index, or `None` when nothing is found.
- `marvin.memory`: `memset`, `bzero`, `calloc`, `memchr`, `memcmp`,
  `memcpy` and `memmove` on `bytes`/`bytearray` buffers. A count that runs
  past the end of a buffer raises `ValueError`.
- `marvin.lines`: `LineReader` (with `read_line()` and iteration) and
  `read_lines(stream, buffer_size)`. Both read text or binary streams in
  fixed-size chunks and keep each line's newline.
- `marvin.linkedlist`: `Node` and a singly linked `LinkedList` with
  `push_front`, `push_back`, `last`, `remove_first`, `clear`, `for_each`,
  `map`, `len()` and iteration.
- `marvin.printf`: `sprintf` and `printf` for `%c %s %d %i %u %x %X %p %%`,
  with 32-bit wrap-around for integer conversions. `format_int`,
  `format_unsigned`, `format_hex`, `format_pointer` and `format_str` are
  also available. A bad specifier or a missing argument raises
  `FormatError`.
- `marvin.output`: `put_char`, `put_str`, `put_endl` and `put_nbr`, which
  write to a given stream or to standard output.

## What it does not do

It has no diagonal moves and no impassable walls; every cell can be
entered. It does not draw the map or the route. The only output is the
move strings.

## Tests

```
pip install .[test]
pytest
```