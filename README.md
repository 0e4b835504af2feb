# rankvector

`rankvector` is a sequence of integers in which every element is addressed by
its *rank*, its 1-based position. It is stored in an AVL tree whose nodes also
keep subtree sizes, so reading, replacing, inserting and removing by rank all
take logarithmic time.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Using it as a library

```python
import sys

from rankvector.vector import AVLVector

vec = AVLVector()
vec.insert_at_rank(1, 10)   # [10]
vec.insert_at_rank(2, 30)   # [10, 30]
vec.insert_at_rank(2, 20)   # [10, 20, 30]

vec.element_at_rank(2)      # 20
vec.replace_at_rank(3, 35)  # [10, 20, 35]
vec.rank_of(35)             # 3
vec.remove_at_rank(1)       # returns 10; now [20, 35]

len(vec)                    # 2
list(vec)                   # [20, 35]
list(vec.ranked_items())    # [(1, 20), (2, 35)]
vec.root_value()            # the value held at the tree's root, or None if empty

vec.print_all(sys.stdout)   # writes to sys.stdout when no stream is given
# Rank: 1 | Element: 20
# Rank: 2 | Element: 35
# (followed by a blank line)
```

Ranks start at 1. `insert_at_rank` accepts any rank from 1 to `len(vec) + 1`;
`element_at_rank`, `replace_at_rank` and `remove_at_rank` accept ranks from 1
to `len(vec)`.

Errors are raised rather than returned:

- a rank out of range, or reading, replacing or removing from an empty vector,
  raises `IndexError`;
- `rank_of` on an element that is not present raises `ValueError`. When the
  element occurs more than once, the rank of the first occurrence is returned.

The tree nodes and their local operations (height and size bookkeeping, balance
factor, the four AVL rotations) live in `rankvector.node`.

## The interactive shell

```
rankvector
```

starts a prompt (`> `) that reads one command per line until `QUIT` or the end
of input. Command names are upper case:

| Command                    | Effect                                          |
|----------------------------|-------------------------------------------------|
| `INSERT <rank> <element>`  | insert `element` so that it gets rank `rank`    |
| `DELETE <rank>`            | remove the element at `rank`                    |
| `REPLACE <rank> <element>` | overwrite the element at `rank`                 |
| `ELEMENT-AT <rank>`        | print the element at `rank`                     |
| `RANK <element>`           | print the rank of the first `element` found     |
| `PRINT`                    | list every rank with its element                |
| `QUIT`                     | print `Bye!` and leave the shell                |

Example session:

```
> INSERT 1 55

> INSERT 2 70

> ELEMENT-AT 2
70

> PRINT
Rank: 1 | Element: 55
Rank: 2 | Element: 70

> QUIT
Bye!
```

A command with missing or non-integer arguments prints its expected format
(for example `Invalid input——the proper format is DELETE <int>!`); an unknown
command prints `Error: Unknown Command:` followed by the line. An out-of-range
rank, an empty vector or an element that is not found is reported with a
message, and the shell keeps running. `PRINT` on an empty vector prints
`The AVL Tree is empty.`

The same behaviour is available from Python through
`rankvector.cli.run_command(vector, line, out)`, which runs a single line and
returns `False` after `QUIT`, and `rankvector.cli.repl(stdin, out)`, which runs
a whole session on a fresh vector.

## What it does not do

The vector lives only in memory: nothing is saved between shell sessions, and
the shell has no command to load or store its contents.