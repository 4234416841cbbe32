# piscript

The runtime values of PiScript, a small dynamic scripting language, and a
library of its built-in functions written as plain Python functions. The
package uses only the standard library and works on Python 3.10 and later.

## Values

`piscript.values` holds the value types and the rules that every built-in
shares:

- `PiString` is a mutable string. Its text is in `chars`.
- `PiList` is a list of values in `items`, with `is_numeric`, `is_matrix`,
  `rows` and `cols` flags. Any flag left as `None` is inferred from the items.
  A list of numbers is numeric. A list of equal-length numeric lists is a
  numeric matrix.
- `PiMap` maps string keys to values in insertion order. It has `has`, `get`,
  `set` and `keys`, and an optional prototype in `proto`.
- `None` stands for nil. Python `bool`, `int` and `float` are PiScript
  booleans and numbers, and a Python callable is a function.
- `as_number`, `as_string` and `as_bool` convert between these types.
  `type_name` names a value's type, and `equals` compares two values.
  Scalars and strings compare by value, and lists and maps by identity.
- `normalize_index(index, size)` turns a negative index into a position from
  the start and raises on an index out of range.
- `itos` returns the decimal text of an integer.
- `XorShift32` is a 32-bit xorshift generator. `next_uint` returns the next
  state and `random` returns a float in [0, 1].

```python
from piscript.values import PiList, as_string, itos, normalize_index

itos(-7)                        # "-7"
normalize_index(-1, 5)          # 4
as_string(PiList([1, 2.5, None]))  # "[1, 2.5, nil]"
```

## Built-in functions

| Module                 | Functions |
|------------------------|-----------|
| `piscript.sequences`   | In-place list and string operations: `push`, `pop`, `peek`, `append`, `unshift`, `insert`, `remove`, `sort`, `empty` |
| `piscript.transforms`  | `contains`, `index_of`, `reverse`, `shuffle`, `copy`, `slice_of`, `length` |
| `piscript.functional`  | `map_list`, `filter_list`, `reduce_list`, `find`, which take any Python callable |
| `piscript.strings`     | `char`, `ordinal`, `trim`, `upper`, `lower`, `replace`, `is_upper`, `is_lower`, `is_digit`, `is_numeric_string`, `is_alpha`, `is_alnum` |
| `piscript.conversions` | `is_list`, `is_map`, `is_num`, `is_str`, `is_bool`, `as_num`, `as_str`, `as_bool` |
| `piscript.matrix`      | `zeros`, `ones`, `eye`, `size`, `mult`, `dot`, `cross`, `is_mat` |
| `piscript.objects`     | `clone`, `keys`, `values` for maps |
| `piscript.console`     | `println`, `print_values`, `printf`, `input_line` |

Some behaviours follow the language rather than Python:

- `slice_of(collection, start, end)` includes both ends.
- `unshift` puts each value at the front in turn, so the last value ends up
  first.
- `reverse` returns a new list or string and leaves its argument as it was.
- `length` returns `None` for a value that is not a list, string or map.
- `printf` replaces `{n}` with argument `n`, where `n` is a single digit. It
  writes the two characters `\n` as a newline.

```python
from piscript.values import PiList, PiString
from piscript.sequences import push, sort, unshift
from piscript.transforms import slice_of
from piscript.functional import map_list
from piscript.matrix import eye, ones, mult, size

items = PiList([3, 1, 2])
push(items, 4)                         # 4
sort(items)                            # items.items == [1, 2, 3, 4]
slice_of(items, 1, -1).items           # [2, 3, 4]
map_list(items, lambda x: x * 10).items  # [10, 20, 30, 40]

word = PiString("c")
unshift(word, "b", "a")                # 3, word.chars == "abc"

size(eye(2, 3)).items                  # [2, 3]
product = mult(eye(2, 2), ones(2, 2))  # a 2 x 2 matrix of ones
```

## Errors

A built-in that is given an argument it cannot use raises
`piscript.values.PiError`. Examples are a wrong type, an empty list passed to
`pop`, or an index out of range. The message names the built-in, as in
`"[pop] Cannot pop from an empty list."`.

## What this package does not do

The package has no lexer, parser, compiler or virtual machine, so it cannot
run PiScript source. It has no command-line program. It does not provide
the graphics screen, drawing, keyboard and mouse input, or sound, and it has
no timing functions. Its numeric built-ins are limited to those in
`piscript.matrix`. It has no trigonometry, logarithms, statistics or random
number built-ins, apart from the `XorShift32` generator and `shuffle`.

## Running the tests

Install the `test` extra and run `pytest` from the project directory.