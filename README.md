# melp-runtime

Runtime support for programs written in the MELP language. It is a plain
Python library with no dependencies outside the standard library.

## Modules

- `melp_runtime.strings`: `concat`, `compare`, `equals`, `not_equals`,
  `length`, `is_empty`, `substring`, `index_of`, `char_at`, `to_upper` and
  `to_lower` (ASCII letters only), `trim`, `trim_start`, `trim_end` (spaces,
  tabs, newlines and carriage returns), `replace` (first occurrence),
  `replace_all`, `split`, and `number_to_string` / `double_to_string` for
  string interpolation. `None` is accepted as a missing string.
- `melp_runtime.listtype`: `MelpList`, a growable list whose capacity starts
  at 4 and doubles when full. It has `append`, `prepend`, `remove_at`,
  `clear`, `copy`, `reverse`, `reserve`, `capacity`, `is_empty` and
  `debug_string`. `None` cannot be stored.
- `melp_runtime.array`: `create_array`, `array_get` and `array_set` for
  fixed-size arrays of zeros built on `MelpList`.
- `melp_runtime.hashmap`: `MelpMap`, a mutable mapping with string keys,
  separate chaining, 16 initial buckets and a 0.75 load factor;
  `capacity()` and `resize()` expose the bucket count. `fnv1a_hash` is the
  64-bit FNV-1a hash it uses.
- `melp_runtime.optional`: `MelpOptional` (built with `some` or `none`),
  with `has_value`, `is_null`, `get`, `get_or` and `expect`; `coalesce`
  implements the `??` operator; `OptionalState` names the two states.
- `melp_runtime.mathops`: `minimum`, `maximum` and `absolute`.
- `melp_runtime.console`: `NumericType` (`INT64`, `DOUBLE`, `BIGDECIMAL`),
  `format_numeric`, `format_bool`, `print_numeric`, `print_string`,
  `print_bool`, `read_line`, `read_numeric` and `parse_int_prefix`. Output
  and input streams can be passed in; they default to stdout and stdin.
- `melp_runtime.files`: `read_file`, `write_file`, `append_file`,
  `file_exists` and `file_size`. Failures raise `OSError`.
- `melp_runtime.state`: `StateManager`, an in-memory string store that can
  `save` to and `load` from a small JSON file (`.melp_state.json` by
  default), with optional auto-saving; `encode_state` and `decode_state`
  convert that file format.
- `melp_runtime.errors`: `MelpRuntimeError` and `ArrayBoundsError`, the
  helpers `runtime_error`, `panic_array_bounds` and
  `panic_division_by_zero`, and `report`, which writes an error in the
  runtime's coloured banner format.

## Examples

```python
from melp_runtime.strings import concat, split, double_to_string
from melp_runtime.listtype import MelpList
from melp_runtime.hashmap import MelpMap
from melp_runtime.optional import MelpOptional
from melp_runtime.state import StateManager

concat("Hello", " ", "World")   # "Hello World"
split("a,b,c", ",")             # ["a", "b", "c"]
double_to_string(3.5)           # "3.5"

items = MelpList([10, 20, 30])
items.prepend(5)
items.debug_string()            # "List[4/4]: [5, 10, 20, 30]"

ages = MelpMap()
ages["alice"] = 30
len(ages)                       # 1

MelpOptional.none().get_or(0)   # 0

with StateManager(persist_file="app_state.json") as state:
    state.set("user", "alice")
    state.save()
```

## Errors

Reading a `MelpList` (and so an array) at an index outside its range,
calling `get` or `expect` on an empty optional, and
`panic_division_by_zero` raise `MelpRuntimeError`. Writing or removing at
an index outside a list raises `IndexError`. `panic_array_bounds` raises
`ArrayBoundsError`, which is both a `MelpRuntimeError` and an `IndexError`.
Each error carries an `exit_code` (43 for runtime errors, 42 for array
bounds) that a host program may use when it stops.

## What this package does not do

It is a library only. It does not parse, compile or run MELP source code,
and it installs no command-line tool. Arbitrary-precision decimals are only
formatted, through Python's `decimal.Decimal`; no decimal arithmetic is
provided.

## Running the tests

```
pip install "melp-runtime[test]"
pytest
```