# imkit

A small library of building blocks: a base object protocol, per-thread
error state, levelled logging, `Option`/`Result` values, typed parameter
lists, wrapped scalars, a boxed value, a mutable string and a list with a
data ownership policy. It has no dependencies beyond the standard library.

## Modules

- `imkit.core`: `ImObject`, the base class whose `tostr`, `compare`,
  `clone` and `assign` subclasses override. By default `tostr` gives the
  object's address in hex, `compare` orders by identity, and `clone` and
  `assign` raise `ClassDefinitionError`. The free functions `tostr`,
  `compare`, `clone`, `assign` and `is_instance` work on any `ImObject`;
  `compare` returns `0` for the same object and `DIFFERENT_CLASSES`
  (2**31 - 1) for objects of different classes.
- `imkit.errors`: per-thread error state through `set_error`,
  `error_code`, `error_message` (`"No error"` when nothing is set),
  `clear_error` and `print_error(prefix, stream)`, which writes
  `prefix: message` to the stream (standard error by default) only when a
  message is set. `ErrorCode` holds `OK` and `ILLEGAL_ARG`. `ImError` is
  an exception carrying `code` and `desc`; `IndexOutOfBound` (default code
  34, description `"Index out of bound"`) can be built from `()`, `(desc)`
  or `(code, desc)`.
- `imkit.textio`: printf-style formatting in which `%obj` stands for an
  object's `tostr()`: `format_objects`, `put_object`, `fprintf` and
  `printf`. The writing functions return the number of characters written.
- `imkit.log`: `log_plain` and `log_color` write a line of the form
  `HH:MM:SS LEVEL file:line: message` (the coloured one with ANSI codes) to
  a stream, standard output by default, and return what they wrote, or
  `""` when the level is masked out. The global level mask is managed with
  `set_mask`, `set_min`, `get_mask`, `add_mask` and `clear_mask`; `Level`
  runs from `TRACE` to `FATAL` and each member has a `mask` bit.
- `imkit.modlog`: `ModLog(mask, levels)` with up to eight `ModLogLevel`
  entries, each giving a prefix and its colours. `format` returns the
  rendered text or `None`; `log` writes it to standard output. The module
  also defines ANSI style and colour constants (`RESET`, `FG_RED`,
  `BG_BLUE`, ...).
- `imkit.panic`: `panic(fmt, *args)` reports a fatal error and the call
  stack on standard error, then raises `Panic`, a `SystemExit` with status
  1. `check_eq` and `check_ne` panic when their assertion fails;
  `format_trace` returns the current stack as text.
- `imkit.option`: `Option` (`some`, `none`, `is_some`, `is_none`,
  `unwrap`, `expect`, `unwrap_or`) and `Result` (`ok`, `err`, `is_ok`,
  `is_err`, `unwrap`, `expect`, `unwrap_or`, `unwrap_err`). Failed unwraps
  panic.
- `imkit.params`: `Params`, an ordered list of at most 16
  `(ParamType, value)` pairs. Values are stored as the type would hold
  them (integers wrap to their width, `FLOAT` rounds to single precision);
  `match` checks the types and `extract` returns the values. Pushing past
  16 raises `OverflowError`.
- `imkit.wrap`: `Wrapped` and its scalar subclasses `ImInt`, `ImShort`,
  `ImLong`, `ImFloat`, `ImDouble`, `ImChar`, `ImUint`, `ImUshort`,
  `ImULong` and `ImUChar`.
- `imkit.box`: `Box(data, methods)` keeps a copy of `data` made by a
  `BoxMethods` table, which also supplies `dtor`, `assign`, `compare` and
  `tostr`. Used in a `with` block, the destructor runs on exit.
- `imkit.strbuf`: `ImStr`, a mutable string with `view`, `append`,
  `append_char`, `append_int`, `append_real`, `append_fmt`, `insert_at`,
  `delete` and `set_char_at`. Out-of-range positions raise
  `IndexOutOfBound`; `delete` with `start > end` raises `ValueError`.
- `imkit.interfaces`: the abstract `ImIList` and `ImIIter`, and
  `DataPolicy` (`CLONE`, `TRANSFER`, `BORROW`).
- `imkit.linkedlist`: `LinkedList`, which clones elements under the
  `CLONE` policy and keeps them as given otherwise, and `LinkedListIter`, a
  cursor over it. `get`, `insert` and `remove` raise `IndexOutOfBound` for
  a position outside the list; `insert` accepts only existing positions.

## Installation

```
pip install .
```

## Example

```python
from imkit.errors import IndexOutOfBound
from imkit.linkedlist import LinkedList, LinkedListIter
from imkit.textio import printf
from imkit.wrap import ImInt

items = LinkedList()
for n in (1, 2, 3):
    items.append(ImInt(n))

printf("list: %obj\n", items)             # list: [1, 2, 3]
print(items.index_of(ImInt(2)).unwrap())  # 1

try:
    items.get(10)
except IndexOutOfBound as err:
    print(err.tostr())  # Index 10 is out of bound for a list of length 3

print([n.val for n in LinkedListIter(items)])  # [1, 2, 3]
```

## What it does not include

This is a library only: it installs no command-line program.

## Running the tests

```
pip install .[test]
pytest
```