# lokit

Small helpers for everyday Python code, using only the standard library.
Requires Python 3.10 or later.

## Modules

- **lokit.find**: searching sequences and mappings: `index_of`,
  `last_index_of`, `find`, `find_index_of`, `find_last_index_of`,
  `find_or_else`, `find_key`, `find_key_by`, `find_uniques(_by)`,
  `find_duplicates(_by)`, `min_of`, `min_index(_by)`, `min_by`, `max_of`,
  `max_index(_by)`, `max_by`, `earliest(_by)`, `latest(_by)`, `first`,
  `first_or_empty`, `first_or`, `last`, `last_or_empty`, `last_or`, `nth`,
  `sample(_by)`, `samples(_by)`.
  Functions that find nothing return `None` (paired with `False` or `-1`
  where they also report success or an index). `nth` raises `IndexError`
  when the index is out of bounds.
- **lokit.intersect**: membership and order-keeping set operations:
  `contains(_by)`, `every(_by)`, `some(_by)`, `none(_by)`, `intersect`,
  `difference`, `symmetric_difference`, `union`, `without`, `without_by`,
  `without_empty`, `without_nth`.
- **lokit.maps**: dictionary helpers: `keys`, `uniq_keys`, `has_key`,
  `values`, `uniq_values`, `value_or`, `pick_by(_keys/_values)`,
  `omit_by(_keys/_values)`, `entries`/`to_pairs` (lists of `Entry` named
  tuples), `from_entries`/`from_pairs`, `invert`, `assign`, `chunk_entries`
  (raises `ValueError` for a size below 1), `map_keys`, `map_values`,
  `map_entries`, `map_to_slice`.
- **lokit.condition**: expression-style conditionals: `ternary`,
  `ternary_f`, `if_`/`if_f` returning an `IfElse` chain, and `switch`
  returning a `SwitchCase`.
- **lokit.errors**: `validate` (raises `ValidationError`), `must` and
  `must0` (raise `MustError` when given an exception or `False`, and
  `TypeError` for any other non-`None` value), `try_call`, `try_or`,
  `try_with_error_value`, `try_catch`, `try_catch_with_error_value`,
  `errors_as`.
- **lokit.func**: `partial`, fixing a function's first argument.
- **lokit.channel**: a thread-safe `Channel` (buffered, or unbuffered with
  capacity 0) with `send`, `receive` and `close`, plus
  `channel_dispatcher` and its dispatching strategies, `slice_to_channel`,
  `channel_to_slice`, `generator`, `buffer`, `buffer_with_context`,
  `buffer_with_timeout`, `fan_in` and `fan_out`.
- **lokit.concurrency**: `synchronize` returning a `Synchronizer`,
  `run_async`, `wait_for` and `wait_for_with_context`.

## Examples

```python
from lokit.find import find_uniques, nth
from lokit.intersect import union
from lokit.maps import pick_by
from lokit.condition import if_, switch
from lokit.errors import must, try_or

find_uniques([1, 2, 2, 3, 1, 2])          # [3]
nth([0, 1, 2, 3], -2)                     # 2
union([0, 1, 2], [2, 10])                 # [0, 1, 2, 10]
pick_by({"foo": 1, "bar": 2}, lambda k, v: v % 2 == 1)   # {"foo": 1}

if_(False, 1).else_if(True, 2).else_(3)   # 2
switch(42).case(1, "one").case(42, "answer").default("other")  # "answer"

must("value", None)                        # "value"
try_or(lambda: int("x"), 0)                # (0, False)
```

Channels:

```python
from lokit.channel import slice_to_channel, fan_out, channel_to_slice, buffer

upstream = slice_to_channel(10, [0, 1, 2])
a, b = fan_out(2, 10, upstream)
channel_to_slice(a)   # [0, 1, 2]

items, count, seconds, ok = buffer(slice_to_channel(2, [1, 2, 3]), 2)
# items == [1, 2], count == 2, ok is True
```

`Channel.receive` returns `(item, True)`, or `(None, False)` once the
channel is closed and drained; with a `timeout` it raises `TimeoutError`
if nothing arrives in time. Sending on or closing a closed channel raises
`ChannelClosedError`.

Polling:

```python
from lokit.concurrency import wait_for

iterations, elapsed, found = wait_for(lambda i: i >= 5, 1.0, 0.001)
# iterations == 6, found is True
```

## What it does not do

lokit is a library only: it has no command-line interface.

## Running the tests

```
pip install -e ".[test]"
pytest
```