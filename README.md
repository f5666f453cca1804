# rhpman

Tools for tracking how the neighbourhood of a node in a mobile ad hoc
network changes over time. The package reads the text of AODV and DSDV
routing table dumps. It needs nothing outside the standard library.

## Installation

```
pip install .
```

## Extracting neighbours from a routing table

`rhpman.table.get_neighbors(table, max_hops)` parses a routing table dump.
It returns the set of destination addresses, as 32-bit integers, that can
be reached within `max_hops` hops.

- A line counts as a route only if it ends with a newline and, after
  surrounding whitespace is removed, begins with a digit. Headers and any
  text after the last newline are ignored.
- If the text contains `AODV`, the routes are read as AODV rows. The
  destination is field 0, the state is field 3 and the hop count is
  field 5. Only routes in state `UP` are counted.
- Otherwise, if the text contains `DSDV`, the routes are read as DSDV
  rows. The destination is field 0 and the hop count is field 3.
- Text that names neither protocol gives an empty set.
- Loopback (`127.0.0.1`) is skipped, and so is any destination containing
  `.255.255`, which is the broadcast address on a 255.255.0.0 network.
- Routes with a hop count of zero or more than `max_hops` are skipped.
- A route row that has too few fields, a hop count that is not a number,
  or a destination that is not a valid IPv4 address raises `ValueError`.

```python
import ipaddress
from rhpman.table import get_neighbors

dump = (
    "DSDV Routing table\n"
    "Destination Gateway Interface HopCount\n"
    "10.1.0.2 10.1.0.2 10.1.0.1 1\n"
    "10.1.0.3 10.1.0.2 10.1.0.1 2\n"
    "127.0.0.1 127.0.0.1 127.0.0.1 0\n"
)
assert get_neighbors(dump, 1) == {int(ipaddress.IPv4Address("10.1.0.2"))}
```

## Measuring the change degree

`rhpman.table.Table(num, max_hops)` keeps a ring of the `num` most recent
neighbour sets. Both arguments default to 0, and a negative `num` raises
`ValueError`.

- `update_table(table)` moves to the next slot and stores the neighbours
  found in `table`, using the `max_hops` given to the constructor. It
  raises `ValueError` if the table has no slots.
- `compute_change_degree()` compares the newest set with the oldest one
  kept. It returns `(|A ∪ B| - |A ∩ B|) / |A ∪ B|`. The result is `0.0`
  when the table has no slots or when both sets are empty.

```python
from rhpman.table import Table

history = Table(num=2, max_hops=1)
history.update_table(first_dump)
history.update_table(second_dump)
print(history.compute_change_degree())  # 0.0 (no change) .. 1.0 (all different)
```

With `num=1`, the newest and oldest sets are the same, so the change
degree is always `0.0`.

## Units

`rhpman.units` has small helpers for writing scenario values:

- `meters(value)`: integers are wrapped to signed 32-bit, other values
  become floats.
- `seconds(value)` and `mps(value)`: return the value as a float.
- `minutes(value)`: returns the number of seconds.
- `byte_count(value)`: returns a signed 32-bit integer.
- `percent(value)`: returns `value / 100`.
- `is_equal(a, b)`: true when the two values differ by less than `1e-5`.
- `format_list(values)`: renders the values as `[a, b, c]`.

## What this package does not do

This package only parses routing tables and measures how they change. It
does not run a network simulation. It also does not handle:

- replica-holder elections
- storage of data items
- sending messages
- collecting statistics

It has no command-line program.

## Running the tests

```
pip install .[test]
pytest
```