# funcarray

A small interactive tool for keeping a table of functions of one real variable
and evaluating them. Three kinds of function are supported:

- **Polynomial**: `c0 + c1*x + c2*x^2 + ...`
- **Power**: `k * x^e`
- **Logarithmic**: `k * log_b(x)`

## Installation

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Interactive use

```
funcarray
funcarray --size 20
```

`--size` sets the number of slots in the table (10 by default). The menu
offers:

```
0- Exit from menu.
1- Visualize function list.
2- Insert function.
3- Delete a function.
4- Delete all functions.
5- Select a function.
```

- **Insert** asks for the kind of function and its coefficients, shows the new
  function and asks for confirmation (1 to store it, 0 to enter it again). It
  reports an error when the table is full.
- **Delete** asks for the ID of a stored function and removes it once confirmed.
- **Select** asks for an ID and a value of `x`, and prints `F(x)`.
- **Visualize** lists every stored function with its ID.

Out-of-range menu choices and IDs are rejected with a request to retry. The
menu ends on option 0 or when input runs out; the table is emptied either way.

## Library use

```python
from funcarray.functions import Polynomial, Power, Logarithmic
from funcarray.interface import FunctionTable

p = Polynomial([1.0, 2.0, 3.0])   # 1 + 2x + 3x^2
print(p(2.0))                     # 17.0
print((p + Polynomial([1.0])).describe())

table = FunctionTable(10)
index = table.add(Power(2.0, 3.0))   # 2 * x^3
table.add(Logarithmic(2.0, 1.0))     # 1 * log_2(x)
for i, f in table.items():
    print(i, f.value(8.0))
table.remove(index)
```

### `funcarray.functions`

- `Function` is the abstract base: `value(x)`, `describe()`, and calling the
  object evaluates it.
- `Polynomial(coefficients)` takes coefficients lowest power first. An empty
  sequence raises `ValueError`; `Polynomial()` with no argument is
  uninitialized, and evaluating it raises `ValueError`. Polynomials can be
  added with `+` and compared with `==`. `degree` and `coefficients` are
  read-only properties.
- `Power(k, exponent)` defaults to `k = 0`, `exponent = 0`.
- `Logarithmic(base, k)` defaults to base 10, `k = 1`. A base that is not
  positive, or equal to 1, issues a warning and falls back to the defaults;
  `set_coefficients` raises `ValueError` for such a base instead. Evaluating
  at `x <= 0` issues a warning and returns `0.0`.

Each class also has `set_coefficients(...)` and `reset()`.

### `funcarray.interface`

- `FunctionTable(size)` holds a fixed number of slots. `add` stores a function
  in the first free slot and returns its index, raising `TableFullError` when
  none is free; `remove(index)` empties a slot and returns its function
  (`IndexError` out of range, `KeyError` if the slot is empty); `clear`,
  `is_empty`, `first_free` and `items` do what their names say.
- `Console(table, stdin, stdout)` runs the menu over any pair of text streams
  with `run()`.
- `main(argv=None)` is the entry point of the `funcarray` command.

## What it does not do

The table lives in memory only: nothing is saved between runs, and there is no
way to load functions from a file.