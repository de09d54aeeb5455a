# numtext

Two small helpers in `numtext.support` that turn numbers into text by
their own digit rules.

## Functions

### `int_to_str(value)`

Writes an integer in decimal, with a leading `-` when it is negative.
Zero has no significant digits and comes back as an empty string.

```python
from numtext.support import int_to_str

int_to_str(-1234)   # "-1234"
int_to_str(42)      # "42"
int_to_str(0)       # ""
```

### `float_to_str(value, size)`

Writes a number with `size` digits after the decimal point.

- The integer part is truncated toward zero and written without leading
  zeros; when it is zero, no integer digits are written at all.
- The first `size + 1` fractional digits are taken by truncation.
- If that extra digit is 5 or more, each kept fractional digit that is 5 or
  more is raised by one (9 wraps to 0). Smaller digits and the integer part
  are left as they are, so this is not ordinary rounding.
- With `size` equal to 0 only the sign and the integer digits remain.
- A negative `size` raises `ValueError`.

```python
from numtext.support import float_to_str

float_to_str(3.25, 1)   # "3.2"
float_to_str(-7.0, 0)   # "-7"
```

Both functions return new `str` objects and leave their arguments unchanged.

## What it does not do

The package has no printf-style formatter, no parser and no command-line
tool; it offers only the two functions above.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```