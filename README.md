# squaremat

A small library of square matrices that hold floats. Python's operators give
the usual matrix arithmetic.

## Installing

    pip install .

## Using it

```python
from squaremat.matrix import SquareMat

a = SquareMat.from_rows([[1, 2], [3, 4]])
b = SquareMat.from_rows([[4, 3], [2, 1]])

print(a + b)            # element-wise sum
print(a - b)            # element-wise difference
print(-a)               # every element negated
print(a * b)            # matrix product
print(2 * a)            # scalar product, also a * 2
print(a / 2)            # division by a scalar
print(a % b)            # element-wise product
print(a % 3)            # element-wise modulo by an integer, never negative
print(~a)               # transpose, also a.transpose()
print(a ** 3)           # power, also a ^ 3; a ** 0 is the identity
print(a.determinant())  # about -2.0, by Gaussian elimination

z = SquareMat(3, 7.0)   # 3x3, every element 7.0
z[0][1] = 42            # index the row, then the column
print(z.order)          # 3
print(z.sum())          # sum of all elements
w = z.copy()            # independent copy
```

`SquareMat()` with no arguments is an empty matrix of order 0.
`SquareMat.from_rows` needs at least one row, and every row must be as long
as there are rows.

Printing gives one line per row:

    [ 1, 2 ]
    [ 3, 4 ]

### Behaviour worth knowing

- Operations between two matrices need matrices of the same order and raise
  `ValueError` otherwise. `ensure_same(a, b)` from `squaremat.matrix` makes
  the same check on its own.
- `from_rows` raises `ValueError` for no rows or rows of the wrong length.
- Dividing by a scalar whose absolute value is below `1e-9` raises
  `ZeroDivisionError`. A modulo by `0` raises `ZeroDivisionError` too.
- A row or column index out of range raises `IndexError`. An index that is
  not an integer raises `TypeError`.
- Powers take non-negative integers only. A negative exponent raises
  `ValueError`.
- The power and the determinant of an empty matrix raise `ValueError`.
- A determinant whose absolute value is below `1e-9` is returned as `0.0`.
- The comparisons `==`, `!=`, `<`, `<=`, `>` and `>=` compare the **sum of
  the elements** of the two matrices, with a tolerance of `1e-9`. Two
  matrices of different orders can be equal. Matrices cannot be hashed.
- `increment()` and `decrement()` add one to, or subtract one from, every
  element in place. Both return the matrix itself.
- The in-place operators `+=`, `-=`, `*=`, `/=` and `%=` change the matrix
  itself.

## Demo

    squaremat-demo

This runs every operation on two 3x3 matrices and prints each result.
`python -m squaremat.demo` does the same.

## What it does not do

Matrices cannot be read back from text. There is no inverse, no solver for
linear systems, and no support for matrices that are not square.

## Tests

    pip install .[test]
    pytest