"""Command that walks through every matrix operation and prints the results."""

from __future__ import annotations

from squaremat.matrix import SquareMat


def print_section(title: str) -> None:
    """Print a banner that separates sections of output."""
    print(f"\n==================== {title} ====================")


def _show(title: str, value: object) -> None:
    print_section(title)
    print(value, end="")


def main(argv: list[str] | None = None) -> int:
    """Run the demonstration and return the exit status."""
    a = SquareMat.from_rows([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
    b = SquareMat.from_rows([[9, 8, 7], [6, 5, 4], [3, 2, 1]])

    _show("Matrix A", a)
    _show("Matrix B", b)
    _show("Addition (A + B)", a + b)
    _show("Subtraction (A - B)", a - b)
    _show("Unary Minus (-A)", -a)
    _show("Matrix Multiplication (A * B)", a * b)
    _show("Scalar Multiplication (2 * A)", 2 * a)
    _show("Scalar Multiplication (A * 2)", a * 2)
    _show("Scalar Division (A / 2)", a / 2)
    _show("Elementwise Multiplication (A % B)", a % b)
    _show("Modulo by Integer (A % 3)", a % 3)
    _show("Transpose (~A)", ~a)
    _show("Power (A ^ 0) - Identity Matrix", a ** 0)
    _show("Power (A ^ 2)", a ** 2)

    _show("Pre-Increment (++A)", a.increment())

    previous = a.copy()
    a.increment()
    _show("Post-Increment (A++)", previous)
    print("After A++:")
    print(a, end="")

    _show("Pre-Decrement (--A)", a.decrement())

    previous = a.copy()
    a.decrement()
    _show("Post-Decrement (A--)", previous)
    print("After A--:")
    print(a, end="")

    print_section("Determinant (!A)")
    print(f"!A = {a.determinant():g}")

    c = a.copy()
    print_section("Compound Assignments")
    print("(C is a copy of A used for compound assignments)\n")

    c += b
    print(f"C += B:\n{c}")
    c -= b
    print(f"C -= B:\n{c}")
    c *= b
    print(f"C *= B:\n{c}")
    c *= 0.5
    print(f"C *= 0.5:\n{c}")
    c /= 0.5
    print(f"C /= 0.5:\n{c}")
    c %= b
    print(f"C %= B:\n{c}")
    c %= 7
    print(f"C %= 7:\n{c}")

    print_section("Comparisons")
    print(f"A == A? {int(a == a)}")
    print(f"A != B? {int(a != b)}")
    print(f"A < B?  {int(a < b)}")
    print(f"A <= B? {int(a <= b)}")
    print(f"B > A?  {int(b > a)}")
    print(f"B >= A? {int(b >= a)}")

    print_section("Element Access")
    print(f"A[0][0] = {a[0][0]:g}")
    print(f"A[1][1] = {a[1][1]:g}")
    print(f"A[2][2] = {a[2][2]:g}")

    print("\nSetting A[0][1] = 42")
    a[0][1] = 42
    print("Updated A:")
    print(a, end="")

    print("\nSetting A[2][0] = -7")
    a[2][0] = -7
    print("Updated A:")
    print(a, end="")

    _show("Print with <<", a)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())