import pytest

from squaremat.matrix import EPS, SquareMat, ensure_same


def m(*rows):
    return SquareMat.from_rows(rows)


def test_constructors_and_access():
    z = SquareMat()
    assert z.order == 0

    a = SquareMat(3, 7.0)
    assert a[2][2] == pytest.approx(7.0)

    b = m([1, 2], [3, 4])
    assert b[1][0] == 3

    with pytest.raises(ValueError):
        m([1, 2, 3])

    with pytest.raises(IndexError):
        b[5][0]


def test_order_zero_with_value_rejected():
    with pytest.raises(ValueError):
        SquareMat(0, 1.0)


def test_empty_rows_rejected():
    with pytest.raises(ValueError):
        SquareMat.from_rows([])


def test_column_out_of_range():
    b = m([1, 2], [3, 4])
    assert b[0][1] == 2
    assert b[1][1] == 4
    with pytest.raises(IndexError):
        b[0][2]
    assert list(b[0]) == [1, 2]


def test_arithmetic_add_sub_neg():
    a = m([1, 2], [3, 4])
    b = m([4, 3], [2, 1])
    assert (a + b)[0][0] == 5
    assert (a - b)[1][1] == 3
    assert (-a)[0][1] == -2


def test_matrix_multiply_and_scalar_ops():
    identity = m([1, 0], [0, 1])
    x = m([2, 3], [4, 5])
    assert identity * x == x

    y = 2 * identity
    assert y[1][1] == 2

    y /= 2
    assert y == identity

    with pytest.raises(ZeroDivisionError):
        x / 0.0


def test_scalar_multiplication_is_commutative():
    a = m([1, 2], [3, 4])
    assert list((a * 2)[1]) == list((2 * a)[1])


def test_elementwise_and_modulo_int():
    a = m([2, 4], [6, 8])
    b = m([1, 1], [2, 2])
    assert (a % b)[1][0] == 12
    r = a % 5
    assert r[1][1] == 3
    with pytest.raises(ZeroDivisionError):
        a % 0


def test_modulo_wraps_negative_values():
    a = m([-1])
    assert (a % 3)[0][0] == 2


def test_transpose_and_power():
    a = m([0, 1], [2, 3])
    at = ~a
    assert at[0][1] == 2
    assert (a ** 0)[1][1] == 1
    assert (a ** 1) == a
    assert (a ** 2)[0][0] == 2
    assert (a ^ 2)[0][0] == 2

    empty = SquareMat()
    with pytest.raises(ValueError):
        empty ** 2


def test_transpose_twice_is_identity():
    a = m([1, 2, 3], [4, 5, 6], [7, 8, 9])
    back = a.transpose().transpose()
    assert [list(back[i]) for i in range(3)] == [list(a[i]) for i in range(3)]


def test_power_matches_repeated_multiplication():
    a = m([1, 1], [1, 0])
    expected = a * a * a * a * a
    result = a ** 5
    assert [list(result[i]) for i in range(2)] == [list(expected[i]) for i in range(2)]


def test_negative_power_rejected():
    with pytest.raises(ValueError):
        m([1]) ** -1


def test_determinant():
    a = m([1, 2], [3, 4])
    assert a.determinant() == pytest.approx(-2)
    b = m([6])
    assert b.determinant() == 6


def test_determinant_singular_and_empty():
    assert m([1, 2, 3], [4, 5, 6], [7, 8, 9]).determinant() == 0.0
    with pytest.raises(ValueError):
        SquareMat().determinant()


def test_increment_decrement():
    a = m([1, 1], [1, 1])
    a.increment()
    assert a[0][0] == 2
    a.decrement()
    assert a[0][0] == 1


def test_compound_assignments():
    a = m([1, 2], [3, 4])
    b = m([4, 3], [2, 1])
    a += b
    assert a[0][0] == 5
    a -= b
    assert a[0][0] == 1
    a *= b
    assert a[0][0] == 8
    a %= 5
    assert a[0][0] == 3


def test_inplace_scalar_multiply_keeps_identity():
    a = m([1, 2], [3, 4])
    same = a
    a *= 0.5
    assert a is same
    assert a[1][1] == 2


def test_comparisons():
    a = m([1, 1], [1, 1])
    b = m([2, 2], [2, 0])
    assert a < b
    assert b > a
    assert a != b
    assert a <= b
    assert b >= a
    c = m([2, 1, 1], [0, 0, 0], [0, 0, 0])
    assert a == c


def test_str_and_print_identical(capsys):
    a = m([1, 2], [3, 4])
    print(a, end="")
    assert capsys.readouterr().out == str(a)
    assert str(a) == "[ 1, 2 ]\n[ 3, 4 ]\n"


def test_size_mismatch_raises():
    a = m([1, 2], [3, 4])
    b = m([1])
    with pytest.raises(ValueError):
        a + b
    with pytest.raises(ValueError):
        a * b
    assert (a + a)[1][1] == 8
    assert (a * a)[0][0] == 7
    assert (b * b)[0][0] == 1


def test_sum():
    a = m([1, 2, 3], [4, 5, 6], [7, 8, 9])
    b = m([9, 8, 7], [6, 5, 4], [3, 2, 1])
    assert a.sum() == pytest.approx(45.0)
    assert b.sum() == pytest.approx(45.0)
    assert (a + b).sum() == pytest.approx(90.0)
    assert (a - b).sum() == pytest.approx(0.0)


def test_ensure_same():
    a = m([1, 2], [3, 4])
    b = m([5, 6], [7, 8])
    c = m([1, 2, 3], [4, 5, 6], [7, 8, 9])
    ensure_same(a, b)
    assert (a + b).order == 2
    with pytest.raises(ValueError):
        a + c
    with pytest.raises(ValueError):
        ensure_same(a, c)


def test_copy_is_independent():
    a = m([1, 2], [3, 4])
    b = a.copy()
    b[0][0] = 100
    assert a[0][0] == 1


def test_setting_element():
    a = m([1, 2], [3, 4])
    a[0][1] = 42
    assert a[0][1] == 42
    assert a.sum() == pytest.approx(50.0)


def test_equality_tolerance():
    a = m([1.0])
    b = m([1.0 + EPS / 10])
    assert a == b
    assert not a < b
    assert a <= b