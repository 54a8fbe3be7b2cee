import pytest

from hdlab.derivatives import fd_d2fdx2, fd_dfdx


def _first_derivative_coefficients(n, h):
    a = [-1 / (2 * h)] * n
    b = [0.0] * n
    c = [1 / (2 * h)] * n
    a[0], b[0], c[0] = -3 / (2 * h), 4 / (2 * h), -1 / (2 * h)
    a[-1], b[-1], c[-1] = 1 / (2 * h), -4 / (2 * h), 3 / (2 * h)
    return a, b, c


def test_index_pattern():
    u = [10.0, 20.0, 30.0, 40.0, 50.0]
    ones = [1.0] * 5
    zeros = [0.0] * 5
    assert fd_dfdx(ones, zeros, zeros, u) == [10.0, 10.0, 20.0, 30.0, 30.0]
    assert fd_dfdx(zeros, zeros, ones, u) == [30.0, 30.0, 40.0, 50.0, 50.0]


def test_linear_function_derivative_is_slope():
    n, h = 11, 0.5
    x = [i * h for i in range(n)]
    u = [3.0 * xi + 1.0 for xi in x]
    a, b, c = _first_derivative_coefficients(n, h)
    assert fd_dfdx(a, b, c, u) == pytest.approx([3.0] * n)


def test_second_derivative_of_linear_is_zero():
    n, h = 7, 0.25
    u = [-2.0 * i * h + 4.0 for i in range(n)]
    k = 1 / h**2
    result = fd_d2fdx2([k] * n, [-2 * k] * n, [k] * n, u)
    assert result == pytest.approx([0.0] * n, abs=1e-9)


def test_second_derivative_of_quadratic_is_constant():
    n, h = 9, 0.1
    u = [(i * h) ** 2 for i in range(n)]
    k = 1 / h**2
    result = fd_d2fdx2([k] * n, [-2 * k] * n, [k] * n, u)
    assert all(r == pytest.approx(result[0]) for r in result)
    assert result[0] == pytest.approx(2.0)


def test_mismatched_lengths_raise():
    with pytest.raises(ValueError):
        fd_dfdx([1.0] * 4, [1.0] * 4, [1.0] * 3, [1.0] * 4)


def test_too_few_points_raise():
    with pytest.raises(ValueError):
        fd_d2fdx2([1.0] * 2, [1.0] * 2, [1.0] * 2, [1.0] * 2)