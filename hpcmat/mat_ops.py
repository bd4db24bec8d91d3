"""Element-wise and algebraic operations on :class:`~hpcmat.mat.Mat`.

Integer results wrap around to the matrix depth the way a C assignment
to the element type would; floating results keep the matrix precision.
"""

from __future__ import annotations

import operator
import random
from collections.abc import Callable
from numbers import Number

import numpy as np

from hpcmat.mat import Depth, Mat


def _to_depth(values, depth: Depth) -> np.ndarray:
    """Cast ``values`` to the element type of ``depth``, wrapping integers."""
    with np.errstate(invalid="ignore", over="ignore"):
        return np.asarray(values).astype(depth.dtype)


def _scalar(value: Number, depth: Depth):
    """Convert a scalar argument to the element type, as a C parameter would."""
    return _to_depth(value, depth)[()]


def _check_depths(m: Mat, other: Mat) -> None:
    if m.depth is not other.depth:
        raise TypeError(
            f"depth mismatch: {m.depth.label} and {other.depth.label}"
        )


def _elementwise(m: Mat, operand, op: Callable) -> Mat:
    """Apply ``op`` to the elements of ``m`` and ``operand`` (array or scalar)."""
    depth = m.depth
    if depth.is_float:
        with np.errstate(all="ignore"):
            values = op(m.data, operand)
    else:
        wide = operand.astype(np.int64) if isinstance(operand, np.ndarray) else int(operand)
        values = op(m.data.astype(np.int64), wide)
    result = Mat(m.rows, m.cols, depth)
    result.data = _to_depth(values, depth)
    return result


def mat_zero(m: Mat) -> None:
    """Set every element of ``m`` to zero."""
    m.data[...] = 0


def mat_one(m: Mat) -> None:
    """Set every element of ``m`` to one."""
    m.data[...] = 1


def mat_rand(
    m: Mat,
    low: Number,
    high: Number,
    rng: random.Random | None = None,
) -> None:
    """Fill ``m`` with uniform random values from ``low`` up to ``high + 1``.

    The draw is ``low + u * (high - low + 1)`` with ``u`` in [0, 1); integer
    depths truncate it, so they receive values in [low, high].
    """
    source = rng if rng is not None else random
    low_v = float(_scalar(low, m.depth))
    high_v = float(_scalar(high, m.depth))
    draws = np.array([source.random() for _ in range(m.size)], dtype=np.float64)
    values = low_v + draws * (high_v - low_v + 1.0)
    m.data[...] = _to_depth(values.reshape(m.rows, m.cols), m.depth)


def mat_add(m: Mat, other: Mat | Number) -> Mat:
    """Return ``m + other`` where ``other`` is a matrix of equal shape or a scalar."""
    if isinstance(other, Mat):
        _check_depths(m, other)
        if m.rows != other.rows or m.cols != other.cols:
            raise ValueError("invalid mat size (mat add)")
        return _elementwise(m, other.data, operator.add)
    return _elementwise(m, _scalar(other, m.depth), operator.add)


def mat_mul(m: Mat, other: Mat | Number) -> Mat:
    """Return the matrix product ``m @ other``, or ``m`` scaled by a scalar."""
    if not isinstance(other, Mat):
        return _elementwise(m, _scalar(other, m.depth), operator.mul)
    _check_depths(m, other)
    if m.cols != other.rows:
        raise ValueError("invalid mat size (mat mul)")
    depth = m.depth
    if depth.is_float:
        with np.errstate(all="ignore"):
            values = np.matmul(m.data, other.data)
    else:
        values = np.matmul(m.data.astype(np.int64), other.data.astype(np.int64))
    result = Mat(m.rows, other.cols, depth)
    result.data = _to_depth(values, depth)
    return result


def _truncating_divide(a, b):
    quotient = np.floor_divide(np.abs(a), abs(b))
    return quotient * (np.sign(a) * (1 if b > 0 else -1))


def mat_div(m: Mat, value: Number) -> Mat:
    """Return ``m`` divided element-wise by a scalar.

    Integer depths truncate toward zero and refuse a zero divisor; floating
    depths follow IEEE rules and give infinities or NaN.
    """
    divisor = _scalar(value, m.depth)
    if m.depth.is_float:
        return _elementwise(m, divisor, operator.truediv)
    if divisor == 0:
        raise ZeroDivisionError("integer matrix division by zero")
    return _elementwise(m, divisor, _truncating_divide)


def mat_show(m: Mat) -> None:
    """Print ``m`` to standard output."""
    print(m.format(), end="")