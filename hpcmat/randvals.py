"""Single uniform random values of each element depth."""

from __future__ import annotations

import random

import numpy as np


def _unit(rng: random.Random | None) -> float:
    return (rng if rng is not None else random).random()


def _wrap(value: int, bits: int, signed: bool) -> int:
    mask = (1 << bits) - 1
    value &= mask
    if signed and value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _rand_int(low: int, high: int, bits: int, signed: bool, rng) -> int:
    low = _wrap(int(low), bits, signed)
    high = _wrap(int(high), bits, signed)
    return _wrap(low + int(_unit(rng) * (high - low + 1)), bits, signed)


def rand_8u(low: int, high: int, rng: random.Random | None = None) -> int:
    """Uniform integer in [low, high] as an unsigned 8-bit value."""
    return _rand_int(low, high, 8, False, rng)


def rand_16s(low: int, high: int, rng: random.Random | None = None) -> int:
    """Uniform integer in [low, high] as a signed 16-bit value."""
    return _rand_int(low, high, 16, True, rng)


def rand_32s(low: int, high: int, rng: random.Random | None = None) -> int:
    """Uniform integer in [low, high] as a signed 32-bit value."""
    return _rand_int(low, high, 32, True, rng)


def rand_32f(low: float, high: float, rng: random.Random | None = None) -> float:
    """Uniform single-precision value in [low, high + 1)."""
    f = np.float32
    low_f, high_f = f(low), f(high)
    value = low_f + f(_unit(rng)) * (high_f - low_f + f(1.0))
    return float(f(value))


def rand_64f(low: float, high: float, rng: random.Random | None = None) -> float:
    """Uniform double-precision value in [low, high + 1)."""
    return low + _unit(rng) * (high - low + 1.0)