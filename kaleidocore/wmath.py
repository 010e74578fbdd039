"""Random numbers, range mapping and word assembly."""

from __future__ import annotations

import random as _random

_RAND_MAX = 2**31 - 1
_generator = _random.Random()


def random_seed(seed: int) -> None:
    """Seed the generator; a seed of zero leaves it untouched."""
    if seed != 0:
        _generator.seed(seed)


def _next() -> int:
    return _generator.randint(0, _RAND_MAX)


def random(howbig: int) -> int:
    """Return a pseudo-random number from 0 up to, not including, ``howbig``."""
    if howbig == 0:
        return 0
    return _next() % abs(howbig)


def random_range(howsmall: int, howbig: int) -> int:
    """Return a pseudo-random number in ``howsmall``..``howbig`` - 1."""
    if howsmall >= howbig:
        return howsmall
    return random(howbig - howsmall) + howsmall


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def map_range(x: int, in_min: int, in_max: int, out_min: int, out_max: int) -> int:
    """Linearly re-map ``x`` from one range to another using integer division."""
    if in_max == in_min:
        raise ZeroDivisionError("input range is empty")
    return _trunc_div((x - in_min) * (out_max - out_min), in_max - in_min) + out_min


def make_word(high: int, low: int | None = None) -> int:
    """Build a 16-bit word from two bytes, or return a lone word as it is."""
    if low is None:
        return high
    return ((high & 0xFF) << 8) | (low & 0xFF)