"""Core constants, helper arithmetic and the simulated clock of the virtual board."""

from __future__ import annotations

import math
from typing import SupportsFloat

HIGH = 0x1
LOW = 0x0

INPUT = 0x0
OUTPUT = 0x1
INPUT_PULLUP = 0x2

PI = math.pi
HALF_PI = math.pi / 2
TWO_PI = math.tau
DEG_TO_RAD = math.pi / 180
RAD_TO_DEG = 180 / math.pi
EULER = math.e

SERIAL = 0x0
DISPLAY = 0x1

LSBFIRST = 0
MSBFIRST = 1

CHANGE = 1
FALLING = 2
RISING = 3

INTERNAL = 3
DEFAULT = 1
EXTERNAL = 0

NOT_A_PIN = 0
NOT_A_PORT = 0
NOT_AN_INTERRUPT = -1

NOT_ON_TIMER = 0
TIMER0A = 1
TIMER0B = 2
TIMER1A = 3
TIMER1B = 4
TIMER1C = 5
TIMER2 = 6
TIMER2A = 7
TIMER2B = 8
TIMER3A = 9
TIMER3B = 10
TIMER3C = 11
TIMER4A = 12
TIMER4B = 13
TIMER4C = 14
TIMER4D = 15
TIMER5A = 16
TIMER5B = 17
TIMER5C = 18


class VirtualClock:
    """A clock that advances by one millisecond every time it is read."""

    def __init__(self) -> None:
        self._time = 0

    def millis(self) -> int:
        """Advance the clock by one millisecond and return the new time."""
        self._time += 1
        return self._time

    def micros(self) -> int:
        """Advance the clock and return the time in microseconds."""
        return self.millis() * 1000

    def delay(self, ms: int) -> None:
        """Let ``ms`` milliseconds pass."""
        for _ in range(max(ms, 0)):
            self.millis()

    def delay_microseconds(self, us: int) -> None:
        """Let ``us`` microseconds pass, in whole milliseconds."""
        self.delay(us // 1000)


_clock = VirtualClock()


def millis() -> int:
    """Read the shared virtual clock in milliseconds."""
    return _clock.millis()


def micros() -> int:
    """Read the shared virtual clock in microseconds."""
    return _clock.micros()


def delay(ms: int) -> None:
    """Let ``ms`` milliseconds pass on the shared clock."""
    _clock.delay(ms)


def delay_microseconds(us: int) -> None:
    """Let ``us`` microseconds pass on the shared clock."""
    _clock.delay_microseconds(us)


def constrain(amt, low, high):
    """Clamp ``amt`` into the range ``low``..``high``."""
    if amt < low:
        return low
    if amt > high:
        return high
    return amt


def arduino_abs(x):
    """Absolute value as the board's macro computes it."""
    return x if x > 0 else -x


def arduino_round(x: SupportsFloat) -> int:
    """Round half away from zero to an integer."""
    value = float(x)
    return int(value + 0.5) if value >= 0 else int(value - 0.5)


def radians(deg: float) -> float:
    """Convert degrees to radians."""
    return deg * DEG_TO_RAD


def degrees(rad: float) -> float:
    """Convert radians to degrees."""
    return rad * RAD_TO_DEG


def sq(x):
    """Square of ``x``."""
    return x * x


def low_byte(w: int) -> int:
    """Least significant byte of ``w``."""
    return w & 0xFF


def high_byte(w: int) -> int:
    """Second least significant byte of ``w``."""
    return (w >> 8) & 0xFF


def bit(b: int) -> int:
    """Integer with only bit ``b`` set."""
    return 1 << b


def bit_read(value: int, bit_index: int) -> int:
    """Return bit ``bit_index`` of ``value`` as 0 or 1."""
    return (value >> bit_index) & 0x01


def bit_set(value: int, bit_index: int) -> int:
    """Return ``value`` with bit ``bit_index`` set."""
    return value | (1 << bit_index)


def bit_clear(value: int, bit_index: int) -> int:
    """Return ``value`` with bit ``bit_index`` cleared."""
    return value & ~(1 << bit_index)


def bit_write(value: int, bit_index: int, bit_value) -> int:
    """Return ``value`` with bit ``bit_index`` set or cleared by ``bit_value``."""
    if bit_value:
        return bit_set(value, bit_index)
    return bit_clear(value, bit_index)