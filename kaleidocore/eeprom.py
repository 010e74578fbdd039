"""Byte-addressed non-volatile storage, kept in memory on the virtual board."""

from __future__ import annotations

from typing import Iterable, Iterator, SupportsIndex

DEFAULT_SIZE = 1024


def _byte(value: SupportsIndex) -> int:
    return int(value) & 0xFF


class EERef:
    """A reference to one storage cell that reads and writes like a byte."""

    __slots__ = ("_cells", "index")
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, cells: bytearray, index: int) -> None:
        self._cells = cells
        self.index = index

    @property
    def value(self) -> int:
        """The byte stored in the cell."""
        return self._cells[self.index]

    @value.setter
    def value(self, new: SupportsIndex) -> None:
        self._cells[self.index] = _byte(new)

    def update(self, value: SupportsIndex) -> EERef:
        """Write ``value`` only if it differs from what the cell holds."""
        new = _byte(value)
        if new != self.value:
            self.value = new
        return self

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, EERef):
            return self.value == other.value
        if isinstance(other, int):
            return self.value == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"EERef(index={self.index}, value={self.value})"

    def _assign(self, new: int) -> EERef:
        self.value = new
        return self

    def __iadd__(self, other: SupportsIndex) -> EERef:
        return self._assign(self.value + int(other))

    def __isub__(self, other: SupportsIndex) -> EERef:
        return self._assign(self.value - int(other))

    def __imul__(self, other: SupportsIndex) -> EERef:
        return self._assign(self.value * _byte(other))

    def __ifloordiv__(self, other: SupportsIndex) -> EERef:
        return self._assign(self.value // _byte(other))

    def __imod__(self, other: SupportsIndex) -> EERef:
        return self._assign(self.value % _byte(other))

    def __ixor__(self, other: SupportsIndex) -> EERef:
        return self._assign(self.value ^ _byte(other))

    def __iand__(self, other: SupportsIndex) -> EERef:
        return self._assign(self.value & _byte(other))

    def __ior__(self, other: SupportsIndex) -> EERef:
        return self._assign(self.value | _byte(other))

    def __ilshift__(self, other: SupportsIndex) -> EERef:
        return self._assign(self.value << _byte(other))

    def __irshift__(self, other: SupportsIndex) -> EERef:
        return self._assign(self.value >> _byte(other))


class EEPROM:
    """The whole storage space, addressed by cell index."""

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._cells = bytearray(size)

    def _check(self, index: int) -> int:
        if not 0 <= index < len(self._cells):
            raise IndexError(f"cell {index} is outside 0..{len(self._cells) - 1}")
        return index

    def __len__(self) -> int:
        return len(self._cells)

    def __getitem__(self, index: int) -> EERef:
        return EERef(self._cells, self._check(index))

    def __setitem__(self, index: int, value: SupportsIndex) -> None:
        self.write(index, value)

    def __iter__(self) -> Iterator[EERef]:
        return (EERef(self._cells, i) for i in range(len(self._cells)))

    def read(self, index: int) -> int:
        """The byte stored at ``index``."""
        return self._cells[self._check(index)]

    def write(self, index: int, value: SupportsIndex) -> None:
        """Store a byte at ``index``."""
        self._cells[self._check(index)] = _byte(value)

    def update(self, index: int, value: SupportsIndex) -> None:
        """Store a byte at ``index`` only if it differs from the stored one."""
        self[index].update(value)

    def get(self, index: int, size: int) -> bytes:
        """Read ``size`` consecutive bytes starting at ``index``."""
        if size < 0:
            raise ValueError("size must not be negative")
        if size:
            self._check(index)
            self._check(index + size - 1)
        return bytes(self._cells[index:index + size])

    def put(self, index: int, data: Iterable[int]) -> bytes:
        """Store ``data`` from ``index`` on, writing only changed cells."""
        payload = bytes(data)
        if payload:
            self._check(index)
            self._check(index + len(payload) - 1)
        for offset, byte in enumerate(payload):
            self.update(index + offset, byte)
        return payload