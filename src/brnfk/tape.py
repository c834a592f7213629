from __future__ import annotations


class Tape:
    """
    Unbounded byte memory.

    Every cell is zero until touched. Any access at index k materializes
    cells 0..k, so the backing buffer only ever grows.
    """

    def __init__(self) -> None:
        self._cells = bytearray()

    def _ensure(self, index: int) -> None:
        if index < 0:
            raise IndexError(f"tape index out of range: {index}")
        if index >= len(self._cells):
            self._cells.extend(bytes(index + 1 - len(self._cells)))

    def increment(self, index: int) -> None:
        self._ensure(index)
        self._cells[index] = (self._cells[index] + 1) & 0xFF

    def decrement(self, index: int) -> None:
        self._ensure(index)
        self._cells[index] = (self._cells[index] - 1) & 0xFF

    def set(self, index: int, value: int) -> None:
        self._ensure(index)
        self._cells[index] = value & 0xFF

    def get(self, index: int) -> int:
        self._ensure(index)
        return self._cells[index]

    def __len__(self) -> int:
        return len(self._cells)

    def snapshot(self) -> bytes:
        return bytes(self._cells)
