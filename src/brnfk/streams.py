from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import BinaryIO, Iterable, Optional


class Input(ABC):
    """Byte source consumed by the ``,`` command."""

    def has_next(self) -> bool:
        return True

    @abstractmethod
    def next(self) -> Optional[int]:
        """Block until a byte is available. ``None`` means the source is exhausted."""


class Output(ABC):
    """Byte sink fed by the ``.`` command."""

    @abstractmethod
    def write(self, value: int) -> None:
        ...


class StdinInput(Input):
    # Interactive: reports more input until a read actually hits EOF.
    def __init__(self, stream: Optional[BinaryIO] = None):
        self._stream = stream

    def next(self) -> Optional[int]:
        stream = self._stream if self._stream is not None else sys.stdin.buffer
        chunk = stream.read(1)
        if not chunk:
            return None
        return chunk[0]


class BytesInput(Input):
    def __init__(self, data: Iterable[int] = b""):
        self._data = bytes(data)
        self._pos = 0

    def has_next(self) -> bool:
        return self._pos < len(self._data)

    def next(self) -> Optional[int]:
        if not self.has_next():
            return None
        value = self._data[self._pos]
        self._pos += 1
        return value


class NullInput(Input):
    def has_next(self) -> bool:
        return False

    def next(self) -> Optional[int]:
        return None


class StdoutOutput(Output):
    def __init__(self, stream: Optional[BinaryIO] = None):
        self._stream = stream

    def write(self, value: int) -> None:
        stream = self._stream if self._stream is not None else sys.stdout.buffer
        stream.write(bytes((value,)))
        stream.flush()


class BufferOutput(Output):
    def __init__(self) -> None:
        self._buffer = bytearray()

    def write(self, value: int) -> None:
        self._buffer.append(value)

    def getvalue(self) -> bytes:
        return bytes(self._buffer)
