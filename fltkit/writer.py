"""Buffered writing of big- and little-endian binary values to a file."""

from __future__ import annotations

import struct
from os import PathLike
from types import TracebackType
from typing import Optional, Type, Union

BLOCK_SIZE = 4 * 1024


class BinaryWriter:
    """Writes typed values to a file through a block-sized buffer.

    Integer values are truncated to the width of the written type, so
    ``put_uint8(0x1FF)`` writes ``0xFF`` and ``put_int8(-1)`` writes
    ``0xFF``.  Buffered data reaches the file when the buffer fills, on
    :meth:`flush` and on :meth:`close`.
    """

    def __init__(self, path: Union[str, PathLike]) -> None:
        self._file = open(path, "wb")
        self._filename = str(path)
        self._buffer = bytearray()
        self._pos = 0

    def __repr__(self) -> str:
        state = "closed" if self._file is None else "open"
        return (
            f"{type(self).__name__}(filename={self._filename!r}, "
            f"position={self._pos}, {state})"
        )

    def __enter__(self) -> "BinaryWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close()

    # -- buffer handling -----------------------------------------------

    def _check_open(self) -> None:
        if self._file is None:
            raise ValueError("write to a closed BinaryWriter")

    def flush(self) -> None:
        """Write all buffered bytes to the file."""
        self._check_open()
        if self._buffer:
            self._file.write(self._buffer)
            self._buffer.clear()
        self._file.flush()

    def close(self) -> None:
        """Flush pending data and close the file; closing twice is harmless."""
        if self._file is None:
            return
        try:
            self.flush()
        finally:
            self._file.close()
            self._file = None

    def _emit(self, data: bytes) -> None:
        self._check_open()
        view = memoryview(data)
        while view:
            room = BLOCK_SIZE - len(self._buffer)
            chunk, view = view[:room], view[room:]
            self._buffer += chunk
            self._pos += len(chunk)
            if len(self._buffer) >= BLOCK_SIZE:
                self._file.write(self._buffer)
                self._buffer.clear()

    def write(self, data: Union[bytes, bytearray, memoryview]) -> int:
        """Write raw bytes and return how many were written."""
        raw = bytes(data)
        self._emit(raw)
        return len(raw)

    # -- integers ------------------------------------------------------

    def put_int8(self, value: int) -> None:
        self._emit(struct.pack(">B", value & 0xFF))

    def put_uint8(self, value: int) -> None:
        self._emit(struct.pack(">B", value & 0xFF))

    def put_int16_be(self, value: int) -> None:
        self._emit(struct.pack(">H", value & 0xFFFF))

    def put_uint16_be(self, value: int) -> None:
        self._emit(struct.pack(">H", value & 0xFFFF))

    def put_int16_le(self, value: int) -> None:
        self._emit(struct.pack("<H", value & 0xFFFF))

    def put_uint16_le(self, value: int) -> None:
        self._emit(struct.pack("<H", value & 0xFFFF))

    def put_int32_be(self, value: int) -> None:
        self._emit(struct.pack(">I", value & 0xFFFFFFFF))

    def put_uint32_be(self, value: int) -> None:
        self._emit(struct.pack(">I", value & 0xFFFFFFFF))

    def put_int32_le(self, value: int) -> None:
        self._emit(struct.pack("<I", value & 0xFFFFFFFF))

    def put_uint32_le(self, value: int) -> None:
        self._emit(struct.pack("<I", value & 0xFFFFFFFF))

    # -- floats --------------------------------------------------------

    def put_float32_be(self, value: float) -> None:
        self._emit(struct.pack(">f", value))

    def put_float32_le(self, value: float) -> None:
        self._emit(struct.pack("<f", value))

    def put_float64_be(self, value: float) -> None:
        self._emit(struct.pack(">d", value))

    def put_float64_le(self, value: float) -> None:
        self._emit(struct.pack("<d", value))

    # -- state ---------------------------------------------------------

    @property
    def position(self) -> int:
        """Number of bytes written so far, buffered or not."""
        return self._pos

    @property
    def filename(self) -> str:
        return self._filename