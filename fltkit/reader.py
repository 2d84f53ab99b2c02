"""Buffered reading of big- and little-endian binary values."""

from __future__ import annotations

import struct
import warnings
from os import PathLike
from typing import Any, Callable, Optional, TextIO, Union

BLOCK_SIZE = 4 * 1024
_HEX_BYTES_PER_LINE = 15
_HEX_UNIT_SIZE = 3

ProgressCallback = Callable[[float, Any], Any]


def _printable(byte: int) -> bool:
    return 0x20 <= byte <= 0x7E


class BinaryReader:
    """Reads typed values from a byte buffer or a file.

    Reads past the end of the data yield zero bytes instead of failing,
    so a multi-byte value read at the end is padded with zeros.  Readers
    opened from a file load their data in blocks and report progress to
    an optional callback before each block is loaded.
    """

    def __init__(self, data: bytes = b"", filename: Optional[str] = None) -> None:
        self._data = bytearray(data)
        self._filename = filename
        self._pos = 0
        self._size = len(self._data)
        self._blocked = False
        self._block = max(self._size, 1)
        self._loaded = self._size
        self._progress: Optional[tuple[ProgressCallback, Any]] = None

    @classmethod
    def open(cls, path: Union[str, PathLike]) -> "BinaryReader":
        """Open a file for reading; raises OSError if it cannot be read."""
        with open(path, "rb") as handle:
            content = handle.read()
        reader = cls(content, str(path))
        reader._blocked = True
        reader._block = BLOCK_SIZE
        reader._loaded = 0
        return reader

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(filename={self._filename!r}, "
            f"position={self._pos}, length={self._size})"
        )

    def set_progress_callback(self, func: Optional[ProgressCallback], data: Any = None) -> None:
        """Install ``func(fraction, data)``, called before each block is loaded."""
        self._progress = None if func is None else (func, data)

    # -- block loading -------------------------------------------------

    def _load_block(self) -> None:
        if self._progress is not None:
            func, data = self._progress
            func(self._loaded / self._size, data)
        self._loaded = min(self._loaded + self._block, self._size)

    def _ensure(self, end: int) -> None:
        end = min(end, self._size)
        while self._loaded < end:
            self._load_block()

    def _take(self, count: int) -> bytes:
        self._ensure(self._pos + count)
        chunk = bytes(self._data[self._pos : self._pos + count])
        self._pos += len(chunk)
        return chunk.ljust(count, b"\x00")

    def _get(self, fmt: str) -> Any:
        return struct.unpack(fmt, self._take(struct.calcsize(fmt)))[0]

    def _peek(self, fmt: str, what: str) -> int:
        self._ensure(self._pos + 2)
        if self._size - self._pos < 2:
            warnings.warn(f"could not peek on next {what}", RuntimeWarning, stacklevel=3)
            return 0
        return struct.unpack(fmt, bytes(self._data[self._pos : self._pos + 2]))[0]

    # -- raw access ----------------------------------------------------

    def read(self, length: int) -> bytes:
        """Read up to ``length`` bytes; fewer are returned near the end."""
        if length < 0:
            raise ValueError(f"length must not be negative, got {length}")
        count = min(length, self._size - self._pos)
        return self._take(count)

    def rewind(self, n_bytes: int) -> int:
        """Move back ``n_bytes``, stopping at the start; return the distance moved."""
        if n_bytes < 0:
            raise ValueError(f"cannot rewind a negative distance, got {n_bytes}")
        previous_block = self._pos // self._block
        if n_bytes > self._pos:
            n_bytes = self._pos
            self._pos = 0
            warnings.warn(
                "tried rewinding past beginning of file", RuntimeWarning, stacklevel=2
            )
        else:
            self._pos -= n_bytes
        new_block = self._pos // self._block
        if self._blocked and new_block < previous_block:
            self._loaded = new_block * self._block
            self._load_block()
        return n_bytes

    # -- typed reads ---------------------------------------------------

    def get_int8(self) -> int:
        return self._get(">b")

    def get_uint8(self) -> int:
        return self._get(">B")

    def get_int16_be(self) -> int:
        return self._get(">h")

    def get_uint16_be(self) -> int:
        return self._get(">H")

    def get_int16_le(self) -> int:
        return self._get("<h")

    def get_uint16_le(self) -> int:
        return self._get("<H")

    def get_int32_be(self) -> int:
        return self._get(">i")

    def get_uint32_be(self) -> int:
        return self._get(">I")

    def get_int32_le(self) -> int:
        return self._get("<i")

    def get_uint32_le(self) -> int:
        return self._get("<I")

    def get_float32_be(self) -> float:
        return self._get(">f")

    def get_float32_le(self) -> float:
        return self._get("<f")

    def get_float64_be(self) -> float:
        return self._get(">d")

    def get_float64_le(self) -> float:
        return self._get("<d")

    def unget_uint32_be(self, value: int) -> None:
        """Step back four bytes and overwrite them with ``value`` (big-endian)."""
        if self._pos < 4:
            raise ValueError("cannot push back four bytes before the start of the data")
        self._pos -= 4
        self._data[self._pos : self._pos + 4] = struct.pack(">I", value & 0xFFFFFFFF)

    # -- peeks ---------------------------------------------------------

    def peek_int16_be(self) -> int:
        return self._peek(">h", "int16")

    def peek_uint16_be(self) -> int:
        return self._peek(">H", "uint16")

    def peek_int16_le(self) -> int:
        return self._peek("<h", "int16")

    def peek_uint16_le(self) -> int:
        return self._peek("<H", "uint16")

    # -- state ---------------------------------------------------------

    def at_eof(self) -> bool:
        return self._pos == self._size

    @property
    def position(self) -> int:
        return self._pos

    @property
    def length(self) -> int:
        return self._size

    @property
    def remaining(self) -> int:
        return self._size - self._pos

    @property
    def filename(self) -> Optional[str]:
        return self._filename

    # -- diagnostics ---------------------------------------------------

    def hex_dump(self, out: TextIO, n_bytes: int) -> int:
        """Write a hex and ASCII listing of the next ``n_bytes`` to ``out``.

        Consumes the dumped bytes and returns how many were dumped.
        """
        at_end = False
        if self.remaining < n_bytes:
            n_bytes = self.remaining
            at_end = True

        done = 0
        while done < n_bytes:
            parts = [f"0x{self._pos:06x}:  "]
            ascii_chars: list[str] = []
            count = 0
            while count < _HEX_BYTES_PER_LINE and done + count < n_bytes:
                word = 0
                digits = 0
                while digits < _HEX_UNIT_SIZE and done + count < n_bytes:
                    byte = self.get_uint8()
                    word = (word << 8) | byte
                    ascii_chars.append(chr(byte) if _printable(byte) else ".")
                    digits += 1
                    count += 1
                parts.append(f"{word:0{digits * 2}x} ")
            if count < _HEX_BYTES_PER_LINE:
                missing = _HEX_BYTES_PER_LINE - count
                pad = (missing + _HEX_UNIT_SIZE) // _HEX_UNIT_SIZE - 1 + 2 * missing
                parts.append(" " * pad)
            parts.append(' "' + "".join(ascii_chars) + '"')
            out.write("".join(parts) + "\n")
            done += count

        if at_end:
            out.write(f"0x{self._pos:06x}:  [reached end of file]\n")
        return n_bytes