"""
Binary reading primitives.

:py:class:`Cursor` is the single positional reader shared by all section
decoders. It only knows how to read big-endian values and move around; all
section boundary logic lives in the decoders themselves.
"""

import struct
from typing import Any, Union

from psd_reader.exceptions import OutOfBoundsError, StructuralMismatchError


def pack(fmt: str, *args: Any) -> bytes:
    fmt = str(">" + fmt)
    return struct.pack(fmt, *args)


def pad(number: int, divisor: int) -> int:
    if number % divisor:
        number = (number // divisor + 1) * divisor
    return number


def trimmed_repr(data: Any, trim_length: int = 30) -> str:
    if isinstance(data, bytes):
        if len(data) > trim_length:
            return repr(data[:trim_length] + b" ... =" + str(len(data)).encode("ascii"))
    return repr(data)


class Cursor:
    """
    Positional big-endian reader over a fixed byte buffer.

    Example::

        cursor = Cursor(b'\\x00\\x01\\x00\\x00\\x00\\x02')
        cursor.read_u16()  # 1
        cursor.read_u32()  # 2
        cursor.remaining()  # 0

    Every read and seek is bounds-checked and raises
    :py:class:`~psd_reader.exceptions.OutOfBoundsError` instead of returning
    short data.
    """

    __slots__ = ("_data", "_pos")

    def __init__(self, data: Union[bytes, bytearray, memoryview], offset: int = 0):
        self._data = bytes(data)
        self._pos = 0
        self.seek(offset)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return "Cursor(position=%d, length=%d)" % (self._pos, len(self._data))

    @property
    def position(self) -> int:
        return self._pos

    def tell(self) -> int:
        return self._pos

    def remaining(self) -> int:
        return len(self._data) - self._pos

    def is_readable(self, size: int = 1) -> bool:
        return self.remaining() >= size

    def seek(self, offset: int, whence: int = 0) -> int:
        """
        Move the position. ``whence`` follows :py:meth:`io.IOBase.seek`:
        0 is absolute, 1 is relative to the current position and 2 is
        relative to the end of the buffer.
        """
        if whence == 0:
            target = offset
        elif whence == 1:
            target = self._pos + offset
        elif whence == 2:
            target = len(self._data) + offset
        else:
            raise ValueError("Invalid whence: %r" % whence)

        if target < 0 or target > len(self._data):
            raise OutOfBoundsError(
                "Seek to %d is outside of the buffer of %d bytes"
                % (target, len(self._data)),
                offset=self._pos,
            )
        self._pos = target
        return target

    def skip(self, size: int) -> int:
        """Advance the position by ``size`` bytes."""
        return self.seek(size, 1)

    def skip_to(self, position: int) -> int:
        """
        Advance to the absolute ``position``, discarding bytes in between.

        Moving backward means more bytes were consumed than a declared
        length allowed, which is reported as a structural mismatch.
        """
        if position < self._pos:
            raise StructuralMismatchError(
                "Consumed %d bytes past the declared end at %d"
                % (self._pos - position, position),
                offset=self._pos,
            )
        return self.seek(position)

    def read(self, size: int) -> bytes:
        if size < 0:
            raise ValueError("Negative read size: %d" % size)
        end = self._pos + size
        if end > len(self._data):
            raise OutOfBoundsError(
                "Cannot read %d bytes, only %d remaining" % (size, self.remaining()),
                offset=self._pos,
            )
        data = self._data[self._pos : end]
        self._pos = end
        return data

    def read_fmt(self, fmt: str) -> tuple:
        """
        Reads values according to the big-endian struct format ``fmt``.
        """
        fmt = str(">" + fmt)
        return struct.unpack(fmt, self.read(struct.calcsize(fmt)))

    def read_u8(self) -> int:
        return self.read_fmt("B")[0]

    def read_u16(self) -> int:
        return self.read_fmt("H")[0]

    def read_u32(self) -> int:
        return self.read_fmt("I")[0]

    def read_u64(self) -> int:
        return self.read_fmt("Q")[0]

    def read_i16(self) -> int:
        return self.read_fmt("h")[0]

    def read_i32(self) -> int:
        return self.read_fmt("i")[0]

    def read_string(self, size: int, encoding: str = "latin-1") -> str:
        return self.read(size).decode(encoding, "replace")


def read_length_block(cursor: Cursor, fmt: str = "I", padding: int = 1) -> bytes:
    """
    Read a block of data with a length marker at the beginning.

    The length marker is padded up to ``padding`` and the padded amount of
    bytes is returned.

    :param cursor: :py:class:`Cursor`
    :param fmt: format of the length marker
    :return: bytes object
    """
    length = pad(cursor.read_fmt(fmt)[0], padding)
    return cursor.read(length)


def read_pascal_string(cursor: Cursor, encoding: str = "macroman", padding: int = 1) -> str:
    """
    Read a length-prefixed string whose total size, length byte included,
    is a multiple of ``padding``.
    """
    length = cursor.read_u8()
    if length == 0:
        cursor.skip(padding - 1)
        return ""

    value = cursor.read_string(length, encoding)
    # -1 accounts for the length byte
    padded_length = pad(length + 1, padding) - 1
    cursor.skip(padded_length - length)
    return value
