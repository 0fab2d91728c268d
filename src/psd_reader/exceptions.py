"""
Decode errors and advisory warnings.

Every fatal condition derives from :py:class:`PSDDecodeError`, which is a
:py:class:`ValueError` so that callers can catch malformed input the same
way as any other bad value. Non-fatal anomalies are kept as
:py:class:`DecodeWarning` records on the element where they were found.
"""

import logging
from contextlib import contextmanager
from typing import Any, Iterator, Optional

from attrs import define

logger = logging.getLogger(__name__)


class PSDDecodeError(ValueError):
    """
    Base class of all decode failures.

    .. py:attribute:: section

        Name of the innermost section being decoded, e.g. ``'header'`` or
        ``'layer_record[2]'``.

    .. py:attribute:: offset

        Byte offset in the buffer where the failure was detected.
    """

    def __init__(
        self,
        message: str,
        section: Optional[str] = None,
        offset: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.section = section
        self.offset = offset

    def __str__(self) -> str:
        location = []
        if self.section is not None:
            location.append("section=%s" % self.section)
        if self.offset is not None:
            location.append("offset=%d" % self.offset)
        if location:
            return "%s (%s)" % (self.message, ", ".join(location))
        return self.message


class OutOfBoundsError(PSDDecodeError):
    """A primitive read or seek would go past the end of the buffer."""


class InvalidSignatureError(PSDDecodeError):
    """The file signature is not ``b'8BPS'``."""


class StructuralMismatchError(PSDDecodeError):
    """
    A declared length does not reconcile with the bytes actually consumed.

    .. py:attribute:: partial

        The partially decoded element, when one is available.
    """

    def __init__(
        self,
        message: str,
        section: Optional[str] = None,
        offset: Optional[int] = None,
        partial: Any = None,
    ) -> None:
        super().__init__(message, section, offset)
        self.partial = partial


class UnsupportedFeatureError(PSDDecodeError):
    """The file uses a feature this decoder deliberately does not handle."""


@define(frozen=True)
class DecodeWarning:
    """
    Advisory, non-fatal anomaly found while decoding.
    """

    section: str
    offset: int
    message: str

    @classmethod
    def emit(cls, section: str, offset: int, message: str) -> "DecodeWarning":
        """Log the anomaly and return it as a record."""
        logger.warning("%s at offset %d: %s" % (section, offset, message))
        return cls(section, offset, message)


@contextmanager
def decoding(section: str, cursor: Any) -> Iterator[None]:
    """
    Annotate decode errors raised in the block with ``section``.

    Only the innermost section is recorded; outer blocks leave an already
    annotated error untouched.
    """
    try:
        yield
    except PSDDecodeError as e:
        if e.section is None:
            e.section = section
        if e.offset is None:
            e.offset = cursor.tell()
        raise
