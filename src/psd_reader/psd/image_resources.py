"""
Image resources section structure. Image resources are used to store non-pixel
data associated with images, such as pen tool paths or slices.

See :py:class:`~psd_reader.constants.Resource` to check known resource
names. Resource data is kept as plain bytes.

Example::

    from psd_reader.constants import Resource

    xmp = psd.image_resources.get_data(Resource.XMP_METADATA)
"""

import logging
from typing import Any, Optional, TypeVar

from attrs import define, field

from psd_reader.constants import RESOURCE_SIGNATURE, Resource
from psd_reader.exceptions import DecodeWarning, StructuralMismatchError, decoding
from psd_reader.psd.base import BaseElement, ListElement
from psd_reader.psd.bin_utils import (
    Cursor,
    read_length_block,
    read_pascal_string,
    trimmed_repr,
)

logger = logging.getLogger(__name__)

T_ImageResources = TypeVar("T_ImageResources", bound="ImageResources")
T_ImageResource = TypeVar("T_ImageResource", bound="ImageResource")


@define(repr=False, frozen=True)
class ImageResources(ListElement):
    """
    Image resources section of the PSD file. Ordered list of
    :py:class:`.ImageResource`.

    .. py:attribute:: length

        Declared byte length of the section, excluding the length field.
    """

    length: int = 0

    def get(self, key: Any, default: Any = None) -> Any:
        """
        Get the first :py:class:`.ImageResource` with the numeric ``key``.
        """
        for item in self:
            if item.key == key:
                return item
        return default

    def get_data(self, key: Any, default: Any = None) -> Any:
        """
        Get data from the image resources.

        Shortcut for the following::

            if key in image_resources:
                value = image_resources.get(key).data
        """
        item = self.get(key)
        if item is None:
            return default
        return item.data

    def __contains__(self, key: Any) -> bool:
        return self.get(key) is not None

    @classmethod
    def read(
        cls: type[T_ImageResources],
        cursor: Cursor,
        encoding: str = "macroman",
        **kwargs: Any,
    ) -> T_ImageResources:
        with decoding("image_resources", cursor):
            length = cursor.read_u32()
            start_pos = cursor.tell()
            logger.debug(
                "reading image resources, len=%d, offset=%d" % (length, start_pos)
            )
            items = []
            remaining = length
            while remaining > 0:
                with decoding("image_resources[%d]" % len(items), cursor):
                    item = ImageResource.read(cursor, encoding=encoding)
                items.append(item)
                remaining -= item.total_size

            if remaining < 0:
                raise StructuralMismatchError(
                    "Image resources overrun the declared length %d by %d bytes"
                    % (length, -remaining),
                    offset=cursor.tell(),
                    partial=cls(items, length),  # type: ignore[call-arg]
                )
            return cls(items, length)  # type: ignore[call-arg]


@define(frozen=True)
class ImageResource(BaseElement):
    """
    Image resource block.

    .. py:attribute:: signature

        Binary signature, expected to be ``b'8BIM'``.

    .. py:attribute:: key

        Unique numeric identifier for the resource. See
        :py:class:`~psd_reader.constants.Resource`.

    .. py:attribute:: name

        Pascal string name, usually empty.

    .. py:attribute:: data

        The resource data, including the padding byte for odd lengths.

    .. py:attribute:: total_size

        Bytes consumed by the whole block, header fields included.
    """

    signature: bytes = field(default=RESOURCE_SIGNATURE, repr=False)
    key: int = 1000
    name: str = ""
    data: bytes = field(default=b"", repr=trimmed_repr)
    total_size: int = 0
    warnings: tuple = field(factory=tuple, converter=tuple, repr=False)

    @property
    def resource(self) -> Optional[Resource]:
        """Resolved :py:class:`~psd_reader.constants.Resource` or None."""
        return Resource.resolve(self.key)

    @classmethod
    def read(
        cls: type[T_ImageResource],
        cursor: Cursor,
        encoding: str = "macroman",
        **kwargs: Any,
    ) -> T_ImageResource:
        start_pos = cursor.tell()
        signature, key = cursor.read_fmt("4sH")
        warnings = []
        if signature != RESOURCE_SIGNATURE:
            warnings.append(
                DecodeWarning.emit(
                    "image_resources",
                    start_pos,
                    "Unexpected resource signature %r" % signature,
                )
            )
        if Resource.resolve(key) is None:
            if Resource.is_path_info(key):
                logger.debug("Undefined PATH_INFO found: %d" % (key))
            elif Resource.is_plugin_resource(key):
                logger.debug("Undefined PLUGIN_RESOURCE found: %d" % (key))
            else:
                logger.info("Unknown image resource %d" % (key))
        name = read_pascal_string(cursor, encoding, padding=2)
        data = read_length_block(cursor, padding=2)
        total_size = cursor.tell() - start_pos
        logger.debug("  read image resource %d, len=%d" % (key, total_size))
        return cls(signature, key, name, data, total_size, warnings)
