"""
Layer and mask data structures.

This module implements the "Layer and Mask Information" section of PSD
files. It is the most involved part of the format because every layer
record ends with a variable-length block whose declared size, not its
parsed contents, decides where the next record starts.

Key classes:

- :py:class:`LayerAndMaskInformation`: Top-level container for all layer data
- :py:class:`LayerInfo`: Contains layer records and channel image data
- :py:class:`LayerRecords`: List of individual layer records
- :py:class:`LayerRecord`: Single layer metadata (name, bounds, blend mode, etc.)
- :py:class:`ChannelInfo`: Channel metadata within a layer record
- :py:class:`ChannelImageData`: Location of the compressed channel planes
- :py:class:`LayerMaskAdjustmentData`: Layer mask parameters, kept opaque
- :py:class:`LayerBlendingRangesData`: Blending ranges, kept opaque

Each layer record contains:

1. **Metadata**: Rectangle bounds, blend mode, opacity, flags
2. **Channel info**: List of channels (R, G, B, A, masks, etc.) with byte lengths
3. **Mask data and blend ranges**: Size-prefixed blocks, skipped
4. **Layer name**: Pascal string (legacy, inaccurate for Unicode names)
5. **Additional layer information**: Tagged blocks, skipped by seeking to
   the declared end of the record

Example of reading layer metadata::

    from psd_reader import decode

    psd = decode(data)
    layer_info = psd.layer_and_mask_information.layer_info
    for record in layer_info.layer_records:
        print(f"Layer: {record.name}")
        print(f"  Bounds: {record.top}, {record.left}, {record.right}, {record.bottom}")
        print(f"  Blend mode: {record.blend_mode_name}")
        print(f"  Channels: {len(record.channel_info)}")
"""

import logging
from typing import Any, Optional, TypeVar

from attrs import define, field

from psd_reader.constants import (
    BLEND_SIGNATURE,
    BlendMode,
    ChannelID,
    Clipping,
    ColorMode,
    channel_name,
)
from psd_reader.exceptions import (
    DecodeWarning,
    StructuralMismatchError,
    UnsupportedFeatureError,
    decoding,
)
from psd_reader.psd.base import BaseElement, ListElement
from psd_reader.psd.bin_utils import Cursor, pad, trimmed_repr

logger = logging.getLogger(__name__)

T_LayerAndMaskInformation = TypeVar(
    "T_LayerAndMaskInformation", bound="LayerAndMaskInformation"
)
T_LayerInfo = TypeVar("T_LayerInfo", bound="LayerInfo")
T_ChannelInfo = TypeVar("T_ChannelInfo", bound="ChannelInfo")
T_LayerFlags = TypeVar("T_LayerFlags", bound="LayerFlags")
T_LayerRecords = TypeVar("T_LayerRecords", bound="LayerRecords")
T_LayerRecord = TypeVar("T_LayerRecord", bound="LayerRecord")
T_MaskData = TypeVar("T_MaskData", bound="LayerMaskAdjustmentData")
T_BlendingRanges = TypeVar("T_BlendingRanges", bound="LayerBlendingRangesData")


def _length_format(version: int) -> str:
    # PSB widens section and channel lengths to 8 bytes.
    return "Q" if version == 2 else "I"


@define(frozen=True)
class LayerAndMaskInformation(BaseElement):
    """
    Layer and mask information section.

    .. py:attribute:: length

        Declared byte length of the section, excluding the length field.

    .. py:attribute:: layer_info

        See :py:class:`.LayerInfo`. None when the section is empty.

    Global layer mask info and global tagged blocks that follow the layer
    info are skipped.
    """

    length: int = 0
    layer_info: Optional["LayerInfo"] = None

    @classmethod
    def read(
        cls: type[T_LayerAndMaskInformation],
        cursor: Cursor,
        encoding: str = "macroman",
        version: int = 1,
        color_mode: int = ColorMode.RGB,
        **kwargs: Any,
    ) -> T_LayerAndMaskInformation:
        with decoding("layer_and_mask_information", cursor):
            start_pos = cursor.tell()
            length = cursor.read_fmt(_length_format(version))[0]
            end_pos = cursor.tell() + length
            logger.debug(
                "reading layer and mask info, len=%d, offset=%d" % (length, start_pos)
            )
            if length == 0:
                return cls()

            layer_info = LayerInfo.read(cursor, encoding, version, color_mode)
            self = cls(length, layer_info)
            if cursor.tell() > end_pos:
                raise StructuralMismatchError(
                    "LayerAndMaskInformation is broken: current position=%d, "
                    "expected=%d" % (cursor.tell(), end_pos),
                    offset=cursor.tell(),
                    partial=self,
                )
            cursor.skip_to(end_pos)
            return self


@define(frozen=True)
class LayerInfo(BaseElement):
    """
    High-level organization of the layer information.

    .. py:attribute:: length

        Byte length of the layer info, padded to even.

    .. py:attribute:: layer_count

        Layer count. A negative count, meaning that the first alpha channel
        holds the transparency of the merged result, is not supported.

    .. py:attribute:: layer_records

        Information about each layer in file order, bottom-most first. See
        :py:class:`.LayerRecords`.

    .. py:attribute:: channel_image_data

        Location of the channel image data. See
        :py:class:`.ChannelImageData`.
    """

    length: int = 0
    layer_count: int = 0
    layer_records: "LayerRecords" = field(factory=lambda: LayerRecords())
    channel_image_data: "ChannelImageData" = field(
        factory=lambda: ChannelImageData()
    )

    @classmethod
    def read(
        cls: type[T_LayerInfo],
        cursor: Cursor,
        encoding: str = "macroman",
        version: int = 1,
        color_mode: int = ColorMode.RGB,
        **kwargs: Any,
    ) -> T_LayerInfo:
        with decoding("layer_info", cursor):
            length = pad(cursor.read_fmt(_length_format(version))[0], 2)
            logger.debug("reading layer info, len=%d" % length)
            end_pos = cursor.tell() + length
            if length == 0:
                return cls(channel_image_data=ChannelImageData(cursor.tell(), 0))

            layer_count = cursor.read_i16()
            if layer_count < 0:
                raise UnsupportedFeatureError(
                    "Negative layer count %d (merged alpha channel) is not "
                    "supported" % layer_count,
                    offset=cursor.tell() - 2,
                )

            layer_records = LayerRecords.read(
                cursor, layer_count, encoding, version, color_mode
            )
            channel_image_data = ChannelImageData(
                cursor.tell(),
                sum(c.length for record in layer_records for c in record.channel_info),
            )
            self = cls(length, layer_count, layer_records, channel_image_data)
            if cursor.tell() > end_pos:
                raise StructuralMismatchError(
                    "Layer records overrun the layer info length %d by %d bytes"
                    % (length, cursor.tell() - end_pos),
                    offset=cursor.tell(),
                    partial=self,
                )
            cursor.skip_to(end_pos)
            return self


@define(frozen=True)
class ChannelImageData(BaseElement):
    """
    Placeholder for the channel image data following the layer records.

    Pixel planes are not decoded; this only tells where they are.

    .. py:attribute:: offset

        Offset of the first channel plane.

    .. py:attribute:: length

        Sum of the declared lengths of every channel of every layer.
    """

    offset: int = 0
    length: int = 0


@define(frozen=True)
class ChannelInfo(BaseElement):
    """
    Channel information.

    .. py:attribute:: id

        Channel ID: 0 = red, 1 = green, etc.; -1 = transparency mask; -2 =
        user supplied layer mask, -3 real user supplied layer mask (when both
        a user mask and a vector mask are present). See
        :py:class:`~psd_reader.constants.ChannelID`.

    .. py:attribute:: length

        Length of the corresponding channel data.

    .. py:attribute:: name

        Semantic tag of the channel in the document color mode, e.g.
        ``'alpha'`` or ``'red'``; None when not known.
    """

    id: int = ChannelID.CHANNEL_0
    length: int = 0
    name: Optional[str] = None

    @property
    def kind(self) -> Optional[ChannelID]:
        """Resolved :py:class:`~psd_reader.constants.ChannelID` or None."""
        return ChannelID.resolve(self.id)

    @classmethod
    def read(
        cls: type[T_ChannelInfo],
        cursor: Cursor,
        version: int = 1,
        color_mode: int = ColorMode.RGB,
        **kwargs: Any,
    ) -> T_ChannelInfo:
        channel_id, length = cursor.read_fmt("h" + _length_format(version))
        return cls(channel_id, length, channel_name(channel_id, color_mode))


@define(frozen=True)
class LayerFlags(BaseElement):
    """
    Layer flags.

    Note there are undocumented flags. Maybe photoshop version.

    .. py:attribute:: transparency_protected
    .. py:attribute:: visible
    .. py:attribute:: pixel_data_irrelevant

        Only meaningful when ``photoshop_v5_later`` is set.
    """

    transparency_protected: bool = False
    visible: bool = True
    obsolete: bool = field(default=False, repr=False)
    photoshop_v5_later: bool = field(default=True, repr=False)
    pixel_data_irrelevant: bool = False
    undocumented_1: bool = field(default=False, repr=False)
    undocumented_2: bool = field(default=False, repr=False)
    undocumented_3: bool = field(default=False, repr=False)

    @property
    def value(self) -> int:
        """The flags as the raw byte."""
        return (
            (self.transparency_protected * 1)
            | ((not self.visible) * 2)
            | (self.obsolete * 4)
            | (self.photoshop_v5_later * 8)
            | (self.pixel_data_irrelevant * 16)
            | (self.undocumented_1 * 32)
            | (self.undocumented_2 * 64)
            | (self.undocumented_3 * 128)
        )

    @classmethod
    def from_byte(cls: type[T_LayerFlags], flags: int) -> T_LayerFlags:
        return cls(
            bool(flags & 1),
            not bool(flags & 2),  # set means hidden
            bool(flags & 4),
            bool(flags & 8),
            bool(flags & 16),
            bool(flags & 32),
            bool(flags & 64),
            bool(flags & 128),
        )

    @classmethod
    def read(cls: type[T_LayerFlags], cursor: Cursor, **kwargs: Any) -> T_LayerFlags:
        return cls.from_byte(cursor.read_u8())


@define(frozen=True)
class LayerMaskAdjustmentData(BaseElement):
    """
    Layer mask / adjustment layer data.

    The mask rectangle, default color and flags are not decoded; the block
    is skipped by its declared size.

    .. py:attribute:: size

        Declared size. 0 means the layer has no mask data.

    .. py:attribute:: data

        The skipped bytes.
    """

    size: int = 0
    data: bytes = field(default=b"", repr=trimmed_repr)

    @classmethod
    def read(cls: type[T_MaskData], cursor: Cursor, **kwargs: Any) -> T_MaskData:
        size = cursor.read_u32()
        if size == 0:
            return cls()
        return cls(size, cursor.read(size))


@define(frozen=True)
class LayerBlendingRangesData(BaseElement):
    """
    Layer blending ranges.

    Composite and per-channel gray blend source and destination ranges are
    not decoded; the block is skipped by its declared size.

    .. py:attribute:: size
    .. py:attribute:: data

        The skipped bytes.
    """

    size: int = 0
    data: bytes = field(default=b"", repr=trimmed_repr)

    @classmethod
    def read(
        cls: type[T_BlendingRanges], cursor: Cursor, **kwargs: Any
    ) -> T_BlendingRanges:
        size = cursor.read_u32()
        return cls(size, cursor.read(size))


@define(repr=False, frozen=True)
class LayerRecords(ListElement):
    """
    List of layer records. See :py:class:`.LayerRecord`.
    """

    @classmethod
    def read(  # type: ignore[override]
        cls: type[T_LayerRecords],
        cursor: Cursor,
        layer_count: int,
        encoding: str = "macroman",
        version: int = 1,
        color_mode: int = ColorMode.RGB,
        **kwargs: Any,
    ) -> T_LayerRecords:
        items = []
        for index in range(layer_count):
            with decoding("layer_record[%d]" % index, cursor):
                items.append(LayerRecord.read(cursor, encoding, version, color_mode))
        return cls(items)  # type: ignore[arg-type]


@define(frozen=True)
class LayerRecord(BaseElement):
    """
    Layer record.

    .. py:attribute:: top

        Top position.

    .. py:attribute:: left

        Left position.

    .. py:attribute:: right

        Right position.

    .. py:attribute:: bottom

        Bottom position.

    .. py:attribute:: channel_info

        List of :py:class:`.ChannelInfo`.

    .. py:attribute:: signature

        Blend mode signature, expected to be ``b'8BIM'``.

    .. py:attribute:: blend_mode

        Raw 4-byte blend mode key. See
        :py:class:`~psd_reader.constants.BlendMode`.

    .. py:attribute:: opacity

        Opacity, 0 = transparent, 255 = opaque.

    .. py:attribute:: clipping

        Clipping, 0 = base, 1 = non-base. See
        :py:class:`~psd_reader.constants.Clipping`.

    .. py:attribute:: flags

        See :py:class:`.LayerFlags`.

    .. py:attribute:: extra_length

        Declared length of the trailing block holding mask data, blending
        ranges, name and additional layer information.

    .. py:attribute:: mask_data

        See :py:class:`.LayerMaskAdjustmentData`.

    .. py:attribute:: blending_ranges

        See :py:class:`.LayerBlendingRangesData`.

    .. py:attribute:: name

        Layer name, or None when the record has no name.
    """

    top: int = 0
    left: int = 0
    right: int = 0
    bottom: int = 0
    channel_info: tuple = field(factory=tuple, converter=tuple)
    signature: bytes = field(default=BLEND_SIGNATURE, repr=False)
    blend_mode: bytes = BlendMode.NORMAL.value
    opacity: int = 255
    clipping: int = Clipping.BASE
    flags: LayerFlags = field(factory=LayerFlags)
    extra_length: int = field(default=0, repr=False)
    mask_data: LayerMaskAdjustmentData = field(factory=LayerMaskAdjustmentData)
    blending_ranges: LayerBlendingRangesData = field(
        factory=LayerBlendingRangesData
    )
    name: Optional[str] = None
    warnings: tuple = field(factory=tuple, converter=tuple, repr=False)

    @classmethod
    def read(
        cls: type[T_LayerRecord],
        cursor: Cursor,
        encoding: str = "macroman",
        version: int = 1,
        color_mode: int = ColorMode.RGB,
        **kwargs: Any,
    ) -> T_LayerRecord:
        start_pos = cursor.tell()
        top, left, right, bottom, num_channels = cursor.read_fmt("4iH")
        channel_info = [
            ChannelInfo.read(cursor, version, color_mode) for i in range(num_channels)
        ]
        warnings = []
        signature_pos = cursor.tell()
        signature, blend_mode, opacity, clipping = cursor.read_fmt("4s4sBB")
        if signature != BLEND_SIGNATURE:
            warnings.append(
                DecodeWarning.emit(
                    "layer_record",
                    signature_pos,
                    "Unexpected blend mode signature %r" % signature,
                )
            )
        if BlendMode.resolve(blend_mode) is None:
            logger.info("Unknown blend mode %r" % blend_mode)
        flags = LayerFlags.read(cursor)
        extra_length = cursor.read_fmt("xI")[0]
        extra_start = cursor.tell()

        mask_data = LayerMaskAdjustmentData()
        blending_ranges = LayerBlendingRangesData()
        name = None
        if extra_length:
            mask_data = LayerMaskAdjustmentData.read(cursor)
            blending_ranges = LayerBlendingRangesData.read(cursor)
            name = cls._read_name(cursor, encoding)

        self = cls(
            top=top,
            left=left,
            right=right,
            bottom=bottom,
            channel_info=channel_info,
            signature=signature,
            blend_mode=blend_mode,
            opacity=opacity,
            clipping=clipping,
            flags=flags,
            extra_length=extra_length,
            mask_data=mask_data,
            blending_ranges=blending_ranges,
            name=name,
            warnings=warnings,
        )
        end_pos = extra_start + extra_length
        if cursor.tell() > end_pos:
            raise StructuralMismatchError(
                "Layer record extra data overruns its declared length %d by "
                "%d bytes" % (extra_length, cursor.tell() - end_pos),
                offset=cursor.tell(),
                partial=self,
            )
        # Additional layer information is not modeled.
        cursor.skip_to(end_pos)
        logger.debug("  read layer record, len=%d" % (cursor.tell() - start_pos))
        return self

    @staticmethod
    def _read_name(cursor: Cursor, encoding: str) -> Optional[str]:
        # Unlike resource names, an empty layer name takes only the length
        # byte.
        length = cursor.read_u8()
        if length == 0:
            return None
        return cursor.read_string(length, encoding)

    @property
    def blend_mode_name(self) -> Optional[str]:
        """Human readable blend mode, e.g. 'normal'; None for unknown keys."""
        return BlendMode.name_of(self.blend_mode)

    @property
    def width(self) -> int:
        """Width of the layer."""
        return self.right - self.left

    @property
    def height(self) -> int:
        """Height of the layer."""
        return self.bottom - self.top

