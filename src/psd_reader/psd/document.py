"""
PSD document structure module.

This module contains the main PSD class that represents the decoded
structure of a PSD/PSB file.
"""

import logging
from typing import Any, TypeVar

from attrs import define, field

from psd_reader.exceptions import DecodeWarning
from psd_reader.psd.base import BaseElement
from psd_reader.psd.bin_utils import Cursor
from psd_reader.psd.color_mode_data import ColorModeData
from psd_reader.psd.header import FileHeader
from psd_reader.psd.image_data import ImageData
from psd_reader.psd.image_resources import ImageResources
from psd_reader.psd.layer_and_mask import LayerAndMaskInformation, LayerRecords

logger = logging.getLogger(__name__)

T = TypeVar("T", bound="PSD")


@define(frozen=True)
class PSD(BaseElement):
    """
    Decoded PSD file structure that resembles the specification_.

    .. _specification: https://www.adobe.com/devnet-apps/photoshop/fileformatashtml/

    Example::

        from psd_reader.psd import PSD

        with open(input_file, 'rb') as f:
            psd = PSD.frombytes(f.read())

    .. py:attribute:: header

        See :py:class:`.FileHeader`.

    .. py:attribute:: color_mode_data

        See :py:class:`.ColorModeData`.

    .. py:attribute:: image_resources

        See :py:class:`.ImageResources`.

    .. py:attribute:: layer_and_mask_information

        See :py:class:`.LayerAndMaskInformation`.

    .. py:attribute:: image_data

        See :py:class:`.ImageData`.
    """

    header: FileHeader = field(factory=FileHeader)
    color_mode_data: ColorModeData = field(factory=ColorModeData)
    image_resources: ImageResources = field(factory=ImageResources)
    layer_and_mask_information: LayerAndMaskInformation = field(
        factory=LayerAndMaskInformation
    )
    image_data: ImageData = field(factory=ImageData)

    @classmethod
    def read(
        cls: type[T], cursor: Cursor, encoding: str = "macroman", **kwargs: Any
    ) -> T:
        header = FileHeader.read(cursor)
        logger.debug("read %s" % (header,))
        return cls(
            header,
            ColorModeData.read(cursor, color_mode=header.color_mode),
            ImageResources.read(cursor, encoding=encoding),
            LayerAndMaskInformation.read(
                cursor,
                encoding=encoding,
                version=header.version,
                color_mode=header.color_mode,
            ),
            ImageData.read(cursor),
        )

    @property
    def layer_records(self) -> LayerRecords:
        """Layer records in file order, empty when the file has no layers."""
        layer_info = self.layer_and_mask_information.layer_info
        if layer_info is None:
            return LayerRecords()
        return layer_info.layer_records

    @property
    def warnings(self) -> list[DecodeWarning]:
        """Every advisory warning recorded while decoding, in file order."""
        return list(self.iter_warnings())
