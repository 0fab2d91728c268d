"""
psd-reader: Python package for decoding Adobe Photoshop PSD files.

The decoder turns an in-memory buffer into an immutable tree describing the
file header, color mode data, image resources and the layer directory.
Pixel data is located but not decompressed.

Basic usage::

    import psd_reader

    with open('example.psd', 'rb') as f:
        psd = psd_reader.decode(f.read())

    for record in psd.layer_records:
        print(record.name, record.blend_mode_name)

Architecture:

- :py:mod:`psd_reader.psd`: Section decoders and the decoded structures
- :py:mod:`psd_reader.constants`: Fixed lookup tables of the format
- :py:mod:`psd_reader.exceptions`: Decode errors and advisory warnings
"""

from psd_reader.psd.bin_utils import Cursor
from psd_reader.psd.document import PSD
from psd_reader.version import __version__


def decode(data: bytes, encoding: str = "macroman") -> PSD:
    """
    Decode a complete PSD/PSB file held in memory.

    :param data: the whole file content.
    :param encoding: encoding of Pascal strings such as layer names.
    :return: :py:class:`~psd_reader.psd.PSD`
    :raises psd_reader.exceptions.PSDDecodeError: when the file cannot be
        decoded; no partial document is returned.
    """
    return PSD.read(Cursor(data), encoding=encoding)


__all__ = ["PSD", "decode", "__version__"]
