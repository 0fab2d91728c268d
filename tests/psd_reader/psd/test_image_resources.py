import pytest

from psd_reader.constants import Resource
from psd_reader.exceptions import OutOfBoundsError, StructuralMismatchError
from psd_reader.psd.bin_utils import Cursor, pack
from psd_reader.psd.image_resources import ImageResource, ImageResources

from ..utils import image_resource, image_resources


def test_image_resources_empty() -> None:
    cursor = Cursor(image_resources() + b"\xff")
    resources = ImageResources.read(cursor)
    assert len(resources) == 0
    assert resources.length == 0
    assert cursor.tell() == 4


def test_image_resources_padded_sizes() -> None:
    first = image_resource(Resource.COPYRIGHT_FLAG, data=b"\x01\x02\x03\x04")
    second = image_resource(Resource.URL, data=b"abcdef", name=b"abc")
    assert len(first) == 16
    assert len(second) == 20
    cursor = Cursor(image_resources(first, second) + b"\xff")

    resources = ImageResources.read(cursor)

    assert resources.length == 36
    assert cursor.tell() == 40
    assert [r.total_size for r in resources] == [16, 20]
    assert sum(r.total_size for r in resources) == resources.length
    assert resources[0].key == Resource.COPYRIGHT_FLAG
    assert resources[0].name == ""
    assert resources[0].data == b"\x01\x02\x03\x04"
    assert resources[1].name == "abc"
    assert resources[1].data == b"abcdef"


def test_image_resource_empty_name_takes_two_bytes() -> None:
    resource = ImageResource.frombytes(b"8BIM" + pack("H", 1000) + b"\x00\x00" + pack("I", 0))
    assert resource.name == ""
    assert resource.total_size == 12


def test_image_resource_odd_data_is_padded() -> None:
    cursor = Cursor(image_resource(1005, data=b"abc") + b"\xff")
    resource = ImageResource.read(cursor)
    assert resource.data == b"abc\x00"
    assert resource.total_size == 16
    assert cursor.tell() == 16


def test_image_resource_lookup() -> None:
    resources = ImageResources.frombytes(
        image_resources(
            image_resource(Resource.XMP_METADATA, data=b"<xmp/>"),
            image_resource(2001, data=b"path"),
            image_resource(12345, data=b"??"),
        )
    )
    assert Resource.XMP_METADATA in resources
    assert resources.get_data(Resource.XMP_METADATA) == b"<xmp/>"
    assert resources.get_data(Resource.ICC_PROFILE) is None
    assert resources.get(Resource.ICC_PROFILE, "missing") == "missing"
    assert resources[0].resource is Resource.XMP_METADATA
    assert resources[1].resource is None
    assert Resource.is_path_info(resources[1].key)
    assert resources[2].resource is None


def test_image_resource_bad_signature_is_advisory() -> None:
    resources = ImageResources.frombytes(
        image_resources(image_resource(1000, data=b"ab", signature=b"MeSa"))
    )
    assert resources[0].signature == b"MeSa"
    assert len(resources[0].warnings) == 1
    assert resources[0].warnings[0].offset == 4


def test_image_resources_overrun() -> None:
    block = image_resource(1000, data=b"\x00" * 4)
    data = pack("I", len(block) - 2) + block + block
    with pytest.raises(StructuralMismatchError) as excinfo:
        ImageResources.frombytes(data)
    error = excinfo.value
    assert error.section == "image_resources"
    assert error.offset == 4 + len(block)
    assert len(error.partial) == 1
    assert error.partial[0].total_size == len(block)


def test_image_resources_truncated_block() -> None:
    block = image_resource(1000, data=b"\x00" * 4)
    data = pack("I", 2 * len(block)) + block + block[:6]
    with pytest.raises(OutOfBoundsError) as excinfo:
        ImageResources.frombytes(data)
    assert excinfo.value.section == "image_resources[1]"
