"""Pytest configuration for psd-reader tests."""

import pytest

from .psd_reader import utils


@pytest.fixture
def minimal_psd() -> bytes:
    """Header, empty color mode data, empty resources and no layers."""
    return utils.psd()
