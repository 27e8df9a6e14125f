import logging

import pytest

from oregon_protocols import OregonProtocols


@pytest.fixture
def logger():
    """Fixture for a logger."""
    return logging.getLogger(__name__)


@pytest.fixture
def proto():
    """Fixture for a real OregonProtocols instance."""
    return OregonProtocols()


@pytest.fixture
def mock_protocols(mocker):
    """Fixture for a mocked OregonProtocols instance."""
    return mocker.create_autospec(OregonProtocols, instance=True)


@pytest.fixture
def thgr228n_message():
    """Raw CUL capture of a THGR228N on channel 1: 23.0 C, 43 %."""
    return "omAAAAAAAB32D4CB3554D54CAB5554B53554B54D4D4CB55554"


@pytest.fixture
def thgr228n_payload():
    """Preprocessor output for thgr228n_message, checksum byte 0x34."""
    return "501A2D10F4002330443400"


@pytest.fixture
def bthr918n_payload():
    """BTHR918N: 23.0 C, 43 %, 155 + 856 hPa, sunny."""
    return "585A6D10F4002330449BC05C"
