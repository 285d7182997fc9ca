import sys, pathlib

import pytest

# Ensure the project root directory is in sys.path so that the bytestream
# package (which lives at the repository root) can be imported when the test
# runner's working directory is the tests/ folder.
PROJECT_ROOT = pathlib.Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from bytestream import config  # noqa: E402
from bytestream.stream import ByteStream  # noqa: E402


@pytest.fixture(autouse=True)
def restore_config():
    """Undo any configuration changes a test makes."""
    saved = (config.DEFAULT_ENDIAN, config.COMPRESSION_LEVEL, config.ZERO_LENGTH_MODE)
    yield
    config.DEFAULT_ENDIAN, config.COMPRESSION_LEVEL, config.ZERO_LENGTH_MODE = saved


@pytest.fixture
def stream():
    return ByteStream()
