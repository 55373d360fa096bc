from datetime import datetime
from zoneinfo import ZoneInfo

import pytest

from bikram_sambat.converter import Converter


KATHMANDU = ZoneInfo('Asia/Kathmandu')


@pytest.fixture(scope="session")
def converter():
    """Converter whose day boundary is Nepal local time."""
    return Converter(tz=KATHMANDU)


@pytest.fixture
def ktm():
    def build(*args):
        return datetime(*args, tzinfo=KATHMANDU)
    return build
