import io

import pytest

from charstat.tables import get_table


@pytest.fixture(scope="session")
def table():
    return get_table()


@pytest.fixture
def utf8_stream():
    def make(text):
        return io.BytesIO(text.encode("utf-8") if isinstance(text, str) else text)
    return make
