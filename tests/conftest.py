import pathlib
from datetime import datetime, timezone

import pytest

from jsgettext.recognizer import FunctionNames

DATA_DIR = pathlib.Path(__file__).parent / "data"


@pytest.fixture
def names():
    return FunctionNames()


@pytest.fixture
def data_dir():
    return DATA_DIR


@pytest.fixture
def creation_date():
    return datetime(2024, 1, 2, 3, 4, tzinfo=timezone.utc)
