"""Configuración de pytest para bliq-api."""

import sys
from pathlib import Path

import pytest

# Agrega src/ y la raíz del repo al PYTHONPATH para imports absolutos
root_path = Path(__file__).parent.parent
for path in (root_path / "src", root_path):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from tests.fakes.fake_http_transport import FakeHttpTransport  # noqa: E402

TOKEN = "tok-123"


@pytest.fixture
def token() -> str:
    return TOKEN


@pytest.fixture
def fake_transport() -> FakeHttpTransport:
    return FakeHttpTransport()
