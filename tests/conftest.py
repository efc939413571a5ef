"""Configuração do pytest para o cliente Onbo."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from onbo import Onbo  # noqa: E402
from tests.fakes.fake_onbo_api import TEST_CLIENT_ID, TEST_SECRET, FakeOnboApi  # noqa: E402


@pytest.fixture
def fake_api() -> FakeOnboApi:
    return FakeOnboApi()


@pytest.fixture
def onbo(fake_api: FakeOnboApi) -> Onbo:
    """Client apontando para o fake (sem rede)."""
    return Onbo(TEST_CLIENT_ID, TEST_SECRET, http_client=fake_api.client())
