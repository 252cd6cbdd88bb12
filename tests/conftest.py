import logging

import pytest

from merklecommit.core.settings import get_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate tests from MERKLECOMMIT_* variables in the environment."""
    monkeypatch.delenv("MERKLECOMMIT_HASH_ALGORITHM", raising=False)
    monkeypatch.delenv("MERKLECOMMIT_LOG_LEVEL", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    logging.getLogger("merklecommit").setLevel(logging.NOTSET)
