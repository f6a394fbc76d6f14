import os

import pytest

os.environ.setdefault("DB_IN_MEMORY", "true")

from markdown_memo.core.config import settings
from markdown_memo.db.session import reset_storage, setup_storage


@pytest.fixture
def storage():
    storage = setup_storage(in_memory=True)
    try:
        yield storage
    finally:
        storage.dispose()


@pytest.fixture(autouse=True)
def _configure_process_storage(monkeypatch):
    monkeypatch.setattr(settings, "DB_IN_MEMORY", True)
    monkeypatch.setattr(settings, "DB_PATH", None)
    reset_storage()
    yield
    reset_storage()
