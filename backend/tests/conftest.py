from __future__ import annotations

import pytest

from ledger_api.api.deps import reset_dependencies
from ledger_api.db import reset_db_caches


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path, monkeypatch):
    # in-memory storage by default, fresh singletons per test
    monkeypatch.delenv("LEDGER_DATABASE_URL", raising=False)
    monkeypatch.setenv("LEDGER_DATA_DIR", str(tmp_path / "data"))
    reset_dependencies()
    reset_db_caches()
    yield
    reset_dependencies()
    reset_db_caches()


@pytest.fixture
def sqlite_url(tmp_path, monkeypatch) -> str:
    url = f"sqlite:///{(tmp_path / 'ledger_test.db').as_posix()}"
    monkeypatch.setenv("LEDGER_DATABASE_URL", url)
    reset_db_caches()
    return url
