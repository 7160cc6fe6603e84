from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Garante que o pacote wordzee seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from wordzee.core import config as core_config  # noqa: E402
from wordzee.db import models  # noqa: E402
from wordzee.db import session as db_session  # noqa: E402


def _clear_caches() -> None:
    core_config.get_settings.cache_clear()
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]


@pytest.fixture()
def temp_db(tmp_path, monkeypatch):
    """Temporary SQLite database; full teardown so the file is never left locked."""
    db_file = tmp_path / "test.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_file}")
    _clear_caches()

    engine = db_session.get_engine()
    models.Base.metadata.drop_all(bind=engine)
    models.Base.metadata.create_all(bind=engine)

    yield db_file

    models.Base.metadata.drop_all(bind=engine)
    engine.dispose()
    _clear_caches()


@pytest.fixture()
def api_secret(monkeypatch):
    monkeypatch.setenv("WORDZEE_API_KEY_SECRET", "test-secret-")
    core_config.get_settings.cache_clear()
    yield "test-secret-"
    core_config.get_settings.cache_clear()
