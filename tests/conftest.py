from pathlib import Path

import pytest

from tasklist.bootstrap import create_store
from tasklist.core.config import Settings

from .fakes import RecordingView


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    return Settings(
        DATABASE_URL=f"sqlite:///{tmp_path / 'data' / 'tasks.db'}",
        SCHEMA_VERSION=1,
        LOG_LEVEL="DEBUG",
        _env_file=None,
    )


@pytest.fixture()
def store(settings: Settings):
    s = create_store(settings)
    yield s
    s.close()


@pytest.fixture()
def reopen(settings: Settings):
    """Open the same database file again at another schema version."""

    def _reopen(version: int):
        return create_store(settings.model_copy(update={"SCHEMA_VERSION": version}))

    return _reopen


@pytest.fixture()
def view() -> RecordingView:
    return RecordingView()
