from pathlib import Path

from sqlalchemy.engine import Engine, make_url
from sqlmodel import create_engine

from ..core.config import Settings


def _ensure_sqlite_dir(url: str) -> None:
    parsed = make_url(url)
    if parsed.get_backend_name() != "sqlite":
        return
    database = parsed.database
    if not database or database == ":memory:":
        return
    Path(database).parent.mkdir(parents=True, exist_ok=True)


def make_engine(settings: Settings) -> Engine:
    _ensure_sqlite_dir(settings.DATABASE_URL)
    return create_engine(settings.DATABASE_URL, echo=settings.SQL_ECHO)
