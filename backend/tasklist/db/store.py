import logging
from typing import List

from sqlalchemy.engine import Engine
from sqlmodel import Session

from . import crud
from .models import Task

logger = logging.getLogger(__name__)


class SchemaDowngradeError(RuntimeError):
    """The database file was written by a newer schema version than requested."""

    def __init__(self, stored: int, requested: int) -> None:
        super().__init__(f"Can't downgrade database from version {stored} to {requested}")
        self.stored = stored
        self.requested = requested


class TaskStore:
    """
    SQLite-backed persistence for tasks.

    The store owns the engine it is given. Every operation opens its own
    Session and closes it on the way out, error paths included, so no
    connection outlives the call that needed it.

    Engine errors are not caught here; they reach the caller unchanged.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine
        self._table = Task.__table__

    @property
    def engine(self) -> Engine:
        return self._engine

    def close(self) -> None:
        self._engine.dispose()

    # ---- schema ----

    def open(self, version: int) -> None:
        """
        Bring the stored schema to ``version``.

        0 (never opened)  -> create the table
        older             -> upgrade_schema (destructive reset)
        same              -> nothing
        newer             -> SchemaDowngradeError
        """
        if version < 1:
            raise ValueError(f"schema version must be >= 1, got {version}")

        stored = self.schema_version()
        if stored > version:
            raise SchemaDowngradeError(stored, version)
        if stored == version:
            logger.info("TaskStore ready version=%s total=%s", version, self.count())
            return

        if stored == 0:
            self.initialize_schema()
        else:
            self.upgrade_schema(stored, version)
        self._set_schema_version(version)
        logger.info("TaskStore ready version=%s total=%s", version, self.count())

    def initialize_schema(self) -> None:
        self._table.create(self._engine, checkfirst=True)

    def upgrade_schema(self, old_version: int, new_version: int) -> None:
        # The only migration there is: existing tasks are lost.
        logger.warning(
            "Schema upgrade %s -> %s: dropping and recreating table %s",
            old_version,
            new_version,
            self._table.name,
        )
        self.reset_schema()

    def reset_schema(self) -> None:
        with self._engine.begin() as conn:
            self._table.drop(conn, checkfirst=True)
            self._table.create(conn)

    def schema_version(self) -> int:
        with self._engine.connect() as conn:
            return int(conn.exec_driver_sql("PRAGMA user_version").scalar() or 0)

    def _set_schema_version(self, version: int) -> None:
        with self._engine.begin() as conn:
            # PRAGMA takes no bound parameters.
            conn.exec_driver_sql(f"PRAGMA user_version = {int(version)}")

    # ---- CRUD ----

    def create(self, task: Task) -> int:
        # Whatever id the caller put on ``task`` is a placeholder.
        row = Task(title=task.title, description=task.description)
        with Session(self._engine) as session:
            task_id = int(crud.create_task(session, row).id)
        logger.debug("Task created id=%s", task_id)
        return task_id

    def list_all(self) -> List[Task]:
        with Session(self._engine) as session:
            return crud.list_tasks(session)

    def count(self) -> int:
        with Session(self._engine) as session:
            return crud.count_tasks(session)

    def update(self, task: Task) -> int:
        with Session(self._engine) as session:
            affected = crud.update_task(session, task.id, task.title, task.description)
        logger.debug("Task update id=%s affected=%s", task.id, affected)
        return affected

    def delete(self, task_id: int) -> int:
        with Session(self._engine) as session:
            affected = crud.delete_task(session, task_id)
        logger.debug("Task delete id=%s affected=%s", task_id, affected)
        return affected
