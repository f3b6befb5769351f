"""Composition root: settings -> engine -> store -> controller."""

from typing import Optional

from .core.config import Settings, get_settings
from .db.session import make_engine
from .db.store import TaskStore
from .services.controller import TaskListController, TaskListView


def create_store(settings: Optional[Settings] = None) -> TaskStore:
    if settings is None:
        settings = get_settings()
    store = TaskStore(make_engine(settings))
    try:
        store.open(settings.SCHEMA_VERSION)
    except Exception:
        store.close()
        raise
    return store


def create_controller(view: TaskListView, store: TaskStore) -> TaskListController:
    controller = TaskListController(store, view)
    controller.refresh()
    return controller
