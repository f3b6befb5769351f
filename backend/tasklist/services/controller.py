import logging
from typing import List, Protocol, Sequence

from ..db.models import Task
from ..db.store import TaskStore
from ..schemas.tasks import TaskIn, TaskOut

logger = logging.getLogger(__name__)


class TaskListView(Protocol):
    def set_tasks(self, tasks: Sequence[TaskOut]) -> None: ...


class TaskListController:
    """
    Runs the add / edit / delete workflows against a TaskStore.

    Each mutation is followed by a full re-read which replaces the view's
    list. If the store raises, the re-read is skipped and the view keeps the
    list it had before the call.
    """

    def __init__(self, store: TaskStore, view: TaskListView) -> None:
        self.store = store
        self.view = view

    def add(self, title: str, description: str) -> int:
        body = TaskIn(title=title, description=description)
        task_id = self.store.create(Task(**body.model_dump()))
        logger.info("Added task id=%s", task_id)
        self.refresh()
        return task_id

    def edit(self, task_id: int, title: str, description: str) -> int:
        body = TaskIn(title=title, description=description)
        affected = self.store.update(Task(id=task_id, **body.model_dump()))
        if affected == 0:
            logger.warning("Edit matched no task id=%s", task_id)
        self.refresh()
        return affected

    def delete(self, task_id: int) -> int:
        affected = self.store.delete(task_id)
        if affected == 0:
            logger.warning("Delete matched no task id=%s", task_id)
        else:
            logger.info("Deleted task id=%s", task_id)
        self.refresh()
        return affected

    def refresh(self) -> List[TaskOut]:
        tasks = [TaskOut.model_validate(row) for row in self.store.list_all()]
        self.view.set_tasks(tasks)
        return tasks
