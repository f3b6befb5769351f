from typing import Iterator, List, Sequence

from ..schemas.tasks import TaskOut


class TaskListModel:
    """What the list screen renders. Replaced wholesale on every refresh."""

    def __init__(self) -> None:
        self.tasks: List[TaskOut] = []

    def set_tasks(self, tasks: Sequence[TaskOut]) -> None:
        self.tasks = list(tasks)

    def __len__(self) -> int:
        return len(self.tasks)

    def __iter__(self) -> Iterator[TaskOut]:
        return iter(self.tasks)
