from typing import List, Optional
from sqlalchemy import func
from sqlmodel import Session, select
from .models import Task

def create_task(session: Session, task: Task) -> Task:
    session.add(task)
    session.commit()
    session.refresh(task)
    return task

def list_tasks(session: Session) -> List[Task]:
    return list(session.exec(select(Task).order_by(Task.id)).all())

def count_tasks(session: Session) -> int:
    return session.exec(select(func.count()).select_from(Task)).one()

def update_task(session: Session, task_id: Optional[int], title: str, description: str) -> int:
    if task_id is None:
        return 0
    row = session.get(Task, task_id)
    if row is None:
        return 0
    row.title = title
    row.description = description
    session.add(row)
    session.commit()
    return 1

def delete_task(session: Session, task_id: int) -> int:
    row = session.get(Task, task_id)
    if row is None:
        return 0
    session.delete(row)
    session.commit()
    return 1
