"""Persistence of tasks."""

import logging

from sqlalchemy import delete, select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from tasksservice.models import Task

logger = logging.getLogger(__name__)


class TaskNotFoundError(LookupError):
    """Raised when no task has the requested identifier."""

    def __init__(self, task_id: int) -> None:
        super().__init__("record not found")
        self.task_id = task_id


class TaskRepository:
    """Stores and loads tasks through a SQLAlchemy engine."""

    def __init__(self, engine: Engine) -> None:
        self._sessions = sessionmaker(engine, expire_on_commit=False)

    def create_task(self, task: Task) -> Task:
        """Insert a copy of ``task`` and return the stored record."""
        values = {
            "title": task.title if task.title is not None else "",
            "is_done": bool(task.is_done),
            "user_id": task.user_id,
        }
        if task.id:
            values["id"] = task.id
        stored = Task(**values)
        with self._sessions() as session:
            session.add(stored)
            session.commit()
        return stored

    def get_all_tasks(self) -> list[Task]:
        """Return every task."""
        with self._sessions() as session:
            return list(session.scalars(select(Task).order_by(Task.id)))

    def get_tasks_by_user_id(self, user_id: int) -> list[Task]:
        """Return the tasks owned by ``user_id``."""
        with self._sessions() as session:
            query = select(Task).where(Task.user_id == user_id).order_by(Task.id)
            return list(session.scalars(query))

    def update_task_by_id(self, task_id: int, task: Task) -> Task:
        """Copy title and completion state from ``task`` onto the stored task."""
        with self._sessions() as session:
            existing = session.get(Task, task_id)
            if existing is None:
                raise TaskNotFoundError(task_id)
            existing.title = task.title if task.title is not None else ""
            existing.is_done = bool(task.is_done)
            session.commit()
            return existing

    def delete_task_by_id(self, task_id: int) -> None:
        """Delete the task; deleting a missing task is not an error."""
        with self._sessions() as session:
            session.execute(delete(Task).where(Task.id == task_id))
            session.commit()

    def get_task_by_id(self, task_id: int) -> Task:
        """Return the task with ``task_id``."""
        with self._sessions() as session:
            task = session.get(Task, task_id)
        if task is None:
            error = TaskNotFoundError(task_id)
            logger.error("Failed to get task by ID: %d: %s", task_id, error)
            raise error
        return task