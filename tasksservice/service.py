"""Business rules for tasks."""

from typing import Protocol

from tasksservice.models import Task
from tasksservice.repository import TaskRepository


class UserClient(Protocol):
    """Looks up users in the user service; raises when the user is unknown."""

    def get_user(self, user_id: int) -> object:
        """Return the user with ``user_id`` or raise."""


class TaskServiceError(Exception):
    """Raised when a task request breaks a business rule."""


class TaskService:
    """Task operations that check ownership against the user service."""

    def __init__(self, repo: TaskRepository, user_client: UserClient) -> None:
        self._repo = repo
        self._user_client = user_client

    def create_task(self, task: Task) -> Task:
        """Store ``task`` after checking that its owner exists."""
        if not task.user_id:
            raise TaskServiceError("user_id is required")
        try:
            self._user_client.get_user(task.user_id)
        except Exception as exc:
            raise TaskServiceError(
                f"user with id {task.user_id} not found: {exc}"
            ) from exc
        return self._repo.create_task(task)

    def get_task_by_id(self, task_id: int) -> Task:
        return self._repo.get_task_by_id(task_id)

    def get_all_tasks(self) -> list[Task]:
        return self._repo.get_all_tasks()

    def get_tasks_by_user_id(self, user_id: int) -> list[Task]:
        return self._repo.get_tasks_by_user_id(user_id)

    def update_task_by_id(self, task_id: int, task: Task) -> Task:
        return self._repo.update_task_by_id(task_id, task)

    def delete_task_by_id(self, task_id: int) -> None:
        self._repo.delete_task_by_id(task_id)