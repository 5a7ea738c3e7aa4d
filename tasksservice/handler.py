"""Request handling for the task RPC service."""

import enum
import logging
from dataclasses import dataclass, field

from tasksservice.models import Task
from tasksservice.service import TaskService, UserClient

logger = logging.getLogger(__name__)


class StatusCode(enum.IntEnum):
    """RPC status codes used by the handler."""

    OK = 0
    INVALID_ARGUMENT = 3
    NOT_FOUND = 5
    INTERNAL = 13


class RpcError(Exception):
    """A failed RPC carrying a status code and a detail message."""

    def __init__(self, code: StatusCode, details: str) -> None:
        super().__init__(f"{code.name}: {details}")
        self.code = code
        self.details = details


@dataclass
class TaskMessage:
    id: int = 0
    title: str = ""
    is_done: bool = False
    user_id: int = 0

    @classmethod
    def from_task(cls, task: Task) -> "TaskMessage":
        return cls(
            id=task.id,
            title=task.title,
            is_done=bool(task.is_done),
            user_id=task.user_id,
        )


@dataclass
class CreateTaskRequest:
    title: str = ""
    user_id: int = 0


@dataclass
class CreateTaskResponse:
    task: TaskMessage


@dataclass
class GetTaskRequest:
    id: int = 0


@dataclass
class ListTasksForUserRequest:
    user_id: int = 0


@dataclass
class ListTasksForUserResponse:
    tasks: list[TaskMessage] = field(default_factory=list)


@dataclass
class UpdateTaskRequest:
    id: int = 0
    title: str = ""
    is_done: bool = False


@dataclass
class UpdateTaskResponse:
    task: TaskMessage


@dataclass
class DeleteTaskRequest:
    id: int = 0


@dataclass
class DeleteTaskResponse:
    success: bool = False


@dataclass
class ListTasksRequest:
    pass


@dataclass
class ListTasksResponse:
    tasks: list[TaskMessage] = field(default_factory=list)


class Handler:
    """Validates requests and maps failures to RPC status codes."""

    def __init__(self, svc: TaskService, user_client: UserClient) -> None:
        self._svc = svc
        self._user_client = user_client

    def _require_user(self, user_id: int) -> None:
        try:
            self._user_client.get_user(user_id)
        except Exception as exc:
            raise RpcError(
                StatusCode.NOT_FOUND, f"user {user_id} not found: {exc}"
            ) from exc

    def _find_task(self, task_id: int) -> Task:
        try:
            tasks = self._svc.get_all_tasks()
        except Exception as exc:
            raise RpcError(
                StatusCode.INTERNAL, f"failed to get tasks: {exc}"
            ) from exc
        found = next((t for t in tasks if t.id == task_id), None)
        if found is None:
            raise RpcError(StatusCode.NOT_FOUND, f"task with id {task_id} not found")
        return found

    def create_task(self, request: CreateTaskRequest) -> CreateTaskResponse:
        if not request.title:
            raise RpcError(StatusCode.INVALID_ARGUMENT, "title is required")
        if not request.user_id:
            raise RpcError(StatusCode.INVALID_ARGUMENT, "user_id is required")
        self._require_user(request.user_id)
        try:
            task = self._svc.create_task(
                Task(user_id=request.user_id, title=request.title)
            )
        except Exception as exc:
            raise RpcError(
                StatusCode.INTERNAL, f"failed to create task: {exc}"
            ) from exc
        return CreateTaskResponse(task=TaskMessage.from_task(task))

    def get_task(self, request: GetTaskRequest) -> TaskMessage:
        if not request.id:
            raise RpcError(StatusCode.INVALID_ARGUMENT, "id is required")
        try:
            task = self._svc.get_task_by_id(request.id)
        except Exception as exc:
            logger.error("Failed to get task by ID: %d: %s", request.id, exc)
            raise RpcError(
                StatusCode.NOT_FOUND,
                f"task with id {request.id} not found: {exc}",
            ) from exc
        return TaskMessage.from_task(task)

    def list_tasks_for_user(
        self, request: ListTasksForUserRequest
    ) -> ListTasksForUserResponse:
        if not request.user_id:
            raise RpcError(StatusCode.INVALID_ARGUMENT, "user_id is required")
        try:
            tasks = self._svc.get_tasks_by_user_id(request.user_id)
        except Exception as exc:
            raise RpcError(
                StatusCode.INTERNAL, f"failed to list tasks: {exc}"
            ) from exc
        return ListTasksForUserResponse(
            tasks=[TaskMessage.from_task(t) for t in tasks]
        )

    def update_task(self, request: UpdateTaskRequest) -> UpdateTaskResponse:
        if not request.id:
            raise RpcError(StatusCode.INVALID_ARGUMENT, "id is required")
        if not request.title:
            raise RpcError(StatusCode.INVALID_ARGUMENT, "title is required")
        existing = self._find_task(request.id)
        self._require_user(existing.user_id)
        try:
            task = self._svc.update_task_by_id(
                request.id,
                Task(
                    title=request.title,
                    is_done=request.is_done,
                    user_id=existing.user_id,
                ),
            )
        except Exception as exc:
            raise RpcError(
                StatusCode.INTERNAL, f"failed to update task: {exc}"
            ) from exc
        return UpdateTaskResponse(task=TaskMessage.from_task(task))

    def delete_task(self, request: DeleteTaskRequest) -> DeleteTaskResponse:
        if not request.id:
            raise RpcError(StatusCode.INVALID_ARGUMENT, "id is required")
        existing = self._find_task(request.id)
        self._require_user(existing.user_id)
        try:
            self._svc.delete_task_by_id(request.id)
        except Exception as exc:
            raise RpcError(
                StatusCode.INTERNAL, f"failed to delete task: {exc}"
            ) from exc
        return DeleteTaskResponse(success=True)

    def list_tasks(self, request: ListTasksRequest) -> ListTasksResponse:
        logger.info("ListAllTasks: fetching all tasks")
        try:
            tasks = self._svc.get_all_tasks()
        except Exception as exc:
            logger.error("Failed to list all tasks: %s", exc)
            raise RpcError(
                StatusCode.INTERNAL, f"failed to list all tasks: {exc}"
            ) from exc
        messages = [TaskMessage.from_task(t) for t in tasks]
        logger.info("ListAllTasks: found %d tasks", len(messages))
        return ListTasksResponse(tasks=messages)