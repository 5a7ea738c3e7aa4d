# tasksservice

The core of a small task management service. It stores to-do tasks that
belong to users, checks with a user directory that the owning user exists,
and answers task requests: create, get, list, update and delete.

## Installation

```
pip install .
```

Install the test extra to run the test suite:

```
pip install ".[test]"
pytest
```

## Pieces

- `tasksservice.models`: the SQLAlchemy `Base`, `User` and `Task` models.
  A `Task` has `id`, `title`, `is_done` (default `False`) and `user_id`,
  which is a foreign key to `users.id` with `ON DELETE CASCADE`.
  `Task.to_dict()` gives these four fields as a plain dictionary.
- `tasksservice.database`: `init_db(dsn)` creates an engine and the tables,
  and returns the engine. If no DSN is given, it reads the `DATABASE_URL`
  environment variable. It raises `DatabaseConfigError` when neither is set.
  On SQLite it switches foreign key enforcement on for every connection.
- `tasksservice.repository`: `TaskRepository(engine)` stores and loads tasks.
  Lists come back ordered by id. `get_task_by_id` and `update_task_by_id`
  raise `TaskNotFoundError` for unknown ids. `update_task_by_id` copies only
  the title and completion state. Deleting a missing task is not an error.
- `tasksservice.service`: `TaskService(repo, user_client)` holds the business
  rules. `create_task` raises `TaskServiceError` when the task has no
  `user_id` or when `user_client.get_user` raises. `UserClient` is the
  protocol the user directory must follow: `get_user(user_id)` returns the
  user or raises.
- `tasksservice.handler`: `Handler(svc, user_client)` validates the request
  messages (`CreateTaskRequest`, `GetTaskRequest`, `ListTasksForUserRequest`,
  `UpdateTaskRequest`, `DeleteTaskRequest`, `ListTasksRequest`) and returns
  the response messages, whose tasks are `TaskMessage` dataclasses. On failure
  it raises `RpcError`, whose `code` is a `StatusCode` and whose `details`
  holds the message.

## Example

Tasks refer to rows in the `users` table, so the owners must exist there
before their tasks are stored.

```python
from sqlalchemy.orm import Session

from tasksservice.database import init_db
from tasksservice.handler import (
    CreateTaskRequest,
    Handler,
    ListTasksForUserRequest,
)
from tasksservice.models import User
from tasksservice.repository import TaskRepository
from tasksservice.service import TaskService, UserClient


class KnownUsers(UserClient):
    def get_user(self, user_id):
        if user_id not in {1, 2}:
            raise LookupError(f"user {user_id} does not exist")
        return {"id": user_id}


engine = init_db("sqlite://")
with Session(engine) as session:
    session.add_all([User(id=1), User(id=2)])
    session.commit()

users = KnownUsers()
handler = Handler(TaskService(TaskRepository(engine), users), users)

created = handler.create_task(CreateTaskRequest(title="Write report", user_id=1))
print(created.task)

listing = handler.list_tasks_for_user(ListTasksForUserRequest(user_id=1))
print([t.title for t in listing.tasks])
```

## Errors from the handler

- A missing title, id or user id raises `RpcError` with
  `StatusCode.INVALID_ARGUMENT`.
- An unknown user, or an unknown task in get, update or delete, raises it
  with `StatusCode.NOT_FOUND`.
- A failure while storing or loading tasks raises it with
  `StatusCode.INTERNAL`.

## What this package does not do

- It has no network server and no command to start one: `Handler` is called
  directly with request objects.
- It has no client for a remote user directory. Supply any object with a
  `get_user(user_id)` method that raises for unknown users.
- It installs no database driver beyond what SQLAlchemy and Python provide.
  SQLite works out of the box; for another database, install the driver that
  its DSN names.