from sqlalchemy import create_engine, inspect
from sqlalchemy.orm import Session

from tasksservice.models import Base, Task, User


def _engine(tmp_path):
    engine = create_engine(f"sqlite:///{tmp_path / 'models.db'}")
    Base.metadata.create_all(engine)
    return engine


def test_tables_are_created_and_usable(tmp_path):
    engine = _engine(tmp_path)
    assert {"users", "tasks"} <= set(inspect(engine).get_table_names())
    with Session(engine) as session:
        session.add(User(id=9))
        session.add(Task(title="check tables", user_id=9))
        session.commit()
        stored = session.query(Task).one()
        assert stored.to_dict()["user_id"] == 9
        assert stored.to_dict()["title"] == "check tables"


def test_to_dict_of_transient_task():
    task = Task(id=4, title="write report", is_done=True, user_id=2)
    assert task.to_dict() == {
        "id": 4,
        "title": "write report",
        "is_done": True,
        "user_id": 2,
    }


def test_is_done_defaults_to_false_after_insert(tmp_path):
    engine = _engine(tmp_path)
    with Session(engine) as session:
        session.add(User(id=1))
        task = Task(title="buy milk", user_id=1)
        session.add(task)
        session.commit()
        assert task.is_done is False
        assert task.id is not None


def test_round_trip_through_database(tmp_path):
    engine = _engine(tmp_path)
    with Session(engine) as session:
        session.add(User(id=3))
        task = Task(title="ship it", is_done=True, user_id=3)
        session.add(task)
        session.commit()
        task_id = task.id
    with Session(engine) as session:
        loaded = session.get(Task, task_id)
        assert loaded.to_dict() == {
            "id": task_id,
            "title": "ship it",
            "is_done": True,
            "user_id": 3,
        }
        assert loaded.user.id == 3


def test_user_id_column_is_indexed(tmp_path):
    engine = _engine(tmp_path)
    indexes = inspect(engine).get_indexes("tasks")
    assert any(index["column_names"] == ["user_id"] for index in indexes)