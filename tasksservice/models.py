"""Database models for tasks and the users that own them."""

from typing import Any

from sqlalchemy import Boolean, ForeignKey, Integer, Text, false
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    """Declarative base that holds the schema metadata."""


class User(Base):
    """A task owner; only its identifier is kept here."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)

    def __repr__(self) -> str:
        return f"User(id={self.id!r})"


class Task(Base):
    """A to-do item that belongs to a user."""

    __tablename__ = "tasks"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    is_done: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=false()
    )
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user: Mapped[User] = relationship()

    def to_dict(self) -> dict[str, Any]:
        """Return the task's public fields as a plain dictionary."""
        return {
            "id": self.id,
            "title": self.title,
            "is_done": self.is_done,
            "user_id": self.user_id,
        }

    def __repr__(self) -> str:
        return (
            f"Task(id={self.id!r}, title={self.title!r}, "
            f"is_done={self.is_done!r}, user_id={self.user_id!r})"
        )