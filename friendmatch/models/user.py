"""User model - the account a quiz and profile belong to."""

import uuid
from typing import Optional

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from friendmatch.db.database import Base


def _new_id() -> str:
    return str(uuid.uuid4())


class User(Base):
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(255), primary_key=True, default=_new_id)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    email: Mapped[str] = mapped_column(String(255))
    image: Mapped[str | None] = mapped_column(String(255), nullable=True)  # OAuth picture

    profile: Mapped[Optional["Profile"]] = relationship(
        back_populates="user", cascade="all, delete-orphan", uselist=False
    )
    quiz_responses: Mapped[list["QuizResponse"]] = relationship(
        back_populates="user", cascade="all, delete-orphan"
    )
