import uuid
from datetime import datetime, timezone
from typing import Optional, TYPE_CHECKING

from pydantic import field_validator
from sqlmodel import Field, SQLModel, Relationship

from .user import User

if TYPE_CHECKING:
    from .topic import Topic


def require_text(value: str | None, name: str) -> str | None:
    if value is not None and not value.strip():
        raise ValueError(f"{name} can not be blank")
    return value


class ReplyBase(SQLModel):
    content: str
    author_id: uuid.UUID = Field(foreign_key="user.id", index=True)


class Reply(ReplyBase, table=True):
    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    topic_id: uuid.UUID = Field(foreign_key="topic.id", index=True, ondelete="CASCADE")
    deleted: bool = Field(default=False)

    # Relationships
    author: Optional[User] = Relationship()
    topic: Optional["Topic"] = Relationship(back_populates="replies")


class ReplyCreate(ReplyBase):
    @field_validator("content")
    @classmethod
    def content_is_present(cls, value: str) -> str:
        return require_text(value, "Content")


class ReplyPublic(ReplyBase):
    id: uuid.UUID
    created_at: datetime
    updated_at: datetime
    topic_id: uuid.UUID
    deleted: bool
