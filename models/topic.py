import uuid
from datetime import datetime, timezone
from typing import List, Optional

from pydantic import ValidationInfo, field_validator
from sqlalchemy import Column
from sqlmodel import Field, SQLModel, Relationship

from core.exceptions import AuthorNotLoadedError
from .category import Category
from .reply import Reply, require_text
from .types import UUIDSet
from .user import User, UserPublic


def as_utc(moment: datetime) -> datetime:
    """Convert to UTC, reading naive values (as stored by SQLite) as UTC."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def latest(a: datetime, b: datetime) -> datetime:
    a, b = as_utc(a), as_utc(b)
    return a if a > b else b


class TopicBase(SQLModel):
    title: str
    content: str
    author_id: uuid.UUID = Field(foreign_key="user.id", index=True)
    category_id: uuid.UUID = Field(foreign_key="category.id", index=True)


class Topic(TopicBase, table=True):
    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    deleted: bool = Field(default=False)
    subscribers: List[uuid.UUID] = Field(
        default_factory=list,
        sa_column=Column(UUIDSet, nullable=False)
    )

    # Materialized references, None until loaded
    author: Optional[User] = Relationship()
    category: Optional[Category] = Relationship()
    replies: List[Reply] = Relationship(
        back_populates="topic",
        sa_relationship_kwargs={"order_by": "Reply.created_at"}
    )

    def authors(self) -> List[User]:
        """Distinct contributors: the topic author plus every reply author.

        Replies whose author is not loaded are left out. When two replies
        share an author id the first one seen wins. No order is implied.
        """
        if self.author is None:
            raise AuthorNotLoadedError(self.id)

        seen = {self.author.id: self.author}
        for reply in self.replies:
            if reply.author_id in seen:
                continue
            if reply.author is not None:
                seen[reply.author_id] = reply.author
        return list(seen.values())

    def last_update(self) -> datetime:
        """Most recent change to the topic or any of its replies, in UTC."""
        last = latest(self.created_at, self.updated_at)
        for reply in self.replies:
            last = latest(last, reply.created_at)
            last = latest(last, reply.updated_at)
        return last

    def is_subscribed(self, user_id: uuid.UUID) -> bool:
        return any(sub == user_id for sub in self.subscribers)

    def add_subscriber(self, user_id: uuid.UUID) -> None:
        subs = dict.fromkeys([user_id])
        subs.update(dict.fromkeys(self.subscribers))
        self.subscribers = list(subs)

    def remove_subscriber(self, user_id: uuid.UUID) -> None:
        # Rebuilding the list also drops duplicates loaded from storage
        subs = dict.fromkeys(sub for sub in self.subscribers if sub != user_id)
        self.subscribers = list(subs)


class TopicCreate(TopicBase):
    @field_validator("title", "content")
    @classmethod
    def is_present(cls, value: str, info: ValidationInfo) -> str:
        return require_text(value, info.field_name.capitalize())


class TopicUpdate(SQLModel):
    title: str | None = None
    content: str | None = None
    deleted: bool | None = None

    @field_validator("title", "content", "deleted")
    @classmethod
    def is_present(cls, value: str | bool | None, info: ValidationInfo) -> str | bool:
        # Omit a field to leave it unchanged; null is not a value for any of them
        if value is None:
            raise ValueError(f"{info.field_name.capitalize()} can not be null")
        if isinstance(value, str):
            return require_text(value, info.field_name.capitalize())
        return value


class TopicPublic(TopicBase):
    id: uuid.UUID
    created_at: datetime
    updated_at: datetime
    deleted: bool
    subscribers: List[uuid.UUID]


class TopicDetail(TopicPublic):
    last_update: datetime
    authors: List[UserPublic]


class SubscriptionStatus(SQLModel):
    topic_id: uuid.UUID
    user_id: uuid.UUID
    subscribed: bool
