import uuid
from datetime import datetime, timezone

from sqlmodel import Field, SQLModel


class UserBase(SQLModel):
    username: str = Field(index=True)
    full_name: str | None = Field(default=None)


class User(UserBase, table=True):
    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    email: str = Field(index=True)


class UserPublic(UserBase):
    id: uuid.UUID


class UserCreate(UserBase):
    email: str
