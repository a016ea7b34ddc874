import uuid
from datetime import datetime, timezone

from sqlmodel import Field, SQLModel


class Category(SQLModel, table=True):
    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    title: str = Field(index=True)
    description: str = Field(default="")
