"""
Database models using SQLModel
Provides type-safe ORM with Pydantic validation
"""

from sqlmodel import SQLModel, Field
from datetime import datetime, timezone


class KeyValueEntry(SQLModel, table=True):
    """Single string value stored under a fixed key"""

    __tablename__ = "key_value_store"

    key: str = Field(primary_key=True, max_length=255)
    value: str  # JSON payload
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
