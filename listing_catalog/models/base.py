"""SQLAlchemy declarative base and common mixins.

This module provides the base class for all datastore models
along with the timestamp columns shared by the listing tables.
"""

from typing import Any, Optional

from sqlalchemy import String, text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    def __repr__(self) -> str:
        """Generate string representation of the model instance.

        Returns:
            String with class name and primary key values.
        """
        pk_cols = [col.name for col in self.__table__.primary_key.columns]
        pk_values = ", ".join(f"{col}={getattr(self, col, None)}" for col in pk_cols)
        return f"<{self.__class__.__name__}({pk_values})>"

    def to_dict(self) -> dict[str, Any]:
        """Convert model instance to dictionary.

        Returns:
            Dictionary of column names to values.
        """
        return {col.name: getattr(self, col.name) for col in self.__table__.columns}


class TimestampMixin:
    """Mixin that adds created_at and updated_at timestamps.

    SQLite keeps these as ISO text, so they are mapped as strings
    and passed through untouched.

    Attributes:
        created_at: Timestamp when record was created.
        updated_at: Timestamp when record was last updated.
    """

    created_at: Mapped[Optional[str]] = mapped_column(
        String,
        server_default=text("CURRENT_TIMESTAMP"),
    )
    updated_at: Mapped[Optional[str]] = mapped_column(
        String,
        server_default=text("CURRENT_TIMESTAMP"),
    )
