"""SQLAlchemy declarative base and common model fields.

Every taxonomy table inherits ``BaseModel`` and so gets a BigInteger
primary key plus timezone-aware ``created_at`` / ``updated_at`` columns
maintained by the database.
"""

from datetime import datetime

from sqlalchemy import BigInteger, DateTime, MetaData, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from src.infrastructure.constants import NAMING_CONVENTION


class Base(DeclarativeBase):
    """Declarative base with constraint naming conventions."""

    metadata = MetaData(naming_convention=NAMING_CONVENTION)


class BaseModel(Base):
    """Abstract base model: surrogate key and audit timestamps (UTC)."""

    __abstract__ = True

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    def __repr__(self) -> str:
        name = getattr(self, "name", None)
        suffix = f", name={name!r}" if name is not None else ""
        return f"<{type(self).__name__}(id={self.id}{suffix})>"
