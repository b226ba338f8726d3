"""SQLAlchemy async models for the movement dictionary."""

from datetime import datetime, timezone
from typing import List

from sqlalchemy import Boolean, DateTime, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


def _now_utc() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    pass


class Movement(Base):
    """A movement the parser can resolve names against."""

    __tablename__ = "movements"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    canonical_name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    display_name: Mapped[str] = mapped_column(String(100), nullable=False)
    category: Mapped[str] = mapped_column(String(30), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_bodyweight: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=_now_utc
    )

    # Relationships
    aliases: Mapped[List["MovementAlias"]] = relationship(
        "MovementAlias", back_populates="movement", cascade="all, delete-orphan"
    )

    # Indexes
    __table_args__ = (
        Index("idx_movements_category", "category"),
        Index("idx_movements_display_name", "display_name"),
    )

    def __repr__(self) -> str:
        return f"<Movement(id={self.id}, canonical_name='{self.canonical_name}', category='{self.category}')>"


class MovementAlias(Base):
    """Alternative spelling or abbreviation of a movement (e.g. 'T2B')."""

    __tablename__ = "movement_aliases"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    movement_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("movements.id"), nullable=False
    )
    alias: Mapped[str] = mapped_column(String(100), nullable=False)
    normalized: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)

    movement: Mapped["Movement"] = relationship("Movement", back_populates="aliases")

    __table_args__ = (Index("idx_movement_aliases_movement_id", "movement_id"),)

    def __repr__(self) -> str:
        return f"<MovementAlias(id={self.id}, alias='{self.alias}', movement_id={self.movement_id})>"
