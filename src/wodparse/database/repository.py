"""Async repository pattern implementation for database operations."""

from typing import Generic, List, Optional, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ..movements import MovementEntry, normalize_name, score_match
from .models import Base, Movement, MovementAlias

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Base repository with async CRUD operations."""

    def __init__(self, model: Type[ModelType]) -> None:
        self.model = model

    async def get_multi(
        self, session: AsyncSession, *, skip: int = 0, limit: int = 100
    ) -> List[ModelType]:
        """Get multiple records with pagination."""
        stmt = select(self.model).offset(skip).limit(limit)
        result = await session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, session: AsyncSession, *, obj_in: dict) -> ModelType:
        """Create a new record."""
        db_obj = self.model(**obj_in)
        session.add(db_obj)
        await session.flush()
        await session.refresh(db_obj)
        return db_obj


class MovementRepository(BaseRepository[Movement]):
    """Repository for Movement and MovementAlias operations."""

    score_match = staticmethod(score_match)

    async def get_by_canonical_name(
        self, session: AsyncSession, canonical_name: str
    ) -> Optional[Movement]:
        """Get an active movement by canonical name."""
        stmt = (
            select(Movement)
            .where(Movement.canonical_name == canonical_name.lower())
            .where(Movement.is_active.is_(True))
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_alias(self, session: AsyncSession, name: str) -> Optional[Movement]:
        """Get an active movement whose normalized alias equals the normalized *name*."""
        stmt = (
            select(Movement)
            .join(MovementAlias, MovementAlias.movement_id == Movement.id)
            .where(MovementAlias.normalized == normalize_name(name))
            .where(Movement.is_active.is_(True))
        )
        result = await session.execute(stmt)
        return result.scalars().first()

    async def get_active(self, session: AsyncSession) -> List[Movement]:
        """Get all active movements with their aliases."""
        stmt = (
            select(Movement)
            .options(selectinload(Movement.aliases))
            .where(Movement.is_active.is_(True))
            .order_by(Movement.id)
        )
        result = await session.execute(stmt)
        return list(result.scalars().all())

    async def search_scored(
        self, session: AsyncSession, query: str
    ) -> List[tuple[Movement, float]]:
        """Score all active movements against *query* by their best-matching name.

        Returns list of (Movement, score) sorted by score descending.
        """
        movements = await self.get_active(session)
        scored = []
        for movement in movements:
            names = [movement.display_name, *(a.alias for a in movement.aliases)]
            scored.append((movement, max(self.score_match(query, name) for name in names)))
        scored.sort(key=lambda x: x[1], reverse=True)
        return scored

    async def add_entry(self, session: AsyncSession, entry: MovementEntry) -> Movement:
        """Insert a catalog entry and one alias row per distinct normalized name."""
        movement = await self.create(
            session,
            obj_in={
                "canonical_name": entry.canonical_name,
                "display_name": entry.display_name,
                "category": entry.category,
                "description": entry.description,
                "is_bodyweight": entry.is_bodyweight,
            },
        )
        seen: set[str] = set()
        for name in [entry.canonical_name, entry.display_name, *entry.aliases]:
            key = normalize_name(name)
            if not key or key in seen:
                continue
            seen.add(key)
            existing = await session.execute(
                select(MovementAlias.id).where(MovementAlias.normalized == key)
            )
            if existing.scalar_one_or_none() is not None:
                continue
            session.add(MovementAlias(movement_id=movement.id, alias=name, normalized=key))
        await session.flush()
        return movement

    async def seed(self, session: AsyncSession, entries: List[MovementEntry]) -> int:
        """Add every entry whose canonical name is not present yet. Returns the number created."""
        created = 0
        for entry in entries:
            if await self.get_by_canonical_name(session, entry.canonical_name) is not None:
                continue
            await self.add_entry(session, entry)
            created += 1
        return created


# Repository instances
movement_repo = MovementRepository(Movement)
