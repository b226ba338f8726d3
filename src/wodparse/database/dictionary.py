"""Movement dictionary backed by the SQL movement tables."""

import logging

from sqlalchemy.exc import OperationalError
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from ..movements import SEARCH_THRESHOLD
from ..parsing.schemas import MovementIdentity
from .connection import DatabaseManager, db_manager
from .models import Movement
from .repository import movement_repo

logger = logging.getLogger(__name__)

_transient = retry(
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=1, min=1, max=10),
    retry=retry_if_exception_type((OperationalError, ConnectionError, TimeoutError)),
    reraise=True,
)


def _identity(movement: Movement) -> MovementIdentity:
    return MovementIdentity(
        id=movement.id,
        canonical_name=movement.canonical_name,
        display_name=movement.display_name,
        category=movement.category,
    )


class SqlMovementDictionary:
    """Resolves movement names against the ``movements`` and ``movement_aliases`` tables.

    Transient database errors are retried here; anything that still fails is
    raised and the parser treats it as no match.
    """

    def __init__(self, manager: DatabaseManager | None = None) -> None:
        self._db = manager or db_manager

    @_transient
    async def normalize(self, name: str) -> str | None:
        async with self._db.get_session() as session:
            movement = await movement_repo.get_by_alias(session, name)
            return movement.canonical_name if movement else None

    @_transient
    async def get_by_canonical_name(self, canonical_name: str) -> MovementIdentity | None:
        async with self._db.get_session() as session:
            movement = await movement_repo.get_by_canonical_name(session, canonical_name)
            return _identity(movement) if movement else None

    @_transient
    async def search(self, text: str) -> list[MovementIdentity]:
        async with self._db.get_session() as session:
            scored = await movement_repo.search_scored(session, text)
        logger.debug("Search %r: %d candidate(s)", text, len(scored))
        return [_identity(m) for m, score in scored if score >= SEARCH_THRESHOLD]

    @_transient
    async def list_names(self) -> list[str]:
        async with self._db.get_session() as session:
            movements = await movement_repo.get_active(session)
            return [m.display_name for m in movements]
