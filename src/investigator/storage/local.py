"""Local SQLite backend for character documents."""

import structlog
from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from investigator.database.engine import session_scope
from investigator.database.models import CharacterDocument
from investigator.models import CharacterRecord

from .base import CharacterStore, TransportError, parse_character

logger = structlog.get_logger(__name__)


class LocalStore(CharacterStore):
    """Character store kept in a local database, one row per document."""

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        engine: AsyncEngine | None = None,
    ) -> None:
        """
        Initialize the store.

        Args:
            session_factory: Factory for sessions on a database with the table created
            engine: Engine to dispose of on close, when the store owns it
        """
        self._session_factory = session_factory
        self._engine = engine

    async def close(self) -> None:
        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None

    async def list_characters(self) -> list[CharacterRecord]:
        try:
            async with session_scope(self._session_factory) as session:
                result = await session.execute(select(CharacterDocument))
                documents = [row.document for row in result.scalars().all()]
        except SQLAlchemyError as e:
            logger.error("local_list_failed", error=str(e))
            raise TransportError("Could not read characters from the local database") from e

        records = [parse_character(document) for document in documents]
        logger.info("characters_listed", count=len(records))
        return records

    async def save(self, record: CharacterRecord) -> None:
        try:
            async with session_scope(self._session_factory) as session:
                row = await session.get(CharacterDocument, record.id)
                if row is None:
                    row = CharacterDocument(id=record.id)
                    session.add(row)
                row.name = record.name
                row.document = record.to_document()
                row.updated_at = record.updated_at
        except SQLAlchemyError as e:
            logger.error("local_save_failed", character_id=record.id, error=str(e))
            raise TransportError(f"Could not save character {record.id!r}") from e

        logger.info("character_saved", character_id=record.id, name=record.name)

    async def delete(self, character_id: str) -> None:
        try:
            async with session_scope(self._session_factory) as session:
                await session.execute(
                    delete(CharacterDocument).where(CharacterDocument.id == character_id)
                )
        except SQLAlchemyError as e:
            logger.error("local_delete_failed", character_id=character_id, error=str(e))
            raise TransportError(f"Could not delete character {character_id!r}") from e

        logger.info("character_deleted", character_id=character_id)
