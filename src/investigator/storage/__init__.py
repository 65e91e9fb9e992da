"""Persistence backends for character documents."""

import structlog
from sqlalchemy.exc import SQLAlchemyError

from investigator.config import Settings
from investigator.database.engine import create_engine, create_session_factory, init_db

from .base import CharacterStore, TransportError, parse_character
from .local import LocalStore
from .spreadsheet import SpreadsheetStore

logger = structlog.get_logger(__name__)


async def open_store(settings: Settings) -> CharacterStore:
    """Create the store selected by ``settings.storage_backend``.

    The local backend creates its table on first use. Call ``close()`` on
    the returned store when done.

    Raises:
        TransportError: If the local database cannot be created or opened
    """
    if settings.storage_backend == "local":
        engine = None
        try:
            engine = create_engine(settings.database_url, echo=settings.debug)
            await init_db(engine)
        except (OSError, SQLAlchemyError) as e:
            logger.error("local_store_open_failed", database_url=settings.database_url, error=str(e))
            if engine is not None:
                await engine.dispose()
            raise TransportError(f"Could not open the local database: {e}") from e
        return LocalStore(create_session_factory(engine), engine=engine)

    return SpreadsheetStore(settings.api_url, timeout=settings.request_timeout)


__all__ = [
    "CharacterStore",
    "LocalStore",
    "SpreadsheetStore",
    "TransportError",
    "open_store",
    "parse_character",
]
