"""Persistence contract for character documents."""

from abc import ABC, abstractmethod
from typing import Any

import structlog
from pydantic import ValidationError

from investigator.models import AttributeSet, CharacterRecord
from investigator.rules import derive_final

logger = structlog.get_logger(__name__)


class TransportError(Exception):
    """Raised when the persistence service cannot complete an operation."""

    pass


def parse_character(document: Any) -> CharacterRecord:
    """Build a record from a stored document.

    Documents written before final values were stored separately only carry
    ``rawStats``; their final values are derived on load.

    Raises:
        TransportError: If the document is not a valid character
    """
    if not isinstance(document, dict):
        raise TransportError(f"Character document must be an object, got {type(document).__name__}")

    try:
        if document.get("stats") is None and document.get("rawStats") is not None:
            document = dict(document)
            raw = AttributeSet.model_validate(document["rawStats"])
            document["stats"] = derive_final(raw).model_dump(by_alias=True)
        return CharacterRecord.model_validate(document)
    except ValidationError as e:
        logger.error("character_document_invalid", character_id=document.get("id"), error=str(e))
        raise TransportError(f"Malformed character document: {document.get('id')!r}") from e


class CharacterStore(ABC):
    """
    Somewhere character records live.

    Records are always written and read as whole documents. Any failure is
    reported as a single :class:`TransportError`.
    """

    @abstractmethod
    async def list_characters(self) -> list[CharacterRecord]:
        """Return every stored record."""

    @abstractmethod
    async def save(self, record: CharacterRecord) -> None:
        """Create or replace a record by id."""

    @abstractmethod
    async def delete(self, character_id: str) -> None:
        """Remove a record by id."""

    async def list_recent(self) -> list[CharacterRecord]:
        """Every stored record, most recently updated first."""
        records = await self.list_characters()
        return sorted(records, key=lambda record: record.updated_at, reverse=True)

    async def close(self) -> None:
        """Release any resources held by the store."""

    async def get(self, character_id: str) -> CharacterRecord | None:
        """Find one record by id."""
        for record in await self.list_characters():
            if record.id == character_id:
                return record
        return None
