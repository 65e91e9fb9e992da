"""Stored character document table."""

from datetime import datetime
from typing import Any

from sqlalchemy import JSON, DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class CharacterDocument(Base):
    """One character sheet, kept as its full JSON document."""

    __tablename__ = "characters"

    id: Mapped[str] = mapped_column(
        String(64),
        primary_key=True,
        comment="Opaque character identifier",
    )

    name: Mapped[str] = mapped_column(
        String(200),
        nullable=False,
        default="",
        comment="Character name, copied out of the document for listing",
    )

    document: Mapped[dict[str, Any]] = mapped_column(
        JSON,
        nullable=False,
        comment="The character record in its stored document form",
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        index=True,
        comment="Time of the last save",
    )

    def __repr__(self) -> str:
        return f"<CharacterDocument(id={self.id!r}, name={self.name!r})>"
