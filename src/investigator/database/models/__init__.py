"""Database models for the local character store."""

from .base import Base
from .character import CharacterDocument

__all__ = [
    "Base",
    "CharacterDocument",
]
