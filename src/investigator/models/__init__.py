"""Data model for investigator sheets."""

from .attributes import (
    ATTRIBUTE_CODES,
    ATTRIBUTE_NAMES,
    AttributeName,
    AttributeSet,
    parse_attribute_name,
)
from .character import CharacterRecord, LuckPool, Pool, SanityPool
from .skill import Skill, SkillDefinition

__all__ = [
    "ATTRIBUTE_CODES",
    "ATTRIBUTE_NAMES",
    "AttributeName",
    "AttributeSet",
    "CharacterRecord",
    "LuckPool",
    "Pool",
    "SanityPool",
    "Skill",
    "SkillDefinition",
    "parse_attribute_name",
]
