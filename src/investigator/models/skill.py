"""Skill model for investigator sheets."""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class SkillDefinition(BaseModel):
    """Catalog entry: a skill name and its fixed base chance."""

    model_config = ConfigDict(frozen=True)

    name: str
    base: int
    tag: str | None = None


class Skill(BaseModel):
    """A skill line on a character sheet with its point allocations."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    name: str
    base: int = 0
    occupation_points: int = 0
    interest_points: int = 0
    growth: int = 0
    tag: str | None = None
    is_custom: bool = Field(default=False)

    @field_validator("occupation_points", "interest_points", "growth", mode="before")
    @classmethod
    def _blank_points_are_zero(cls, value: object) -> object:
        # Sheets saved from a half-filled form carry null allocations
        return 0 if value is None else value

    @classmethod
    def from_definition(cls, definition: SkillDefinition) -> "Skill":
        """Create an unallocated sheet skill from a catalog entry."""
        return cls(name=definition.name, base=definition.base, tag=definition.tag)
