"""Character record: the document edited in a session and persisted whole."""

import uuid
from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .attributes import AttributeSet
from .skill import Skill


# Documents saved without a timestamp sort after every dated record
NEVER_SAVED = datetime.min.replace(tzinfo=timezone.utc)


class _Document(BaseModel):
    """Base for document parts: immutable, camelCase on the wire."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class Pool(_Document):
    """A current/max pair (hit points, magic points)."""

    current: int = 0
    max: int = 0

    @field_validator("current", mode="before")
    @classmethod
    def _blank_current_is_zero(cls, value: object) -> object:
        return 0 if value is None else value


class SanityPool(_Document):
    """Sanity: current value, starting value and the fixed ceiling."""

    current: int = 0
    start: int = 0
    max: int = 99

    @field_validator("current", mode="before")
    @classmethod
    def _blank_current_is_zero(cls, value: object) -> object:
        return 0 if value is None else value


class LuckPool(_Document):
    """Spendable luck."""

    current: int = 0


class CharacterRecord(_Document):
    """An investigator sheet.

    ``raw`` holds the dice results as entered and ``final`` the playable
    percentile values. ``final`` starts out derived from ``raw`` but may be
    edited independently; every downstream calculation reads ``final``.
    Combat values and pool maxima are derived and rewritten by each
    derivation pass, while pool ``current`` values belong to the player.
    """

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))

    # Descriptive fields
    name: str = ""
    player: str = ""
    occupation: str = ""
    age: int = 25
    gender: str = ""
    birthplace: str = ""
    residence: str = ""
    is_lost: bool = False

    # Characteristics
    raw: AttributeSet = Field(alias="rawStats")
    final: AttributeSet = Field(alias="stats")

    # Pools
    hp: Pool = Field(default_factory=Pool)
    mp: Pool = Field(default_factory=Pool)
    sanity: SanityPool = Field(default_factory=SanityPool, alias="san")
    luck: LuckPool = Field(default_factory=LuckPool)

    # Combat
    damage_bonus: str = "0"
    build: int = 0
    move_rate: int = 8

    # Mental health
    temporary_insanity: bool = Field(default=False, alias="tempInsanity")
    indefinite_insanity: bool = Field(default=False, alias="indefInsanity")
    insanity_description: str = ""

    skills: tuple[Skill, ...] = ()

    backstory: str = ""
    gear: str = ""

    updated_at: datetime = NEVER_SAVED

    @field_validator(
        "name",
        "player",
        "occupation",
        "gender",
        "birthplace",
        "residence",
        "insanity_description",
        "backstory",
        "gear",
        mode="before",
    )
    @classmethod
    def _missing_text_is_empty(cls, value: object) -> object:
        return "" if value is None else value

    @field_validator("updated_at")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        # Rosters are sorted by this field; naive and aware values do not compare
        return value.replace(tzinfo=timezone.utc) if value.tzinfo is None else value

    def skill(self, name: str) -> Skill | None:
        """Find a skill by exact name."""
        for skill in self.skills:
            if skill.name == name:
                return skill
        return None

    def to_document(self) -> dict:
        """Serialize to the JSON document stored by the persistence service."""
        return self.model_dump(mode="json", by_alias=True)
