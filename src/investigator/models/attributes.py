"""Attribute model shared by raw dice inputs and final percentile values."""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class AttributeName(StrEnum):
    """The nine investigator characteristics."""

    STRENGTH = "strength"
    CONSTITUTION = "constitution"
    SIZE = "size"
    DEXTERITY = "dexterity"
    APPEARANCE = "appearance"
    INTELLIGENCE = "intelligence"
    POWER = "power"
    EDUCATION = "education"
    LUCK = "luck"

    @property
    def code(self) -> str:
        """Short key used in stored documents (``str``, ``siz``, ...)."""
        return ATTRIBUTE_CODES[self]


# Document keys, in sheet order
ATTRIBUTE_CODES: dict[AttributeName, str] = {
    AttributeName.STRENGTH: "str",
    AttributeName.CONSTITUTION: "con",
    AttributeName.SIZE: "siz",
    AttributeName.DEXTERITY: "dex",
    AttributeName.APPEARANCE: "app",
    AttributeName.INTELLIGENCE: "int",
    AttributeName.POWER: "pow",
    AttributeName.EDUCATION: "edu",
    AttributeName.LUCK: "luck",
}

ATTRIBUTE_NAMES = [attr.value for attr in AttributeName]


def parse_attribute_name(value: str) -> AttributeName:
    """Resolve a full attribute name or its short code.

    Raises:
        ValueError: If the value names no attribute
    """
    key = value.strip().lower()
    for attr, code in ATTRIBUTE_CODES.items():
        if key in (attr.value, code):
            return attr
    raise ValueError(f"Unknown attribute: {value!r}")


class AttributeSet(BaseModel):
    """One value per characteristic.

    Used both for the raw dice results and for the final playable values.
    Instances are immutable; edits produce a new set via :meth:`replace`.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    strength: int = Field(alias="str")
    constitution: int = Field(alias="con")
    size: int = Field(alias="siz")
    dexterity: int = Field(alias="dex")
    appearance: int = Field(alias="app")
    intelligence: int = Field(alias="int")
    power: int = Field(alias="pow")
    education: int = Field(alias="edu")
    luck: int = Field(alias="luck")

    def get(self, attribute: AttributeName | str) -> int:
        """Return the value of a single attribute."""
        return getattr(self, AttributeName(attribute).value)

    def replace(self, attribute: AttributeName | str, value: int) -> "AttributeSet":
        """Return a copy with one attribute changed."""
        return self.model_copy(update={AttributeName(attribute).value: value})

    def as_dict(self) -> dict[str, int]:
        """Values keyed by full attribute name."""
        return {name: getattr(self, name) for name in ATTRIBUTE_NAMES}
