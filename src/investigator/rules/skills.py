"""Skills: catalog, effective bases, totals and point budgets.

Skill chances are percentages. A skill's total is its base chance plus the
occupation points, personal interest points and growth invested in it.
"""

import pathlib
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from functools import lru_cache
from typing import Any

import yaml

from investigator.models.attributes import AttributeSet
from investigator.models.skill import Skill, SkillDefinition

SKILL_CATALOG_PATH = pathlib.Path(__file__).parent.parent / "data" / "skills.yaml"

DODGE = "Dodge"
MOTHER_TONGUE = "Mother Tongue"

# Catalog skills whose base comes from a characteristic instead of the sheet
ATTRIBUTE_BASED_SKILLS: dict[str, Callable[[AttributeSet], int]] = {
    DODGE: lambda final: final.dexterity // 2,
    MOTHER_TONGUE: lambda final: final.education,
}

DEFAULT_OCCUPATION_BUDGET = 300
INTEREST_POINTS_PER_INT = 2


class SkillValidationError(ValueError):
    """Raised when a skill cannot be added to a sheet."""

    pass


@dataclass(frozen=True)
class SkillTotals:
    """A skill's total chance with its hard (half) and extreme (fifth) values."""

    total: int
    half: int
    fifth: int


@dataclass(frozen=True)
class PointBudget:
    """Spent versus available points for one allocation pool.

    Budgets are advisory: going over is reported, never rejected.
    """

    limit: int
    used: int

    @property
    def remaining(self) -> int:
        return self.limit - self.used

    @property
    def exceeded(self) -> bool:
        return self.used > self.limit


def calculate_half(value: int) -> int:
    """Hard success threshold."""
    return value // 2


def calculate_fifth(value: int) -> int:
    """Extreme success threshold."""
    return value // 5


def effective_base(skill: Skill, final: AttributeSet) -> int:
    """Base chance used for totals.

    Dodge is half DEX and Mother Tongue equals EDU, whatever base is stored
    on the sheet. Custom skills always use their stored base.
    """
    if not skill.is_custom:
        derive = ATTRIBUTE_BASED_SKILLS.get(skill.name)
        if derive is not None:
            return derive(final)
    return skill.base


def skill_total(skill: Skill, final: AttributeSet) -> SkillTotals:
    """Calculate a skill's total, half and fifth values.

    The total is never negative, even when negative allocations are entered.

    Examples:
        A skill with base 10 and -5 occupation points totals 5.
    """
    total = max(
        0,
        effective_base(skill, final)
        + skill.occupation_points
        + skill.interest_points
        + skill.growth,
    )
    return SkillTotals(total=total, half=calculate_half(total), fifth=calculate_fifth(total))


def add_custom_skill(skills: Sequence[Skill], name: str, base: int = 0) -> list[Skill]:
    """Return a new skill list with a custom skill appended.

    Args:
        skills: The character's current skills, in display order
        name: Name for the new skill; surrounding whitespace is dropped
        base: Base chance for the new skill

    Returns:
        A new list; the input sequence is left untouched

    Raises:
        SkillValidationError: If the name is blank or already on the sheet
    """
    clean_name = name.strip()
    if not clean_name:
        raise SkillValidationError("Skill name must not be empty")
    if any(skill.name == clean_name for skill in skills):
        raise SkillValidationError(f"A skill named {clean_name!r} already exists")

    new_skill = Skill(name=clean_name, base=base, is_custom=True)
    return [*skills, new_skill]


def interest_budget(final: AttributeSet) -> int:
    """Personal interest points available: INT x 2."""
    return final.intelligence * INTEREST_POINTS_PER_INT


def occupation_points_used(skills: Iterable[Skill]) -> int:
    return sum(skill.occupation_points for skill in skills)


def interest_points_used(skills: Iterable[Skill]) -> int:
    return sum(skill.interest_points for skill in skills)


def point_budgets(
    skills: Sequence[Skill],
    final: AttributeSet,
    occupation_limit: int = DEFAULT_OCCUPATION_BUDGET,
) -> tuple[PointBudget, PointBudget]:
    """Occupation and personal interest budgets for a skill list.

    Returns:
        Tuple of (occupation, interest) budgets
    """
    return (
        PointBudget(limit=occupation_limit, used=occupation_points_used(skills)),
        PointBudget(limit=interest_budget(final), used=interest_points_used(skills)),
    )


def load_skill_definitions(path: pathlib.Path = SKILL_CATALOG_PATH) -> dict[str, Any]:
    """Load the raw skill catalog from YAML.

    Returns:
        The parsed document, or an empty dict if the file is missing
    """
    if not path.exists():
        return {}

    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


@lru_cache
def get_skill_catalog() -> tuple[SkillDefinition, ...]:
    """Default skills in sheet order."""
    definitions = load_skill_definitions()
    return tuple(SkillDefinition(**entry) for entry in definitions.get("skills", []))


def default_skills() -> list[Skill]:
    """Fresh, unallocated skills for a new character."""
    return [Skill.from_definition(definition) for definition in get_skill_catalog()]
