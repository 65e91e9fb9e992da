"""Editing session for a single character sheet."""

from typing import TYPE_CHECKING, Any

import structlog

from investigator.models import AttributeName, CharacterRecord
from investigator.rules import PointBudget, SkillTotals, age_rule_text, point_budgets, skill_total
from investigator.rules.skills import DEFAULT_OCCUPATION_BUDGET

from . import edits

if TYPE_CHECKING:
    from investigator.storage.base import CharacterStore

logger = structlog.get_logger(__name__)

# Fields a player may set directly; everything else goes through an edit event
EDITABLE_FIELDS = frozenset(
    {
        "name",
        "player",
        "occupation",
        "gender",
        "birthplace",
        "residence",
        "is_lost",
        "temporary_insanity",
        "indefinite_insanity",
        "insanity_description",
        "backstory",
        "gear",
    }
)

CURRENT_POOLS = ("hp", "mp", "sanity", "luck")


class CharacterSheet:
    """
    Holds the record being edited and applies edits to it.

    Each edit swaps in a new record snapshot. Nothing is persisted until
    :meth:`save` is called, which writes the whole document.
    """

    def __init__(
        self,
        record: CharacterRecord | None = None,
        occupation_budget: int = DEFAULT_OCCUPATION_BUDGET,
    ) -> None:
        self.record = record if record is not None else edits.new_character()
        self.occupation_budget = occupation_budget

    def set_raw(self, attribute: AttributeName | str, value: int) -> CharacterRecord:
        self.record = edits.apply_raw_edit(self.record, attribute, value)
        return self.record

    def set_final(self, attribute: AttributeName | str, value: int) -> CharacterRecord:
        self.record = edits.apply_final_edit(self.record, attribute, value)
        return self.record

    def set_age(self, age: int) -> CharacterRecord:
        self.record = edits.apply_age_edit(self.record, age)
        return self.record

    def set_details(self, **changes: Any) -> CharacterRecord:
        """Update descriptive fields and flags.

        Values are validated like a loaded document, so ``None`` text becomes
        an empty string and flags must be booleans.

        Raises:
            ValueError: If a field is derived or unknown, or a value is invalid
                (pydantic's ``ValidationError`` is a ``ValueError``)
        """
        unknown = set(changes) - EDITABLE_FIELDS
        if unknown:
            raise ValueError(f"Fields cannot be edited directly: {', '.join(sorted(unknown))}")
        self.record = CharacterRecord.model_validate({**self.record.model_dump(), **changes})
        return self.record

    def toggle_lost(self) -> CharacterRecord:
        return self.set_details(is_lost=not self.record.is_lost)

    def set_current(self, pool: str, value: int) -> CharacterRecord:
        """Set the current value of hp, mp, sanity or luck. No clamping."""
        if pool not in CURRENT_POOLS:
            raise ValueError(f"Unknown pool: {pool!r}")
        current = getattr(self.record, pool)
        self.record = self.record.model_copy(
            update={pool: current.model_copy(update={"current": value})}
        )
        return self.record

    def set_skill_points(
        self,
        name: str,
        *,
        occupation: int | None = None,
        interest: int | None = None,
        growth: int | None = None,
    ) -> CharacterRecord:
        self.record = edits.apply_skill_points(
            self.record, name, occupation=occupation, interest=interest, growth=growth
        )
        return self.record

    def add_skill(self, name: str, base: int = 0) -> CharacterRecord:
        """Add a custom skill; a rejected name leaves the sheet unchanged."""
        self.record = edits.apply_add_skill(self.record, name, base)
        logger.debug("custom_skill_added", character_id=self.record.id, skill=name.strip())
        return self.record

    def skill_totals(self) -> list[tuple[str, SkillTotals]]:
        """Totals for every skill, in sheet order."""
        return [(skill.name, skill_total(skill, self.record.final)) for skill in self.record.skills]

    @property
    def budgets(self) -> tuple[PointBudget, PointBudget]:
        """(occupation, interest) point budgets for display warnings."""
        return point_budgets(self.record.skills, self.record.final, self.occupation_budget)

    @property
    def age_advisory(self) -> str:
        return age_rule_text(self.record.age)

    async def save(self, store: "CharacterStore") -> CharacterRecord:
        """Stamp the save time and write the whole record.

        Raises:
            TransportError: If the store rejects the write; the session keeps
                the unsaved record so the user can retry
        """
        saved = edits.mark_saved(self.record)
        await store.save(saved)
        self.record = saved
        logger.info("character_sheet_saved", character_id=saved.id, name=saved.name)
        return saved
