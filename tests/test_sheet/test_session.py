"""Tests for the character sheet editing session."""

import pytest

from investigator.models import CharacterRecord
from investigator.rules import SkillValidationError
from investigator.sheet import CharacterSheet
from investigator.storage import CharacterStore, TransportError


class RecordingStore(CharacterStore):
    """In-memory store that can be told to fail."""

    def __init__(self, fail: bool = False) -> None:
        self.saved: list[CharacterRecord] = []
        self.fail = fail

    async def list_characters(self) -> list[CharacterRecord]:
        return list(self.saved)

    async def save(self, record: CharacterRecord) -> None:
        if self.fail:
            raise TransportError("offline")
        self.saved.append(record)

    async def delete(self, character_id: str) -> None:
        self.saved = [r for r in self.saved if r.id != character_id]


@pytest.fixture
def sheet(sample_record):
    return CharacterSheet(sample_record)


class TestCharacterSheet:
    """Tests for session edits."""

    def test_new_sheet_has_defaults(self):
        sheet = CharacterSheet()
        assert len(sheet.record.skills) == 47
        assert sheet.occupation_budget == 300

    def test_raw_then_final_edits(self, sheet):
        sheet.set_raw("dexterity", 14)
        sheet.set_final("appearance", 35)
        assert sheet.record.final.dexterity == 70
        assert sheet.record.final.appearance == 35

    def test_set_age_updates_advisory(self, sheet):
        sheet.set_age(17)
        assert sheet.age_advisory.startswith("Age 15-19")
        sheet.set_age(12)
        assert sheet.age_advisory == ""

    def test_set_details(self, sheet):
        sheet.set_details(gender="F", residence="Arkham", backstory="Saw something.")
        assert sheet.record.residence == "Arkham"
        assert sheet.record.backstory == "Saw something."

    def test_derived_fields_not_directly_editable(self, sheet):
        with pytest.raises(ValueError):
            sheet.set_details(damage_bonus="+6d6")
        assert sheet.record.damage_bonus == "0"

    def test_set_details_validates_flags(self, sheet):
        sheet.set_details(is_lost="no", temporary_insanity="yes")
        assert sheet.record.is_lost is False
        assert sheet.record.temporary_insanity is True

    def test_set_details_rejects_invalid_value(self, sheet):
        before = sheet.record
        with pytest.raises(ValueError):
            sheet.set_details(indefinite_insanity="sometimes")
        assert sheet.record is before

    def test_set_details_blank_text(self, sheet):
        sheet.set_details(gear=None)
        assert sheet.record.gear == ""

    def test_toggle_lost(self, sheet):
        sheet.toggle_lost()
        assert sheet.record.is_lost
        sheet.toggle_lost()
        assert not sheet.record.is_lost

    def test_set_current_not_clamped(self, sheet):
        sheet.set_current("hp", 25)
        assert sheet.record.hp.current == 25
        assert sheet.record.hp.max == 11

    def test_set_current_sanity(self, sheet):
        sheet.set_current("sanity", 44)
        assert sheet.record.sanity.current == 44
        assert sheet.record.sanity.start == 50

    def test_set_current_unknown_pool(self, sheet):
        with pytest.raises(ValueError):
            sheet.set_current("build", 3)

    def test_add_skill_rejected_leaves_record(self, sheet):
        before = sheet.record
        with pytest.raises(SkillValidationError):
            sheet.add_skill("   ")
        assert sheet.record is before

    def test_skill_totals(self, sheet):
        sheet.set_skill_points("Dodge", occupation=20)
        totals = dict(sheet.skill_totals())
        # DEX 50 // 2 + 20
        assert totals["Dodge"].total == 45
        # EDU 65
        assert totals["Mother Tongue"].total == 65

    def test_budgets(self, sheet):
        sheet.set_skill_points("Psychology", occupation=250, interest=140)
        occupation, interest = sheet.budgets
        assert occupation.used == 250
        assert not occupation.exceeded
        # INT 65 x 2 = 130
        assert interest.limit == 130
        assert interest.exceeded

    def test_custom_occupation_budget(self, sample_record):
        sheet = CharacterSheet(sample_record, occupation_budget=200)
        sheet.set_skill_points("Law", occupation=250)
        assert sheet.budgets[0].exceeded


class TestSave:
    """Tests for saving a session."""

    @pytest.mark.asyncio
    async def test_save_stamps_and_writes(self, sheet):
        store = RecordingStore()
        before = sheet.record.updated_at
        saved = await sheet.save(store)
        assert store.saved == [saved]
        assert saved.updated_at >= before
        assert sheet.record is saved

    @pytest.mark.asyncio
    async def test_failed_save_keeps_record(self, sheet):
        store = RecordingStore(fail=True)
        sheet.set_details(name="Unsaved")
        before = sheet.record
        with pytest.raises(TransportError):
            await sheet.save(store)
        assert sheet.record is before
