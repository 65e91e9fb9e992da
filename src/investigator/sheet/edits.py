"""Edit events on a character record.

Every function here takes a record snapshot and returns a new one; records
are never changed in place. Edits that touch characteristics or age finish
with :func:`recompute`, the single derivation pass.
"""

from datetime import datetime, timezone

from investigator.models import AttributeName, AttributeSet, CharacterRecord, LuckPool, Pool, SanityPool
from investigator.rules import add_custom_skill, calculate_derived_stats, default_skills, derive_final
from investigator.rules.attributes import derive_final_value

# Midpoint dice results for a fresh sheet
DEFAULT_RAW = AttributeSet(
    strength=10,
    constitution=10,
    size=7,
    dexterity=10,
    appearance=10,
    intelligence=7,
    power=10,
    education=7,
    luck=10,
)
DEFAULT_AGE = 25

SKILL_POINT_FIELDS = ("occupation_points", "interest_points", "growth")


def recompute(record: CharacterRecord) -> CharacterRecord:
    """Rewrite derived values from final characteristics and age.

    Pool ``current`` values are left alone, so they may sit above a lowered
    maximum until the player changes them.
    """
    derived = calculate_derived_stats(record.final, record.age)
    return record.model_copy(
        update={
            "damage_bonus": derived.damage_bonus,
            "build": derived.build,
            "move_rate": derived.move_rate,
            "hp": record.hp.model_copy(update={"max": derived.hp_max}),
            "mp": record.mp.model_copy(update={"max": derived.mp_max}),
        }
    )


def apply_raw_edit(record: CharacterRecord, attribute: AttributeName | str, value: int) -> CharacterRecord:
    """Set a raw dice result.

    The matching final value is recalculated and replaces any manual edit of
    that characteristic; other final values keep their manual edits. A new
    POW roll restarts sanity and a new Luck roll restarts current luck.
    """
    attribute = AttributeName(attribute)
    final_value = derive_final_value(attribute, value)
    update: dict = {
        "raw": record.raw.replace(attribute, value),
        "final": record.final.replace(attribute, final_value),
    }

    if attribute is AttributeName.POWER:
        update["sanity"] = record.sanity.model_copy(
            update={"start": final_value, "current": final_value}
        )
    elif attribute is AttributeName.LUCK:
        update["luck"] = LuckPool(current=final_value)

    return recompute(record.model_copy(update=update))


def apply_final_edit(record: CharacterRecord, attribute: AttributeName | str, value: int) -> CharacterRecord:
    """Override a final value by hand. Raw values are not touched."""
    final = record.final.replace(attribute, value)
    return recompute(record.model_copy(update={"final": final}))


def apply_age_edit(record: CharacterRecord, age: int) -> CharacterRecord:
    """Change age. Only movement rate reacts; characteristics do not."""
    return recompute(record.model_copy(update={"age": age}))


def apply_skill_points(
    record: CharacterRecord,
    name: str,
    *,
    occupation: int | None = None,
    interest: int | None = None,
    growth: int | None = None,
) -> CharacterRecord:
    """Set point allocations on one skill. Budgets are not enforced.

    Raises:
        KeyError: If the sheet has no skill with that name
    """
    values = dict(zip(SKILL_POINT_FIELDS, (occupation, interest, growth)))
    update = {field: value for field, value in values.items() if value is not None}

    skills = list(record.skills)
    for index, skill in enumerate(skills):
        if skill.name == name:
            skills[index] = skill.model_copy(update=update)
            return record.model_copy(update={"skills": tuple(skills)})

    raise KeyError(name)


def apply_add_skill(record: CharacterRecord, name: str, base: int = 0) -> CharacterRecord:
    """Append a custom skill.

    Raises:
        SkillValidationError: If the name is blank or already present
    """
    skills = add_custom_skill(record.skills, name, base)
    return record.model_copy(update={"skills": tuple(skills)})


def mark_saved(record: CharacterRecord, now: datetime | None = None) -> CharacterRecord:
    """Stamp the record with its save time."""
    return record.model_copy(update={"updated_at": now or datetime.now(timezone.utc)})


def new_character(
    *,
    name: str = "",
    player: str = "",
    occupation: str = "",
    age: int = DEFAULT_AGE,
    raw: AttributeSet = DEFAULT_RAW,
) -> CharacterRecord:
    """Create a sheet with default rolls and the full skill catalog.

    Sanity and luck start from the final POW and Luck values; hit points and
    magic points start at 10 until the player fills them in.
    """
    final = derive_final(raw)
    record = CharacterRecord(
        name=name,
        player=player,
        occupation=occupation,
        age=age,
        raw=raw,
        final=final,
        hp=Pool(current=10, max=10),
        mp=Pool(current=10, max=10),
        sanity=SanityPool(current=final.power, start=final.power),
        luck=LuckPool(current=final.luck),
        skills=tuple(default_skills()),
        updated_at=datetime.now(timezone.utc),
    )
    return recompute(record)
