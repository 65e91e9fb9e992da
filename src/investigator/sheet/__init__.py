"""Character sheet editing: edit events, sessions and name generation."""

from .edits import (
    DEFAULT_RAW,
    apply_add_skill,
    apply_age_edit,
    apply_final_edit,
    apply_raw_edit,
    apply_skill_points,
    mark_saved,
    new_character,
    recompute,
)
from .names import NAME_POOLS, generate_name, load_name_pools
from .session import CharacterSheet

__all__ = [
    "DEFAULT_RAW",
    "NAME_POOLS",
    "CharacterSheet",
    "apply_add_skill",
    "apply_age_edit",
    "apply_final_edit",
    "apply_raw_edit",
    "apply_skill_points",
    "generate_name",
    "load_name_pools",
    "mark_saved",
    "new_character",
    "recompute",
]
