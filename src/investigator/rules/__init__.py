"""Character rules engine: pure derivations from characteristics and age."""

from .age import age_rule_text
from .attributes import derive_final, derive_final_value
from .combat import CombatStats, derive_combat, derive_move_rate
from .skills import (
    PointBudget,
    SkillTotals,
    SkillValidationError,
    add_custom_skill,
    default_skills,
    effective_base,
    point_budgets,
    skill_total,
)
from .vitals import DerivedStats, VitalMax, calculate_derived_stats, derive_vital_max

__all__ = [
    "CombatStats",
    "DerivedStats",
    "PointBudget",
    "SkillTotals",
    "SkillValidationError",
    "VitalMax",
    "add_custom_skill",
    "age_rule_text",
    "calculate_derived_stats",
    "default_skills",
    "derive_combat",
    "derive_final",
    "derive_final_value",
    "derive_move_rate",
    "derive_vital_max",
    "effective_base",
    "point_budgets",
    "skill_total",
]
