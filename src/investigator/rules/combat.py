"""Damage bonus, build and movement rate."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CombatStats:
    """Damage bonus and build for a STR + SIZ total."""

    damage_bonus: str  # Dice expression, shown and stored as-is
    build: int


# (upper bound of STR + SIZ, damage bonus, build), ascending
DAMAGE_BONUS_TABLE: tuple[tuple[int, str, int], ...] = (
    (64, "-2", -2),
    (84, "-1", -1),
    (124, "0", 0),
    (164, "+1d4", 1),
    (204, "+1d6", 2),
    (284, "+2d6", 3),
    (364, "+3d6", 4),
    (444, "+4d6", 5),
    (524, "+5d6", 6),
)
# Everything above the table; the rulebook keeps adding 1D6 per 80 points
TOP_COMBAT_STATS = CombatStats(damage_bonus="+6d6", build=7)

BASE_MOVE_RATE = 8

# (minimum age, movement penalty), descending
AGE_MOVE_PENALTIES: tuple[tuple[int, int], ...] = (
    (80, 5),
    (70, 4),
    (60, 3),
    (50, 2),
    (40, 1),
)


def derive_combat(strength: int, size: int) -> CombatStats:
    """Look up damage bonus and build for the given STR and SIZ.

    Examples:
        >>> derive_combat(13, 12)
        CombatStats(damage_bonus='-2', build=-2)
        >>> derive_combat(90, 90)
        CombatStats(damage_bonus='+1d6', build=2)
    """
    total = strength + size
    for upper, damage_bonus, build in DAMAGE_BONUS_TABLE:
        if total <= upper:
            return CombatStats(damage_bonus=damage_bonus, build=build)
    return TOP_COMBAT_STATS


def age_move_penalty(age: int) -> int:
    """Movement lost to age: one point per decade from 40, five from 80."""
    for minimum, penalty in AGE_MOVE_PENALTIES:
        if age >= minimum:
            return penalty
    return 0


def derive_move_rate(dexterity: int, strength: int, size: int, age: int) -> int:
    """Calculate movement rate.

    Base MOV is 7 when both DEX and STR are below SIZ, 9 when both are above
    it and 8 otherwise (any tie gives 8). The age penalty is then subtracted
    and the result never drops below zero.
    """
    move = BASE_MOVE_RATE
    if dexterity < size and strength < size:
        move = 7
    elif dexterity > size and strength > size:
        move = 9

    return max(0, move - age_move_penalty(age))
