"""Hit point and magic point maxima, plus the full derivation pass."""

from dataclasses import dataclass

from investigator.models.attributes import AttributeSet

from .combat import derive_combat, derive_move_rate

SANITY_MAX = 99


@dataclass(frozen=True)
class VitalMax:
    """Derived pool maxima."""

    hp_max: int
    mp_max: int


@dataclass(frozen=True)
class DerivedStats:
    """Everything one derivation pass produces for a sheet."""

    damage_bonus: str
    build: int
    move_rate: int
    hp_max: int
    mp_max: int


def derive_vital_max(constitution: int, size: int, power: int) -> VitalMax:
    """Calculate pool maxima.

    - HP: (CON + SIZ) // 10
    - MP: POW // 5
    """
    return VitalMax(hp_max=(constitution + size) // 10, mp_max=power // 5)


def calculate_derived_stats(final: AttributeSet, age: int) -> DerivedStats:
    """Run every derivation that depends on final characteristics or age.

    Args:
        final: The character's final (percentile) characteristics
        age: Age in years, used for the movement penalty

    Returns:
        DerivedStats with combat values, movement rate and pool maxima
    """
    combat = derive_combat(final.strength, final.size)
    vitals = derive_vital_max(final.constitution, final.size, final.power)

    return DerivedStats(
        damage_bonus=combat.damage_bonus,
        build=combat.build,
        move_rate=derive_move_rate(final.dexterity, final.strength, final.size, age),
        hp_max=vitals.hp_max,
        mp_max=vitals.mp_max,
    )
