"""Characteristic derivation for investigator sheets.

Raw values are the dice results a player rolls at creation. Most
characteristics are rolled on 3D6 and multiplied by five; SIZ, INT and EDU
are rolled on 2D6 and offset by six before scaling.
"""

from investigator.models.attributes import AttributeName, AttributeSet

# Characteristics rolled as (2D6 + 6) * 5
OFFSET_ATTRIBUTES = frozenset(
    {AttributeName.SIZE, AttributeName.INTELLIGENCE, AttributeName.EDUCATION}
)
ROLL_OFFSET = 6
PERCENTILE_SCALE = 5


def derive_final_value(attribute: AttributeName | str, raw_value: int) -> int:
    """Convert one raw dice result to its percentile value.

    Args:
        attribute: The characteristic the roll belongs to
        raw_value: The dice total as entered

    Returns:
        ``(raw + 6) * 5`` for SIZ, INT and EDU, ``raw * 5`` otherwise

    Examples:
        >>> derive_final_value("strength", 10)
        50
        >>> derive_final_value("size", 7)
        65
    """
    if AttributeName(attribute) in OFFSET_ATTRIBUTES:
        return (raw_value + ROLL_OFFSET) * PERCENTILE_SCALE
    return raw_value * PERCENTILE_SCALE


def derive_final(raw: AttributeSet) -> AttributeSet:
    """Derive the full set of final values from raw dice results.

    Values are not clamped, so zero or negative rolls carry through.
    """
    return AttributeSet(
        **{attr.value: derive_final_value(attr, raw.get(attr)) for attr in AttributeName}
    )
