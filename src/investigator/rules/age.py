"""Age advisory text.

Age adjustments to characteristics are left to the player: this module only
describes them. Movement rate is the one age effect applied automatically,
see :func:`investigator.rules.combat.derive_move_rate`.
"""

MINIMUM_AGE = 15

# (lowest age, highest age or None for open-ended, guidance)
AGE_RULES: tuple[tuple[int, int | None, str], ...] = (
    (
        15,
        19,
        "Age 15-19: Deduct 5 points among STR and SIZ. Deduct 5 points from EDU. "
        "Roll twice for Luck and use the higher result.",
    ),
    (20, 39, "Age 20-39: Make an improvement check for EDU."),
    (
        40,
        49,
        "Age 40-49: Deduct 5 points among STR, CON or DEX. Reduce APP by 5. "
        "Make 2 improvement checks for EDU.",
    ),
    (
        50,
        59,
        "Age 50-59: Deduct 10 points among STR, CON or DEX. Reduce APP by 10. "
        "Make 3 improvement checks for EDU.",
    ),
    (
        60,
        69,
        "Age 60-69: Deduct 20 points among STR, CON or DEX. Reduce APP by 15. "
        "Make 4 improvement checks for EDU.",
    ),
    (
        70,
        79,
        "Age 70-79: Deduct 40 points among STR, CON or DEX. Reduce APP by 20. "
        "Make 4 improvement checks for EDU.",
    ),
    (
        80,
        None,
        "Age 80+: Deduct 80 points among STR, CON or DEX. Reduce APP by 25. "
        "Make 4 improvement checks for EDU.",
    ),
)


def age_rule_text(age: int) -> str:
    """Guidance for the age band containing ``age``.

    Returns:
        The band's text, or an empty string below age 15
    """
    for lowest, highest, text in AGE_RULES:
        if age >= lowest and (highest is None or age <= highest):
            return text
    return ""
