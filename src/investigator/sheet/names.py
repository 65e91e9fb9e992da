"""Random investigator names."""

import pathlib
import random
from functools import lru_cache

import yaml

NAMES_PATH = pathlib.Path(__file__).parent.parent / "data" / "names.yaml"

NAME_POOLS = ("ko", "en", "asia")


@lru_cache
def load_name_pools(path: pathlib.Path = NAMES_PATH) -> dict[str, tuple[str, ...]]:
    """Load name pools keyed by pool id."""
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return {key: tuple(names) for key, names in data.get("pools", {}).items()}


def generate_name(pool: str = "en", rng: random.Random | None = None) -> str:
    """Pick a random name from a pool.

    Args:
        pool: One of ``ko``, ``en`` or ``asia``
        rng: Optional random source, for reproducible picks

    Raises:
        ValueError: If the pool does not exist or is empty
    """
    names = load_name_pools().get(pool)
    if not names:
        raise ValueError(f"Unknown name pool: {pool!r}")
    return (rng or random).choice(names)
