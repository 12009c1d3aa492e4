"""
blockicon/seeds.py
Seed resolution

Explicit seeds are used verbatim. When none is given, one is synthesized from
the OS entropy pool. Synthesized seeds are NOT reproducible across runs, and
a failing entropy source is an error: falling back to a fixed seed would make
every unseeded icon identical.
"""

import secrets
from typing import Optional, Tuple

from .config import SEED_ENTROPY_BOUND
from .logger import logger


class SeedSourceError(RuntimeError):
    """Raised when no entropy is available to synthesize a seed."""


def random_seed() -> str:
    """
    Synthesize a seed: a random integer below SEED_ENTROPY_BOUND in hex.

    Raises:
        SeedSourceError: If the entropy source is unavailable
    """
    try:
        value = secrets.randbelow(SEED_ENTROPY_BOUND)
    except (NotImplementedError, OSError) as e:
        logger.error("Entropy source unavailable", component="SEED", details=str(e))
        raise SeedSourceError(f"Cannot synthesize seed: {e}") from e
    return format(value, "x")


def resolve_seed(seed: Optional[str]) -> Tuple[str, bool]:
    """
    Return (seed, generated).

    The empty string is a real seed (it yields the all-zero generator), only
    None triggers synthesis.
    """
    if seed is None:
        seed = random_seed()
        logger.debug("Synthesized seed", component="SEED", details=seed)
        return seed, True
    if not isinstance(seed, str):
        raise TypeError(f"seed must be a string, got {type(seed).__name__}")
    return seed, False
