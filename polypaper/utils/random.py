"""
Random number generation utilities.

Generation code never draws from an ambient generator: callers create a
source here and pass it down explicitly.
"""

import uuid
from typing import Optional

from ..core.alea_prng import AleaPRNG


def new_seed() -> str:
    """Return a fresh seed string for an unseeded run."""
    return uuid.uuid4().hex[:12]


def create_prng(seed: Optional[str] = None) -> AleaPRNG:
    """
    Create an Alea PRNG for one viewer session.

    Args:
        seed: Seed string; a random one is generated when omitted

    Returns:
        AleaPRNG instance
    """
    return AleaPRNG(seed if seed is not None else new_seed())
