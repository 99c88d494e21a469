"""
Random number generation utilities.

The RANDOM_* tools draw from one process-wide numpy Generator so that a
seed set here (or through GEOLAB_RANDOM_SEED) reproduces their output.
Sample datasets use their own generator seeded from settings.sample_seed.
"""

from typing import Optional

import numpy as np

from ..config.settings import settings

# Global generator instance
_rng: Optional[np.random.Generator] = None


def set_random_seed(seed: Optional[int]) -> None:
    """
    Reset the process-wide generator.

    Args:
        seed: Seed to use, None draws fresh OS entropy
    """
    global _rng
    _rng = np.random.default_rng(seed)


def get_rng() -> np.random.Generator:
    """
    Get the process-wide generator, creating it on first use.

    Returns:
        numpy Generator instance
    """
    global _rng
    if _rng is None:
        _rng = np.random.default_rng(settings.random_seed)
    return _rng
