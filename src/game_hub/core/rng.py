"""
Random generator helpers.

Engines never touch a global random function; they receive a
numpy Generator so tests can seed them.
"""

from __future__ import annotations

from typing import Optional

import numpy as np


def make_rng(
    seed: Optional[int] = None,
    rng: Optional[np.random.Generator] = None,
) -> np.random.Generator:
    """
    Return the generator an engine should use.

    An explicit ``rng`` wins over ``seed``; with neither, a fresh
    OS-seeded generator is created.
    """
    if rng is not None:
        return rng
    return np.random.default_rng(seed)
