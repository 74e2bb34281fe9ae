"""
Sampling of demo sources and airport pairs.

All randomness flows through an explicitly passed ``random.Random`` so
runs can be reproduced from a seed.
"""

import random
from typing import List, Mapping, Tuple, Union

from src.airport_network.exceptions import ConfigurationError

RandomSource = Union[random.Random, int, None]


def make_rng(seed: RandomSource = None) -> random.Random:
    """Return ``seed`` if it is already an RNG, else a new seeded one."""
    if isinstance(seed, random.Random):
        return seed
    return random.Random(seed)


def sample_sources(
    nodes: Mapping[str, object],
    k: int,
    rng: RandomSource = None,
) -> List[str]:
    """
    Pick ``k`` distinct node keys without replacement.

    Keys are sorted before sampling so the pick depends only on the
    seed, not on mapping insertion order. ``k`` larger than the number
    of nodes returns all of them.

    Raises:
        ConfigurationError: If ``k`` is negative.
    """
    if k < 0:
        raise ConfigurationError(f"sample size must be >= 0, got {k}")
    candidates = sorted(nodes)
    return make_rng(rng).sample(candidates, min(k, len(candidates)))


def sample_pairs(
    nodes: Mapping[str, object],
    n: int,
    rng: RandomSource = None,
) -> List[Tuple[str, str]]:
    """
    Draw ``n`` ordered pairs with replacement; a pair may repeat a node.

    Returns an empty list when there are no nodes.
    """
    if n < 0:
        raise ConfigurationError(f"pair count must be >= 0, got {n}")
    candidates = sorted(nodes)
    if not candidates:
        return []
    generator = make_rng(rng)
    return [
        (generator.choice(candidates), generator.choice(candidates))
        for _ in range(n)
    ]
