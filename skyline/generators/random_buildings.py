"""
Synthetic building generator.

Draws random buildings inside a width x height world. The same seed
always produces the same buildings.
"""

import random
from typing import Iterator, List
import logging

from ..config import GeneratorConfig
from ..models.building import Building

logger = logging.getLogger(__name__)


def generate(rng: random.Random, width: int, height: int, count: int) -> Iterator[Building]:
    """
    Yield count random buildings.

    Both edges are drawn from [0, width) and swapped into order, so
    zero-width buildings are possible. Heights are drawn from
    [1, height - 1].

    Args:
        rng: Random generator to draw from
        width: Exclusive bound for building edges
        height: Exclusive bound for building heights (at least 2)
        count: Number of buildings
    """
    for _ in range(count):
        x1 = rng.randrange(width)
        x2 = rng.randrange(width)
        if x2 < x1:
            x1, x2 = x2, x1
        h = rng.randrange(height - 1) + 1
        yield Building(x1, x2, h)


def generate_buildings(config: GeneratorConfig) -> List[Building]:
    """
    Generate buildings for a configuration.

    A config without a seed gets a fresh one from system entropy; the seed
    used is logged so the run can be reproduced.

    Args:
        config: Generator configuration

    Returns:
        List of config.count buildings
    """
    seed = config.seed
    if seed is None:
        seed = random.SystemRandom().randrange(2 ** 63)
        logger.info(f"Using random seed {seed}")

    rng = random.Random(seed)
    buildings = list(generate(rng, config.width, config.height, config.count))

    logger.debug(
        f"Generated {len(buildings)} buildings "
        f"(seed={seed} w={config.width} h={config.height})"
    )
    return buildings
