import random

import pytest

from skyline.config import GeneratorConfig
from skyline.generators.random_buildings import generate, generate_buildings


def test_same_seed_same_buildings():
    config = GeneratorConfig(width=32, height=16, count=40, seed=1234)

    assert generate_buildings(config) == generate_buildings(config)


def test_different_seeds_differ():
    a = generate_buildings(GeneratorConfig(count=40, seed=1))
    b = generate_buildings(GeneratorConfig(count=40, seed=2))

    assert a != b


@pytest.mark.parametrize("width, height", [(1, 2), (16, 32), (64, 3)])
def test_buildings_respect_bounds(width, height):
    buildings = list(generate(random.Random(7), width, height, 200))

    assert len(buildings) == 200
    for b in buildings:
        assert 0 <= b.x1 <= b.x2 < width
        assert 1 <= b.height < height


def test_unseeded_config_generates():
    assert len(generate_buildings(GeneratorConfig(count=5))) == 5


@pytest.mark.parametrize("kwargs", [
    {"width": 0},
    {"height": 1},
    {"count": -1},
])
def test_config_validation(kwargs):
    with pytest.raises(ValueError):
        GeneratorConfig(**kwargs)
