# tests/conftest.py

import pytest

from skyline.config import ActiveSetKind, SolverConfig
from skyline.processing.sweep import SkylineSolver


@pytest.fixture(params=list(ActiveSetKind), ids=lambda kind: kind.value)
def solver(request):
    """A solver for each active set strategy, with result checking on."""
    return SkylineSolver(SolverConfig(active_set=request.param, check_result=True))
