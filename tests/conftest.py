"""
Shared test fixtures: FastAPI test client and calculator instances.
"""

import pytest
from fastapi.testclient import TestClient

from tubeweight.calculators.tube_weight import TubeWeightCalculator
from tubeweight.main import app


@pytest.fixture
def client():
    """FastAPI test client."""
    return TestClient(app)


@pytest.fixture
def calc():
    """Calculator with the form defaults: mm dimensions, weight per meter."""
    return TubeWeightCalculator()
