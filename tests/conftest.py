"""
Shared test fixtures: catalogs, estimator, test client.
"""

import pytest
from fastapi.testclient import TestClient

from craftruv.calculators.component_calculator import ComponentCalculator
from craftruv.calculators.cost_estimator import CostEstimator
from craftruv.catalogs import build_furniture_type_catalog, build_material_catalog
from craftruv.main import app


@pytest.fixture
def materials():
    return build_material_catalog()


@pytest.fixture
def furniture_types():
    return build_furniture_type_catalog()


@pytest.fixture
def estimator(materials, furniture_types):
    return CostEstimator(materials, furniture_types)


@pytest.fixture
def component_calculator():
    return ComponentCalculator()


@pytest.fixture
def client():
    """FastAPI test client."""
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def cabinet_dims():
    """Reference cabinet: 800 x 2000 x 600 mm."""
    return {"width": 800, "height": 2000, "depth": 600}
