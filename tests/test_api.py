"""
HTTP layer tests: routes, success envelope, error translation.
"""

import pytest
from fastapi.testclient import TestClient

from craftruv.catalogs import MaterialCatalog
from craftruv.dependencies import get_material_catalog
from craftruv.main import app


def _calc_body(**overrides):
    body = {
        "furnitureType": "cabinet",
        "material": "laminate_white",
        "dimensions": {"width": 800, "height": 2000, "depth": 600},
    }
    body.update(overrides)
    return body


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


# ============================================================
# Catalog routes
# ============================================================

def test_list_materials(client):
    response = client.get("/api/calculator/materials")
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["data"]["oak"]["pricePerArea"] == 2500
    assert list(body["data"])[0] == "oak"


def test_get_material(client):
    response = client.get("/api/calculator/materials/mdf_white")
    assert response.status_code == 200
    assert response.json()["data"]["category"] == "mdf"


def test_get_unknown_material_is_404(client):
    response = client.get("/api/calculator/materials/unobtainium")
    assert response.status_code == 404
    body = response.json()
    assert body["success"] is False
    assert "unobtainium" in body["message"]


def test_furniture_type_routes(client):
    body = client.get("/api/calculator/furniture-types").json()
    assert body["data"]["kitchen"]["baseMultiplier"] == 1.3
    assert client.get("/api/calculator/furniture-types/wardrobe").status_code == 200
    assert client.get("/api/calculator/furniture-types/spaceship").status_code == 404


# ============================================================
# Calculate
# ============================================================

def test_calculate_reference_cabinet(client):
    response = client.post("/api/calculator/calculate", json=_calc_body())
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    data = body["data"]
    assert data["surfaceArea"] == pytest.approx(6.56)
    assert data["adjustedArea"] == pytest.approx(16.4)
    assert data["materialCost"] == 13120.0
    assert data["laborCost"] == 24600.0
    assert data["totalCost"] == 37720.0
    assert data["addOns"] == {"delivery": 1886.0, "assembly": 3772.0, "warranty": 754.4}
    assert data["totalWithAddOns"] == 44132.4
    assert data["materialName"] == "Ламинированное ДСП белое"
    assert data["furnitureTypeName"] == "Шкаф"
    assert data["currency"] == "RUB"
    assert "calculationDate" in data


def test_calculate_kitchen(client):
    data = client.post("/api/calculator/calculate", json=_calc_body(furnitureType="kitchen")).json()["data"]
    assert data["totalCost"] == 49036.0


def test_calculate_with_add_on_selection(client):
    body = _calc_body(options={"delivery": False, "assembly": True, "warranty": False})
    data = client.post("/api/calculator/calculate", json=body).json()["data"]
    assert data["addOns"] == {"assembly": 3772.0}
    assert data["totalWithAddOns"] == 41492.0


@pytest.mark.parametrize("dimensions", [
    {"width": 0, "height": 100, "depth": 100},
    {"width": 100, "height": -5, "depth": 100},
    {"width": 100, "height": 100},
    {"width": "wide", "height": 100, "depth": 100},
])
def test_calculate_invalid_dimensions_is_400(client, dimensions):
    response = client.post("/api/calculator/calculate", json=_calc_body(dimensions=dimensions))
    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["error"] == "InvalidDimensions"
    assert body["message"]


def test_calculate_missing_dimensions_is_400(client):
    body = _calc_body()
    del body["dimensions"]
    response = client.post("/api/calculator/calculate", json=body)
    assert response.status_code == 400
    assert response.json()["field"] == "dimensions"


def test_calculate_unknown_material_is_400(client):
    response = client.post("/api/calculator/calculate", json=_calc_body(material="unobtainium"))
    assert response.status_code == 400
    assert response.json()["error"] == "UnknownMaterial"


def test_calculate_unknown_furniture_type_is_400(client):
    response = client.post("/api/calculator/calculate", json=_calc_body(furnitureType="spaceship"))
    assert response.status_code == 400
    assert response.json()["error"] == "UnknownFurnitureType"


def test_calculate_uses_overridden_catalog(client):
    """Catalogs are dependencies, so a test price list can be swapped in."""
    catalog = MaterialCatalog.from_mapping({
        "laminate_white": {"name": "Test", "price_per_area": 1500, "category": "laminate"},
    })
    app.dependency_overrides[get_material_catalog] = lambda: catalog
    data = client.post("/api/calculator/calculate", json=_calc_body()).json()["data"]
    assert data["materialCost"] == 24600.0
    assert data["totalCost"] == 49200.0


# ============================================================
# Furniture templates
# ============================================================

def test_list_templates(client):
    body = client.get("/api/furniture/templates").json()
    assert body["success"] is True
    assert set(body["data"]["templates"]) == {"cabinet", "kitchen", "table", "chair", "bed", "shelf"}


def test_get_template(client):
    template = client.get("/api/furniture/templates/kitchen").json()["data"]["template"]
    assert template["defaultDimensions"] == {"width": 3000, "height": 850, "depth": 600}
    assert template["components"][0]["type"] == "cabinet"
    assert client.get("/api/furniture/templates/sofa").status_code == 404


def test_furniture_calculate(client):
    response = client.post("/api/furniture/calculate", json={
        "type": "cabinet",
        "dimensions": {"width": 800, "height": 2000, "depth": 600},
        "materials": [{"name": "Задняя стенка", "type": "mdf", "thickness": 4, "cost": 1000}],
        "settings": {"joinery": "dado", "finish": "varnish"},
    })
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["totalCost"] == 1600.0
    assert data["estimatedTime"] == 6.5
    assert len(data["materials"]) == 6


def test_furniture_calculate_unknown_type_is_400(client):
    response = client.post("/api/furniture/calculate", json={
        "type": "sofa",
        "dimensions": {"width": 800, "height": 2000, "depth": 600},
    })
    assert response.status_code == 400
    assert response.json()["success"] is False


# ============================================================
# Design validation
# ============================================================

def test_design_validate(client):
    response = client.post("/api/design/validate", json={
        "project": {
            "dimensions": {"width": 250, "height": 2600, "depth": 400},
            "materials": [{"name": "Дуб", "cost": 5000}],
            "settings": {"joinery": "butt"},
        },
    })
    assert response.status_code == 200
    validation = response.json()["data"]["validation"]
    assert validation["isValid"] is False
    assert validation["errors"] == ["Width is too small for practical use"]
    assert validation["warnings"] == ["Height may be too tall for standard rooms"]


def test_design_validate_requires_project(client):
    response = client.post("/api/design/validate", json={})
    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["error"] == "InvalidRequest"
    assert body["field"] == "project"


# ============================================================
# Error envelope
# ============================================================

def test_calculate_overflowing_dimensions_is_400(client):
    huge = {"width": 1e200, "height": 1e200, "depth": 1e200}
    response = client.post("/api/calculator/calculate", json=_calc_body(dimensions=huge))
    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["error"] == "InvalidDimensions"
    assert body["field"] == "dimensions"


@pytest.mark.parametrize("dimensions", [[800, 2000, 600], "800x2000x600"])
def test_calculate_dimensions_wrong_shape_is_400(client, dimensions):
    response = client.post("/api/calculator/calculate", json=_calc_body(dimensions=dimensions))
    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["error"] == "InvalidDimensions"
    assert body["field"] == "dimensions"


def test_calculate_wrong_field_type_is_400(client):
    response = client.post("/api/calculator/calculate", json=_calc_body(furnitureType=5))
    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["error"] == "InvalidRequest"
    assert body["field"] == "furnitureType"
    assert "detail" not in body


def test_furniture_calculate_wrong_shape_dimensions_is_400(client):
    response = client.post("/api/furniture/calculate", json={
        "type": "cabinet",
        "dimensions": [800, 2000, 600],
    })
    assert response.status_code == 400
    assert response.json()["error"] == "InvalidDimensions"


def test_unexpected_error_hides_internals():
    def broken_catalog():
        raise RuntimeError("secret internal detail")

    app.dependency_overrides[get_material_catalog] = broken_catalog
    try:
        with TestClient(app, raise_server_exceptions=False) as test_client:
            response = test_client.get("/api/calculator/materials")
    finally:
        app.dependency_overrides.clear()
    assert response.status_code == 500
    body = response.json()
    assert body == {"success": False, "message": "Internal server error", "error": "InternalError"}
