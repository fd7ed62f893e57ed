"""
Calculator endpoints: material and furniture-type catalogs, price estimate.
"""

from datetime import datetime, timezone

from fastapi import APIRouter

from ..config import settings
from ..dependencies import CostEstimatorDep, FurnitureTypeCatalogDep, MaterialCatalogDep
from ..schemas import CalculateRequest

router = APIRouter(prefix="/calculator", tags=["calculator"])


@router.get("/materials")
def list_materials(materials: MaterialCatalogDep):
    return {"success": True, "data": materials.to_dict()}


@router.get("/materials/{material_id}")
def get_material(material_id: str, materials: MaterialCatalogDep):
    return {"success": True, "data": materials.get(material_id).to_dict()}


@router.get("/furniture-types")
def list_furniture_types(furniture_types: FurnitureTypeCatalogDep):
    return {"success": True, "data": furniture_types.to_dict()}


@router.get("/furniture-types/{type_id}")
def get_furniture_type(type_id: str, furniture_types: FurnitureTypeCatalogDep):
    return {"success": True, "data": furniture_types.get(type_id).to_dict()}


@router.post("/calculate")
def calculate(request: CalculateRequest, estimator: CostEstimatorDep):
    """Price a piece of furniture. Validation failures come back as 400."""
    options = request.options.to_options() if request.options else None
    estimate = estimator.estimate(
        request.furniture_type, request.material, request.dimensions, options,
    )
    data = estimate.to_display()
    data["currency"] = settings.CURRENCY
    data["calculationDate"] = datetime.now(timezone.utc).isoformat()
    return {"success": True, "data": data}
