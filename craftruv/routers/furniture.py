"""
Furniture template endpoints: template catalog and per-component breakdown.
"""

from fastapi import APIRouter

from ..catalogs.templates import get_template, list_templates
from ..dependencies import ComponentCalculatorDep
from ..schemas import FurnitureCalculateRequest

router = APIRouter(prefix="/furniture", tags=["furniture"])


@router.get("/templates")
def templates():
    return {
        "success": True,
        "data": {"templates": {t.id: t.to_dict() for t in list_templates()}},
    }


@router.get("/templates/{template_type}")
def template(template_type: str):
    return {"success": True, "data": {"template": get_template(template_type).to_dict()}}


@router.post("/calculate")
def calculate(request: FurnitureCalculateRequest, calculator: ComponentCalculatorDep):
    data = calculator.calculate(
        request.type,
        request.dimensions,
        materials=[m.model_dump() for m in request.materials],
        settings=request.settings.model_dump(),
    )
    return {"success": True, "data": data}
