from fastapi import APIRouter

from ..dependencies import DesignValidatorDep
from ..schemas import DesignValidateRequest

router = APIRouter(prefix="/design", tags=["design"])


@router.post("/validate")
def validate(request: DesignValidateRequest, validator: DesignValidatorDep):
    """Rule-based checks on a project."""
    validation = validator.validate(request.project.model_dump())
    return {"success": True, "data": {"validation": validation}}
