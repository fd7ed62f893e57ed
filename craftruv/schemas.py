"""
Request bodies for the HTTP layer.

Dimensions stay loosely typed here so that missing, non-numeric or wrongly
shaped sizes reach the calculators and come back as InvalidDimensions.
Any other malformed body is answered by the RequestValidationError handler.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, Field

from .models import EstimateOptions


class AddOnSelection(BaseModel):
    delivery: bool = True
    assembly: bool = True
    warranty: bool = True

    def to_options(self) -> EstimateOptions:
        return EstimateOptions(
            include_delivery=self.delivery,
            include_assembly=self.assembly,
            include_warranty=self.warranty,
        )


class CalculateRequest(BaseModel):
    furniture_type: Optional[str] = Field(None, alias="furnitureType")
    material: Optional[str] = None
    dimensions: Any = None
    options: Optional[AddOnSelection] = None

    class Config:
        populate_by_name = True


class ComponentMaterial(BaseModel):
    name: str
    type: Optional[str] = None
    thickness: Optional[float] = None
    cost: Optional[float] = Field(None, ge=0)  # per m²


class FurnitureSettings(BaseModel):
    joinery: Optional[str] = None
    finish: Optional[str] = None


class FurnitureCalculateRequest(BaseModel):
    type: str
    dimensions: Any = None
    materials: List[ComponentMaterial] = []
    settings: FurnitureSettings = FurnitureSettings()


class ProjectMaterial(BaseModel):
    name: Optional[str] = None
    cost: float = 0.0


class ProjectDimensions(BaseModel):
    width: float = Field(ge=0)
    height: float = Field(ge=0)
    depth: float = Field(0.0, ge=0)


class DesignProject(BaseModel):
    dimensions: ProjectDimensions
    materials: List[ProjectMaterial] = []
    settings: FurnitureSettings = FurnitureSettings()


class DesignValidateRequest(BaseModel):
    project: DesignProject
