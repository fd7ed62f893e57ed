"""
Domain records for the estimation core.

All records are frozen: catalogs hand out shared instances and estimates
are response values, so nothing here is ever mutated after construction.
"""

import enum
from typing import Dict, List

from pydantic import BaseModel, Field


class MaterialCategory(str, enum.Enum):
    WOOD = "wood"
    LAMINATE = "laminate"
    VENEER = "veneer"
    MDF = "mdf"
    METAL = "metal"
    GLASS = "glass"
    PLASTIC = "plastic"
    FABRIC = "fabric"


class ComponentKind(str, enum.Enum):
    PANEL = "panel"
    SHELF = "shelf"
    DOOR = "door"
    CABINET = "cabinet"
    LEG = "leg"
    BRACKET = "bracket"


class AddOn(str, enum.Enum):
    DELIVERY = "delivery"
    ASSEMBLY = "assembly"
    WARRANTY = "warranty"


class Material(BaseModel):
    id: str
    name: str
    price_per_area: float = Field(gt=0)  # per m²
    category: MaterialCategory

    class Config:
        frozen = True

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "pricePerArea": self.price_per_area,
            "category": self.category.value,
        }


class FurnitureType(BaseModel):
    id: str
    name: str
    description: str = ""
    base_multiplier: float = Field(gt=0)

    class Config:
        frozen = True

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "baseMultiplier": self.base_multiplier,
        }


class Dimensions(BaseModel):
    """Outer box size. Always millimetres."""

    width: float = Field(gt=0, allow_inf_nan=False)
    height: float = Field(gt=0, allow_inf_nan=False)
    depth: float = Field(gt=0, allow_inf_nan=False)

    class Config:
        frozen = True

    def to_dict(self) -> dict:
        return {"width": self.width, "height": self.height, "depth": self.depth}


class EstimateOptions(BaseModel):
    include_delivery: bool = True
    include_assembly: bool = True
    include_warranty: bool = True

    class Config:
        frozen = True

    def included(self) -> List[AddOn]:
        selected = []
        if self.include_delivery:
            selected.append(AddOn.DELIVERY)
        if self.include_assembly:
            selected.append(AddOn.ASSEMBLY)
        if self.include_warranty:
            selected.append(AddOn.WARRANTY)
        return selected


class CostEstimate(BaseModel):
    """Full-precision price breakdown. Use to_display() for rounded output."""

    furniture_type: FurnitureType
    material: Material
    dimensions: Dimensions
    surface_area: float
    adjusted_area: float
    material_cost: float
    labor_cost: float
    total_cost: float
    add_ons: Dict[AddOn, float]
    total_with_add_ons: float

    class Config:
        frozen = True

    def to_display(self) -> dict:
        """Camel-cased response dict with money rounded to 2 decimals."""
        return {
            "furnitureType": self.furniture_type.id,
            "furnitureTypeName": self.furniture_type.name,
            "material": self.material.id,
            "materialName": self.material.name,
            "dimensions": self.dimensions.to_dict(),
            "surfaceArea": round(self.surface_area, 4),
            "adjustedArea": round(self.adjusted_area, 4),
            "materialCost": round(self.material_cost, 2),
            "laborCost": round(self.labor_cost, 2),
            "totalCost": round(self.total_cost, 2),
            "addOns": {k.value: round(v, 2) for k, v in self.add_ons.items()},
            "totalWithAddOns": round(self.total_with_add_ons, 2),
        }
