"""
Cost estimator: price breakdown for one piece of corpus furniture.

Pure math over injected, read-only catalogs. No I/O, no hidden state:
identical inputs always give identical CostEstimate values.

    outer area (m²) × 2.5 internal parts factor = adjusted area
    material = adjusted area × material price per m²
    labor    = adjusted area × LABOR_RATE
    total    = (material + labor) × furniture type multiplier
    add-ons  = fixed fractions of total (delivery, assembly, warranty)
"""

import logging
from typing import Any, Optional

from ..catalogs import FurnitureTypeCatalog, MaterialCatalog
from ..exceptions import FurnitureTypeNotFound, MaterialNotFound, UnknownFurnitureType, UnknownMaterial
from ..models import AddOn, CostEstimate, EstimateOptions
from .base import BaseCalculator

logger = logging.getLogger(__name__)


class CostEstimator(BaseCalculator):

    INTERNAL_PARTS_FACTOR = 2.5   # shelves/partitions on top of the outer box
    LABOR_RATE = 1500.0           # per m² of adjusted area
    ADD_ON_RATES = {
        AddOn.DELIVERY: 0.05,
        AddOn.ASSEMBLY: 0.10,
        AddOn.WARRANTY: 0.02,
    }

    def __init__(self, materials: MaterialCatalog, furniture_types: FurnitureTypeCatalog):
        self.materials = materials
        self.furniture_types = furniture_types

    def estimate(self, furniture_type_id: Optional[str], material_id: Optional[str],
                 dimensions: Any, options: Optional[EstimateOptions] = None) -> CostEstimate:
        """
        Build a CostEstimate or raise an EstimationError subclass:
        InvalidDimensions, UnknownMaterial, UnknownFurnitureType.

        dimensions may be a Dimensions instance or a {width, height, depth} mapping in mm.
        """
        options = options or EstimateOptions()
        dims = self.parse_dimensions(dimensions)

        try:
            material = self.materials.get(material_id)
        except MaterialNotFound:
            raise UnknownMaterial(f"Material not found: {material_id}", field="material") from None
        try:
            furniture_type = self.furniture_types.get(furniture_type_id)
        except FurnitureTypeNotFound:
            raise UnknownFurnitureType(
                f"Furniture type not found: {furniture_type_id}", field="furnitureType",
            ) from None

        surface_area = self.mm2_to_m2(self.box_surface_mm2(dims))
        adjusted_area = surface_area * self.INTERNAL_PARTS_FACTOR

        material_cost = adjusted_area * material.price_per_area
        labor_cost = adjusted_area * self.LABOR_RATE
        total_cost = (material_cost + labor_cost) * furniture_type.base_multiplier

        add_ons = {
            add_on: total_cost * self.ADD_ON_RATES[add_on]
            for add_on in options.included()
        }
        total_with_add_ons = total_cost
        for amount in add_ons.values():
            total_with_add_ons += amount
        self.ensure_finite(total_with_add_ons)

        logger.debug(
            "Estimated %s/%s %sx%sx%s mm: total=%.2f",
            furniture_type.id, material.id, dims.width, dims.height, dims.depth, total_cost,
        )

        return CostEstimate(
            furniture_type=furniture_type,
            material=material,
            dimensions=dims,
            surface_area=surface_area,
            adjusted_area=adjusted_area,
            material_cost=material_cost,
            labor_cost=labor_cost,
            total_cost=total_cost,
            add_ons=add_ons,
            total_with_add_ons=total_with_add_ons,
        )
