"""FastAPI dependency injection for catalogs and calculators."""

from functools import lru_cache
from typing import Annotated, Tuple

from fastapi import Depends

from .calculators.component_calculator import ComponentCalculator
from .calculators.cost_estimator import CostEstimator
from .catalogs import FurnitureTypeCatalog, MaterialCatalog, load_catalogs
from .config import settings
from .design_validator import DesignValidator


@lru_cache(maxsize=1)
def get_catalogs() -> Tuple[MaterialCatalog, FurnitureTypeCatalog]:
    """Process-wide catalogs, built on first use and never rebuilt."""
    return load_catalogs(settings.CATALOG_PATH)


def get_material_catalog() -> MaterialCatalog:
    return get_catalogs()[0]


def get_furniture_type_catalog() -> FurnitureTypeCatalog:
    return get_catalogs()[1]


def get_cost_estimator(
    materials: Annotated[MaterialCatalog, Depends(get_material_catalog)],
    furniture_types: Annotated[FurnitureTypeCatalog, Depends(get_furniture_type_catalog)],
) -> CostEstimator:
    return CostEstimator(materials, furniture_types)


def get_component_calculator() -> ComponentCalculator:
    return ComponentCalculator()


def get_design_validator() -> DesignValidator:
    return DesignValidator()


MaterialCatalogDep = Annotated[MaterialCatalog, Depends(get_material_catalog)]
FurnitureTypeCatalogDep = Annotated[FurnitureTypeCatalog, Depends(get_furniture_type_catalog)]
CostEstimatorDep = Annotated[CostEstimator, Depends(get_cost_estimator)]
ComponentCalculatorDep = Annotated[ComponentCalculator, Depends(get_component_calculator)]
DesignValidatorDep = Annotated[DesignValidator, Depends(get_design_validator)]
