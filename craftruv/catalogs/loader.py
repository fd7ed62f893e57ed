"""
Catalog loading with fallback chain:
1. JSON file at settings.CATALOG_PATH (shop price list)
2. DEFAULT_MATERIALS / DEFAULT_FURNITURE_TYPES built into this package

The file may override either table or both:

    {"materials": {"oak": {"name": "Дуб", "pricePerArea": 2500, "category": "wood"}},
     "furniture_types": {"cabinet": {"name": "Шкаф", "baseMultiplier": 1.0}}}

Keys may be camelCase (as served by the API) or snake_case.
"""

import json
import logging
import os
from typing import Optional, Tuple

from .furniture_types import FurnitureTypeCatalog, build_furniture_type_catalog
from .materials import MaterialCatalog, build_material_catalog

logger = logging.getLogger(__name__)

_KEY_ALIASES = {
    "pricePerArea": "price_per_area",
    "pricePerSqm": "price_per_area",
    "baseMultiplier": "base_multiplier",
    "furnitureTypes": "furniture_types",
}


def _normalize(row: dict) -> dict:
    return {_KEY_ALIASES.get(k, k): v for k, v in row.items()}


def _read_catalog_file(path: str) -> Optional[dict]:
    if not path:
        return None
    if not os.path.exists(path):
        logger.info("Catalog file %s not found, using built-in catalogs", path)
        return None
    with open(path, encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Catalog file {path} is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Catalog file {path} must contain a JSON object")
    return _normalize(data)


def load_catalogs(path: str = "") -> Tuple[MaterialCatalog, FurnitureTypeCatalog]:
    """Build both catalogs once. Invalid rows raise so a broken price list fails startup."""
    data = _read_catalog_file(path) or {}

    materials_table = data.get("materials")
    if materials_table is not None:
        materials_table = {k: _normalize(v) for k, v in materials_table.items()}
    types_table = data.get("furniture_types")
    if types_table is not None:
        types_table = {k: _normalize(v) for k, v in types_table.items()}

    materials = build_material_catalog(materials_table)
    furniture_types = build_furniture_type_catalog(types_table)

    logger.info(
        "Loaded %d materials (%s) and %d furniture types (%s)",
        len(materials), "file" if materials_table is not None else "defaults",
        len(furniture_types), "file" if types_table is not None else "defaults",
    )
    return materials, furniture_types
