"""
Static configuration tables: loaded once at startup, read-only afterwards.
"""

from .furniture_types import DEFAULT_FURNITURE_TYPES, FurnitureTypeCatalog, build_furniture_type_catalog
from .loader import load_catalogs
from .materials import DEFAULT_MATERIALS, MaterialCatalog, build_material_catalog

__all__ = [
    "DEFAULT_FURNITURE_TYPES",
    "DEFAULT_MATERIALS",
    "FurnitureTypeCatalog",
    "MaterialCatalog",
    "build_furniture_type_catalog",
    "build_material_catalog",
    "load_catalogs",
]
