from typing import Mapping, Optional

from ..exceptions import MaterialNotFound
from ..models import Material, MaterialCategory
from .base import ReadOnlyCatalog

# Board and facing prices per m² (RUB). Sheet goods from the calculator price list,
# glass and metal from the material selector.
DEFAULT_MATERIALS = {
    "oak": {"name": "Дуб", "price_per_area": 2500, "category": MaterialCategory.WOOD},
    "pine": {"name": "Сосна", "price_per_area": 1200, "category": MaterialCategory.WOOD},
    "birch": {"name": "Береза", "price_per_area": 1800, "category": MaterialCategory.WOOD},
    "laminate_white": {"name": "Ламинированное ДСП белое", "price_per_area": 800, "category": MaterialCategory.LAMINATE},
    "laminate_oak": {"name": "Ламинированное ДСП под дуб", "price_per_area": 950, "category": MaterialCategory.LAMINATE},
    "veneer_oak": {"name": "Шпон дуба", "price_per_area": 1500, "category": MaterialCategory.VENEER},
    "mdf_white": {"name": "МДФ белое", "price_per_area": 600, "category": MaterialCategory.MDF},
    "mdf_colored": {"name": "МДФ цветное", "price_per_area": 750, "category": MaterialCategory.MDF},
    "glass_clear": {"name": "Стекло прозрачное", "price_per_area": 4000, "category": MaterialCategory.GLASS},
    "metal_chrome": {"name": "Металл хром", "price_per_area": 6000, "category": MaterialCategory.METAL},
}


class MaterialCatalog(ReadOnlyCatalog[Material]):
    not_found = MaterialNotFound

    @classmethod
    def from_mapping(cls, table: Mapping[str, Mapping]) -> "MaterialCatalog":
        """Build from {id: {name, price_per_area, category}}. Raises on invalid rows."""
        return cls(Material(id=material_id, **row) for material_id, row in table.items())


def build_material_catalog(table: Optional[Mapping[str, Mapping]] = None) -> MaterialCatalog:
    return MaterialCatalog.from_mapping(DEFAULT_MATERIALS if table is None else table)
