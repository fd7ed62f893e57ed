from typing import Mapping, Optional

from ..exceptions import FurnitureTypeNotFound
from ..models import FurnitureType
from .base import ReadOnlyCatalog

# baseMultiplier reflects assembly complexity relative to a plain cabinet
DEFAULT_FURNITURE_TYPES = {
    "cabinet": {"name": "Шкаф", "description": "Корпусный шкаф с дверцами", "base_multiplier": 1.0},
    "kitchen": {"name": "Кухонный гарнитур", "description": "Кухонные шкафы с фурнитурой", "base_multiplier": 1.3},
    "wardrobe": {"name": "Гардероб", "description": "Встроенный гардероб", "base_multiplier": 1.1},
    "bookshelf": {"name": "Книжный шкаф", "description": "Полки для книг", "base_multiplier": 0.8},
    "tv_stand": {"name": "ТВ-тумба", "description": "Тумба под телевизор", "base_multiplier": 0.9},
}


class FurnitureTypeCatalog(ReadOnlyCatalog[FurnitureType]):
    not_found = FurnitureTypeNotFound

    @classmethod
    def from_mapping(cls, table: Mapping[str, Mapping]) -> "FurnitureTypeCatalog":
        """Build from {id: {name, description, base_multiplier}}. Raises on invalid rows."""
        return cls(FurnitureType(id=type_id, **row) for type_id, row in table.items())


def build_furniture_type_catalog(table: Optional[Mapping[str, Mapping]] = None) -> FurnitureTypeCatalog:
    return FurnitureTypeCatalog.from_mapping(DEFAULT_FURNITURE_TYPES if table is None else table)
