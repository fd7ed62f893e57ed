"""
Furniture template registry: maps template ids to their component lists.

Each component knows its kind (panel, shelf, door, ...) and, for panels,
where it sits in the box; the component calculator derives its area from that.
"""

from typing import Dict, List

from pydantic import BaseModel

from ..exceptions import TemplateNotFound
from ..models import ComponentKind, Dimensions


class TemplateComponent(BaseModel):
    name: str
    kind: ComponentKind
    placement: str = ""  # back | side | top | bottom | worktop | ... (panels only)
    required: bool = True
    quantity: int = 1

    class Config:
        frozen = True

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "type": self.kind.value,
            "placement": self.placement or None,
            "required": self.required,
            "quantity": self.quantity,
        }


class FurnitureTemplate(BaseModel):
    id: str
    name: str
    description: str
    default_dimensions: Dimensions
    components: List[TemplateComponent]

    class Config:
        frozen = True

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "defaultDimensions": self.default_dimensions.to_dict(),
            "components": [c.to_dict() for c in self.components],
        }


def _panel(name, placement, required=True, quantity=1):
    return TemplateComponent(name=name, kind=ComponentKind.PANEL, placement=placement,
                             required=required, quantity=quantity)


def _part(name, kind, required=True, quantity=1):
    return TemplateComponent(name=name, kind=kind, required=required, quantity=quantity)


TEMPLATE_REGISTRY: Dict[str, FurnitureTemplate] = {
    "cabinet": FurnitureTemplate(
        id="cabinet",
        name="Шкаф",
        description="Универсальный шкаф с настраиваемыми полками",
        default_dimensions=Dimensions(width=800, height=2000, depth=600),
        components=[
            _panel("Задняя стенка", "back"),
            _panel("Боковые стенки", "side", quantity=2),
            _panel("Верхняя панель", "top"),
            _panel("Нижняя панель", "bottom"),
            _part("Полки", ComponentKind.SHELF, required=False, quantity=3),
            _part("Двери", ComponentKind.DOOR, required=False, quantity=2),
        ],
    ),
    "kitchen": FurnitureTemplate(
        id="kitchen",
        name="Кухня",
        description="Кухонный гарнитур с рабочей поверхностью",
        default_dimensions=Dimensions(width=3000, height=850, depth=600),
        components=[
            _part("Навесные шкафы", ComponentKind.CABINET),
            _part("Напольные шкафы", ComponentKind.CABINET),
            _panel("Рабочая поверхность", "worktop"),
            _panel("Фартук", "backsplash", required=False),
        ],
    ),
    "table": FurnitureTemplate(
        id="table",
        name="Стол",
        description="Стол с ножками и столешницей",
        default_dimensions=Dimensions(width=1200, height=750, depth=800),
        components=[
            _panel("Столешница", "tabletop"),
            _part("Ножки", ComponentKind.LEG, quantity=4),
        ],
    ),
    "chair": FurnitureTemplate(
        id="chair",
        name="Стул",
        description="Стул с сиденьем и спинкой",
        default_dimensions=Dimensions(width=450, height=850, depth=550),
        components=[
            _panel("Сиденье", "seat"),
            _panel("Спинка", "backrest"),
            _part("Ножки", ComponentKind.LEG, quantity=4),
        ],
    ),
    "bed": FurnitureTemplate(
        id="bed",
        name="Кровать",
        description="Кровать с изголовьем и основанием",
        default_dimensions=Dimensions(width=1600, height=2000, depth=600),
        components=[
            _panel("Основание", "base"),
            _panel("Изголовье", "headboard", required=False),
            _panel("Боковые панели", "side_rail", required=False, quantity=2),
        ],
    ),
    "shelf": FurnitureTemplate(
        id="shelf",
        name="Полка",
        description="Настенная полка для книг и декора",
        default_dimensions=Dimensions(width=800, height=200, depth=300),
        components=[
            _part("Полка", ComponentKind.SHELF),
            _part("Кронштейны", ComponentKind.BRACKET, quantity=2),
        ],
    ),
}


def has_template(template_id: str) -> bool:
    return template_id in TEMPLATE_REGISTRY


def get_template(template_id: str) -> FurnitureTemplate:
    """Returns the template for an id, or raises TemplateNotFound."""
    if not has_template(template_id):
        raise TemplateNotFound(template_id)
    return TEMPLATE_REGISTRY[template_id]


def list_templates() -> List[FurnitureTemplate]:
    """All templates in registry order."""
    return list(TEMPLATE_REGISTRY.values())
