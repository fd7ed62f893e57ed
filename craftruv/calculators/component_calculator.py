"""
Component calculator: per-part material breakdown for a furniture template.

Areas come from the template's component list and the outer dimensions (mm).
Each part is priced with the material the client picked for it by name;
parts without a pick fall back to unpriced 18 mm wood.
"""

from typing import Any, List, Mapping, Optional

from ..catalogs.templates import FurnitureTemplate, TemplateComponent, get_template
from ..exceptions import TemplateNotFound, UnknownFurnitureType
from ..models import ComponentKind, Dimensions
from .base import BaseCalculator

DEFAULT_COMPONENT_MATERIAL = {"type": "wood", "thickness": 18, "cost": 0.0}

# Which two box dimensions span a panel, by placement
PANEL_SPANS = {
    "back": ("width", "height"),
    "backsplash": ("width", "height"),
    "backrest": ("width", "height"),
    "headboard": ("width", "height"),
    "side": ("depth", "height"),
    "side_rail": ("depth", "height"),
    "top": ("width", "depth"),
    "bottom": ("width", "depth"),
    "worktop": ("width", "depth"),
    "tabletop": ("width", "depth"),
    "seat": ("width", "depth"),
    "base": ("width", "depth"),
}

JOINERY_FACTORS = {
    "dovetail": 2.0,
    "dado": 1.5,
    "pocket": 1.2,
}
HOURS_PER_COMPONENT = 0.5
FINISHING_HOURS = 2.0


class ComponentCalculator(BaseCalculator):

    def calculate(self, template_id: str, dimensions: Any,
                  materials: Optional[List[Mapping]] = None,
                  settings: Optional[Mapping] = None) -> dict:
        """
        Returns {"materials": [...], "totalCost", "estimatedTime", "template"}.
        Raises UnknownFurnitureType for an unknown template and InvalidDimensions.
        """
        try:
            template = get_template(template_id)
        except TemplateNotFound:
            raise UnknownFurnitureType(f"Invalid furniture type: {template_id}", field="type") from None
        dims = self.parse_dimensions(dimensions)
        settings = settings or {}

        picks = {m.get("name"): m for m in (materials or [])}
        items = [self._price_component(c, dims, picks.get(c.name)) for c in template.components]
        total_cost = round(sum(item["cost"] for item in items), 2)

        return {
            "materials": items,
            "totalCost": total_cost,
            "estimatedTime": self.estimate_construction_time(template, settings),
            "template": template.to_dict(),
        }

    def component_area(self, component: TemplateComponent, dims: Dimensions) -> float:
        """Area of one piece in m². Parts that are not sheet goods have no area."""
        if component.kind == ComponentKind.PANEL:
            span = PANEL_SPANS.get(component.placement)
            if span is None:
                return 0.0
            a, b = span
            return self.mm2_to_m2(getattr(dims, a) * getattr(dims, b))
        if component.kind == ComponentKind.SHELF:
            return self.mm2_to_m2(dims.width * dims.depth)
        if component.kind == ComponentKind.DOOR:
            return self.mm2_to_m2(dims.depth * dims.height)
        return 0.0

    def estimate_construction_time(self, template: FurnitureTemplate, settings: Mapping) -> float:
        """Hours: 0.5 per component, scaled by joinery, plus 2 h for any finish."""
        hours = len(template.components) * HOURS_PER_COMPONENT
        hours *= JOINERY_FACTORS.get(settings.get("joinery"), 1.0)
        finish = settings.get("finish")
        if finish and finish != "none":
            hours += FINISHING_HOURS
        return round(hours, 1)

    def _price_component(self, component: TemplateComponent, dims: Dimensions,
                         pick: Optional[Mapping]) -> dict:
        material = dict(DEFAULT_COMPONENT_MATERIAL)
        if pick:
            material.update({k: v for k, v in pick.items() if v is not None})

        total_area = self.ensure_finite(self.component_area(component, dims) * component.quantity)
        cost = self.ensure_finite(float(material.get("cost") or 0) * total_area)
        return {
            "name": component.name,
            "componentType": component.kind.value,
            "type": material["type"],
            "thickness": material["thickness"],
            "area": round(total_area, 4),
            "quantity": component.quantity,
            "cost": round(cost, 2),
            "unit": "m2",
        }
