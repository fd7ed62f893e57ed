"""
Shared helpers for the furniture calculators.

Dimensions are always millimetres; areas leave this module in square metres.
"""

import math
from typing import Any, Mapping

from ..exceptions import InvalidDimensions
from ..models import Dimensions

MM2_PER_M2 = 1_000_000
DIMENSION_FIELDS = ("width", "height", "depth")


class BaseCalculator:
    """All furniture calculators inherit from this."""

    def parse_dimension(self, name: str, value: Any) -> float:
        """
        Parse one size in mm. Accepts numbers and numeric strings ("800", " 600.5 ").
        Missing, non-numeric, non-finite, zero and negative values raise InvalidDimensions.
        """
        if value is None or value == "":
            raise InvalidDimensions(f"Dimension '{name}' is required", field=name)
        if isinstance(value, bool):
            raise InvalidDimensions(f"Dimension '{name}' must be a number", field=name)
        try:
            number = float(str(value).strip()) if isinstance(value, str) else float(value)
        except (ValueError, TypeError):
            raise InvalidDimensions(f"Dimension '{name}' must be a number", field=name) from None
        if not math.isfinite(number):
            raise InvalidDimensions(f"Dimension '{name}' must be finite", field=name)
        if number <= 0:
            raise InvalidDimensions(f"Dimension '{name}' must be greater than zero", field=name)
        return number

    def parse_dimensions(self, raw: Any) -> Dimensions:
        """Validate a {width, height, depth} mapping (or Dimensions) into Dimensions."""
        if isinstance(raw, Dimensions):
            return raw
        if not isinstance(raw, Mapping):
            raise InvalidDimensions(
                "Dimensions must include width, height and depth", field="dimensions",
            )
        values = {name: self.parse_dimension(name, raw.get(name)) for name in DIMENSION_FIELDS}
        return Dimensions(**values)

    def ensure_finite(self, value: float) -> float:
        """Sizes that are each valid can still overflow once multiplied together."""
        if not math.isfinite(value):
            raise InvalidDimensions("Dimensions are too large to price", field="dimensions")
        return value

    def mm2_to_m2(self, area_mm2: float) -> float:
        return area_mm2 / MM2_PER_M2

    def box_surface_mm2(self, dims: Dimensions) -> float:
        """Outer surface of the closed box: 2wh + 2wd + 2hd."""
        return (
            2 * (dims.width * dims.height)
            + 2 * (dims.width * dims.depth)
            + 2 * (dims.height * dims.depth)
        )
