"""
Design validator: rule-based sanity checks on a furniture project.

Errors make the design invalid; warnings and suggestions do not.
"""

from typing import Mapping


class DesignValidator:

    MIN_WIDTH_MM = 300
    MAX_HEIGHT_MM = 2500
    HIGH_COST_THRESHOLD = 100_000
    WIDE_PIECE_MM = 2000
    MIN_MATERIALS_FOR_WIDE_PIECE = 3
    BUTT_JOINT_MAX_WIDTH_MM = 1000

    def validate(self, project: Mapping) -> dict:
        """
        Checks dimensions, material cost and joinery of a project dict:
        {"dimensions": {width, height, depth}, "materials": [{cost}], "settings": {joinery}}
        """
        dimensions = project.get("dimensions") or {}
        materials = project.get("materials") or []
        settings = project.get("settings") or {}

        width = float(dimensions.get("width") or 0)
        height = float(dimensions.get("height") or 0)

        errors = []
        warnings = []
        suggestions = []

        if width < self.MIN_WIDTH_MM:
            errors.append("Width is too small for practical use")
        if height > self.MAX_HEIGHT_MM:
            warnings.append("Height may be too tall for standard rooms")

        total_cost = sum(float(m.get("cost") or 0) for m in materials)
        if total_cost > self.HIGH_COST_THRESHOLD:
            warnings.append("Total cost is quite high, consider alternatives")

        if width > self.WIDE_PIECE_MM and len(materials) < self.MIN_MATERIALS_FOR_WIDE_PIECE:
            errors.append("Large furniture needs adequate structural support")

        if settings.get("joinery") == "butt" and width > self.BUTT_JOINT_MAX_WIDTH_MM:
            suggestions.append("Consider stronger joinery for large pieces")

        return {
            "isValid": not errors,
            "errors": errors,
            "warnings": warnings,
            "suggestions": suggestions,
        }
