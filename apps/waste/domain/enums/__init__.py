"""Waste Domain Enums."""

from waste.domain.enums.category_name import WasteCategoryName

__all__ = ["WasteCategoryName"]
