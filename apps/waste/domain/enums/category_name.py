"""Waste Category Name Enum."""

from enum import Enum


class WasteCategoryName(str, Enum):
    """Vision 모델에 허용되는 폐기물 카테고리 (닫힌 집합).

    DB에 시드되는 waste_categories.name 값과 일치해야 합니다.
    """

    PLASTIC = "Plastic"
    PAPER = "Paper & Cardboard"
    GLASS = "Glass"
    ORGANIC = "Organic/Food Waste"
    METAL = "Metal"
    ELECTRONICS = "Electronics"
    HAZARDOUS = "Hazardous Waste"
    GENERAL = "General/Mixed Waste"

    @classmethod
    def values(cls) -> list[str]:
        """프롬프트에 나열되는 순서대로 카테고리명 반환."""
        return [member.value for member in cls]
