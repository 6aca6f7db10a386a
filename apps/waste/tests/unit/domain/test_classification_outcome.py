"""Classification Value Object 테스트."""

import pytest

from waste.domain.enums import WasteCategoryName
from waste.domain.value_objects import (
    ClassificationPayload,
    FallbackClassification,
    ParsedClassification,
)


class TestClassificationPayload:
    """ClassificationPayload 테스트."""

    @pytest.mark.parametrize(
        ("confidence", "expected"),
        [(0.0, 0), (0.5, 50), (0.874, 87), (0.875, 88), (0.996, 100), (1.0, 100)],
    )
    def test_confidence_percent(self, confidence: float, expected: int) -> None:
        payload = ClassificationPayload(category="Plastic", confidence=confidence)
        assert payload.confidence_percent == expected
        assert isinstance(payload.confidence_percent, int)

    def test_out_of_range_raises(self) -> None:
        with pytest.raises(ValueError):
            ClassificationPayload(category="Plastic", confidence=1.5)


class TestClassificationOutcome:
    """Parsed / Fallback 태그드 유니온 테스트."""

    def test_parsed_exposes_payload(self) -> None:
        payload = ClassificationPayload(category="Glass", detected_items=("jar",), confidence=0.8)
        outcome = ParsedClassification(payload=payload)

        assert outcome.is_fallback is False
        assert outcome.payload is payload

    def test_fallback_payload(self) -> None:
        outcome = FallbackClassification(raw_text="I think this is a bottle.")

        assert outcome.is_fallback is True
        assert outcome.payload.category == "General/Mixed Waste"
        assert outcome.payload.detected_items == ("Unknown item",)
        assert outcome.payload.confidence == 0.5
        assert outcome.payload.reasoning == "I think this is a bottle."


class TestWasteCategoryName:
    """카테고리 이름 enum 테스트."""

    def test_closed_set(self) -> None:
        assert WasteCategoryName.values() == [
            "Plastic",
            "Paper & Cardboard",
            "Glass",
            "Organic/Food Waste",
            "Metal",
            "Electronics",
            "Hazardous Waste",
            "General/Mixed Waste",
        ]

    def test_str_enum(self) -> None:
        assert WasteCategoryName.GENERAL == "General/Mixed Waste"
