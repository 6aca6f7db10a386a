"""ClassifyWasteCommand 테스트."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from waste.application.classify.commands import (
    ClassifyWasteCommand,
    ClassifyWasteRequest,
)
from waste.application.classify.services import VisionClassifier
from waste.application.common.exceptions import InvalidInputError, UpstreamUnavailableError
from waste.domain.exceptions import CategoryNotFoundError
from waste.domain.value_objects import (
    ClassificationPayload,
    FallbackClassification,
    ParsedClassification,
)


def parsed(category: str, confidence: float = 0.92, items=("water bottle",)):
    return ParsedClassification(
        payload=ClassificationPayload(
            category=category,
            detected_items=tuple(items),
            confidence=confidence,
            reasoning="Clear PET bottle.",
        )
    )


@pytest.fixture
def vision_classifier() -> MagicMock:
    classifier = MagicMock(spec=VisionClassifier)
    classifier.classify = AsyncMock(return_value=parsed("Plastic"))
    return classifier


@pytest.fixture
def command(vision_classifier, category_reader, history_repository) -> ClassifyWasteCommand:
    return ClassifyWasteCommand(
        vision_classifier=vision_classifier,
        category_reader=category_reader,
        history_repository=history_repository,
    )


class TestClassifyWasteCommand:
    """분류 오케스트레이션 테스트."""

    @pytest.mark.asyncio
    async def test_success_creates_one_record(self, command, history_repository) -> None:
        response = await command.execute(
            ClassifyWasteRequest(model="gpt-4o", image_url="https://example.com/bottle.jpg")
        )

        assert len(history_repository.records) == 1
        record = history_repository.records[response.history_id]
        assert record.image_url == "https://example.com/bottle.jpg"
        assert record.detected_items == ["water bottle"]
        assert record.confidence_score == 0.92
        assert record.waste_category_id == 1

        view = response.classification
        assert view.id == response.history_id
        assert view.category == "Plastic"
        assert view.color_code == "#000001"
        assert view.disposal_instructions == "Plastic disposal"
        assert view.confidence == 92
        assert view.reasoning == "Clear PET bottle."

    @pytest.mark.asyncio
    async def test_inline_image_stores_placeholder(self, command, history_repository) -> None:
        response = await command.execute(
            ClassifyWasteRequest(model="gpt-4o", image_base64="aGVsbG8=")
        )

        assert history_repository.records[response.history_id].image_url == "base64_image"

    @pytest.mark.asyncio
    async def test_both_inputs_persist_url(
        self, command, vision_classifier, history_repository
    ) -> None:
        response = await command.execute(
            ClassifyWasteRequest(
                model="gpt-4o",
                image_base64="aGVsbG8=",
                image_url="https://example.com/bottle.jpg",
            )
        )

        image = vision_classifier.classify.call_args.args[0]
        assert image.is_inline is True
        assert (
            history_repository.records[response.history_id].image_url
            == "https://example.com/bottle.jpg"
        )

    @pytest.mark.asyncio
    async def test_category_lookup_is_case_insensitive(
        self, command, vision_classifier
    ) -> None:
        vision_classifier.classify.return_value = parsed("paper & cardboard")

        response = await command.execute(
            ClassifyWasteRequest(model="gpt-4o", image_base64="aGVsbG8=")
        )

        assert response.classification.category == "Paper & Cardboard"

    @pytest.mark.asyncio
    async def test_fallback_outcome_is_persisted(
        self, command, vision_classifier, history_repository
    ) -> None:
        vision_classifier.classify.return_value = FallbackClassification(raw_text="no idea")

        response = await command.execute(
            ClassifyWasteRequest(model="gpt-4o", image_base64="aGVsbG8=")
        )

        view = response.classification
        assert view.category == "General/Mixed Waste"
        assert view.detected_items == ["Unknown item"]
        assert view.confidence == 50
        assert view.reasoning == "no idea"
        assert len(history_repository.records) == 1

    @pytest.mark.asyncio
    async def test_missing_input_creates_no_record(
        self, command, vision_classifier, history_repository
    ) -> None:
        with pytest.raises(InvalidInputError):
            await command.execute(ClassifyWasteRequest(model="gpt-4o"))

        vision_classifier.classify.assert_not_called()
        assert history_repository.records == {}

    @pytest.mark.asyncio
    async def test_upstream_failure_creates_no_record(
        self, command, vision_classifier, history_repository
    ) -> None:
        vision_classifier.classify.side_effect = UpstreamUnavailableError("gpt")

        with pytest.raises(UpstreamUnavailableError):
            await command.execute(ClassifyWasteRequest(model="gpt-4o", image_base64="aGVsbG8="))

        assert history_repository.records == {}

    @pytest.mark.asyncio
    async def test_unknown_category_creates_no_record(
        self, command, vision_classifier, history_repository
    ) -> None:
        vision_classifier.classify.return_value = parsed("Textiles")

        with pytest.raises(CategoryNotFoundError) as exc_info:
            await command.execute(ClassifyWasteRequest(model="gpt-4o", image_base64="aGVsbG8="))

        assert exc_info.value.category == "Textiles"
        assert history_repository.records == {}
