"""History Command/Query 및 Category Query 테스트."""

import pytest

from waste.application.category.queries import ListCategoriesQuery
from waste.application.history.commands import SubmitFeedbackCommand, SubmitFeedbackRequest
from waste.application.history.queries import GetHistoryEntryQuery, ListHistoryQuery
from waste.domain.exceptions import ClassificationNotFoundError


class TestSubmitFeedbackCommand:
    """피드백 Command 테스트."""

    @pytest.mark.asyncio
    async def test_only_is_correct_keeps_user_feedback(
        self, history_repository, make_record
    ) -> None:
        record = await history_repository.create(make_record(user_feedback="first note"))
        command = SubmitFeedbackCommand(history_repository=history_repository)

        saved = await command.execute(SubmitFeedbackRequest(history_id=record.id, is_correct=True))

        assert saved.is_correct is True
        assert saved.user_feedback == "first note"
        assert history_repository.save_calls == 1

    @pytest.mark.asyncio
    async def test_both_fields(self, history_repository, make_record) -> None:
        record = await history_repository.create(make_record())
        command = SubmitFeedbackCommand(history_repository=history_repository)

        saved = await command.execute(
            SubmitFeedbackRequest(history_id=record.id, is_correct=False, user_feedback="glass")
        )

        assert saved.is_correct is False
        assert saved.user_feedback == "glass"
        assert saved.updated_at > saved.created_at

    @pytest.mark.asyncio
    async def test_unknown_id_raises_without_mutation(
        self, history_repository, make_record
    ) -> None:
        await history_repository.create(make_record())
        command = SubmitFeedbackCommand(history_repository=history_repository)

        with pytest.raises(ClassificationNotFoundError):
            await command.execute(SubmitFeedbackRequest(history_id=999, is_correct=True))

        assert history_repository.save_calls == 0
        assert history_repository.records[1].is_correct is None


class TestListHistoryQuery:
    """이력 목록 Query 테스트."""

    @pytest.mark.asyncio
    async def test_newest_first_with_total(self, history_repository, make_record) -> None:
        for minutes in (0, 10, 5):
            await history_repository.create(make_record(minutes=minutes))
        query = ListHistoryQuery(history_repository=history_repository)

        page = await query.execute(limit=2, offset=0)

        assert [e.id for e in page.items] == [2, 3]
        assert page.total == 3
        assert page.limit == 2
        assert page.offset == 0

    @pytest.mark.asyncio
    async def test_offset_and_default_limit(self, history_repository, make_record) -> None:
        for minutes in range(25):
            await history_repository.create(make_record(minutes=minutes))
        query = ListHistoryQuery(history_repository=history_repository)

        first = await query.execute()
        second = await query.execute(offset=20)

        assert len(first.items) == 20
        assert [e.id for e in second.items] == [5, 4, 3, 2, 1]
        assert second.total == 25

    @pytest.mark.asyncio
    async def test_entries_include_category(self, history_repository, make_record) -> None:
        await history_repository.create(make_record(waste_category_id=3))
        query = ListHistoryQuery(history_repository=history_repository)

        page = await query.execute()

        assert page.items[0].category_name == "Glass"
        assert page.items[0].disposal_instructions == "Glass disposal"


class TestGetHistoryEntryQuery:
    """이력 단건 Query 테스트."""

    @pytest.mark.asyncio
    async def test_found(self, history_repository, make_record) -> None:
        record = await history_repository.create(make_record())

        entry = await GetHistoryEntryQuery(history_repository).execute(record.id)

        assert entry.id == record.id
        assert entry.category_name == "Plastic"

    @pytest.mark.asyncio
    async def test_not_found(self, history_repository) -> None:
        with pytest.raises(ClassificationNotFoundError):
            await GetHistoryEntryQuery(history_repository).execute(42)


class TestListCategoriesQuery:
    """카테고리 목록 Query 테스트."""

    @pytest.mark.asyncio
    async def test_sorted_by_name(self, category_reader) -> None:
        categories = await ListCategoriesQuery(category_reader).execute()

        names = [c.name for c in categories]
        assert names == sorted(names)
        assert len(names) == 8
