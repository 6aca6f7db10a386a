"""History Queries."""

from waste.application.history.queries.get_history_entry import GetHistoryEntryQuery
from waste.application.history.queries.list_history import DEFAULT_LIMIT, ListHistoryQuery

__all__ = ["DEFAULT_LIMIT", "GetHistoryEntryQuery", "ListHistoryQuery"]
