"""History DTOs."""

from waste.application.history.dto.history_entry import HistoryEntry, HistoryPage

__all__ = ["HistoryEntry", "HistoryPage"]
