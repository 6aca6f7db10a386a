"""History Ports."""

from waste.application.history.ports.history_repository import HistoryRepositoryPort

__all__ = ["HistoryRepositoryPort"]
