"""Waste SQLAlchemy Adapters."""

from waste.infrastructure.persistence_postgres.adapters.category_reader_sqla import (
    CategoryReaderSQLA,
)
from waste.infrastructure.persistence_postgres.adapters.history_repository_sqla import (
    HistoryRepositorySQLA,
)

__all__ = ["CategoryReaderSQLA", "HistoryRepositorySQLA"]
