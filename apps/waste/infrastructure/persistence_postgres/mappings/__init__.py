"""Waste ORM Mappings.

Imperative mapping으로 Domain Entity와 DB Table을 연결합니다.
"""

from waste.infrastructure.persistence_postgres.mappings.classification_history import (
    history_table,
    start_classification_history_mapper,
)
from waste.infrastructure.persistence_postgres.mappings.waste_category import (
    categories_table,
    start_waste_category_mapper,
)


def start_mappers() -> None:
    """모든 Waste 도메인 매퍼를 시작합니다."""
    start_waste_category_mapper()
    start_classification_history_mapper()


__all__ = [
    "categories_table",
    "history_table",
    "start_classification_history_mapper",
    "start_mappers",
    "start_waste_category_mapper",
]
