"""ClassificationRecord ORM Mapping - Imperative mapping for waste.classification_history table.

분류 시도 1건당 1행, 피드백으로만 갱신됩니다.
"""

from __future__ import annotations

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    Table,
    Text,
    func,
)
from sqlalchemy.dialects.postgresql import JSONB

from waste.domain.entities import ClassificationRecord
from waste.infrastructure.persistence_postgres.constants import (
    CATEGORIES_TABLE,
    HISTORY_TABLE,
    WASTE_SCHEMA,
)
from waste.infrastructure.persistence_postgres.registry import (
    mapper_registry,
    metadata,
)

# waste.classification_history 테이블 정의
history_table = Table(
    HISTORY_TABLE,
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "waste_category_id",
        Integer,
        ForeignKey(f"{WASTE_SCHEMA}.{CATEGORIES_TABLE}.id"),
        nullable=False,
        index=True,
    ),
    Column("image_url", Text, nullable=False),
    Column("detected_items", JSONB, nullable=False, server_default="[]"),
    Column("confidence_score", Float, nullable=False),
    Column("is_correct", Boolean, nullable=True),
    Column("user_feedback", Text, nullable=True),
    Column(
        "created_at",
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        index=True,
    ),
    Column(
        "updated_at",
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    ),
)


def start_classification_history_mapper() -> None:
    """ClassificationRecord 엔티티를 waste.classification_history 테이블에 매핑합니다."""
    if hasattr(ClassificationRecord, "__mapper__"):
        return

    mapper_registry.map_imperatively(ClassificationRecord, history_table)
