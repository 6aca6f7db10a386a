"""WasteCategory ORM Mapping - Imperative mapping for waste.waste_categories table."""

from __future__ import annotations

from sqlalchemy import Column, DateTime, Integer, String, Table, Text, func

from waste.domain.entities import WasteCategory
from waste.infrastructure.persistence_postgres.constants import CATEGORIES_TABLE
from waste.infrastructure.persistence_postgres.registry import (
    mapper_registry,
    metadata,
)

# waste.waste_categories 테이블 정의
categories_table = Table(
    CATEGORIES_TABLE,
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(100), nullable=False, unique=True),
    Column("color_code", String(20), nullable=True),
    Column("description", Text, nullable=True),
    Column("disposal_instructions", Text, nullable=True),
    Column("environmental_impact", Text, nullable=True),
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
)


def start_waste_category_mapper() -> None:
    """WasteCategory 엔티티를 waste.waste_categories 테이블에 매핑합니다."""
    if hasattr(WasteCategory, "__mapper__"):
        return

    mapper_registry.map_imperatively(WasteCategory, categories_table)
