"""Waste PostgreSQL 상수."""

WASTE_SCHEMA = "waste"
CATEGORIES_TABLE = "waste_categories"
HISTORY_TABLE = "classification_history"
