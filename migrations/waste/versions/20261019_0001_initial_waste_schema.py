"""Initial waste schema.

Revision ID: 0001
Revises: None
Create Date: 2026-10-19

Waste Domain Migration
Schema: waste.*
"""

from typing import Sequence

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "0001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Create waste schema tables."""
    op.execute("CREATE SCHEMA IF NOT EXISTS waste")

    # waste_categories 테이블
    op.execute("""
        CREATE TABLE IF NOT EXISTS waste.waste_categories (
            id SERIAL PRIMARY KEY,
            name VARCHAR(100) NOT NULL UNIQUE,
            color_code VARCHAR(20),
            description TEXT,
            disposal_instructions TEXT,
            environmental_impact TEXT,
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
        )
    """)

    # 대소문자 무시 이름 조회용
    op.execute("""
        CREATE UNIQUE INDEX IF NOT EXISTS ix_waste_categories_lower_name
        ON waste.waste_categories(LOWER(name))
    """)

    # classification_history 테이블
    op.execute("""
        CREATE TABLE IF NOT EXISTS waste.classification_history (
            id SERIAL PRIMARY KEY,
            waste_category_id INTEGER NOT NULL REFERENCES waste.waste_categories(id),
            image_url TEXT NOT NULL,
            detected_items JSONB NOT NULL DEFAULT '[]'::jsonb,
            confidence_score DOUBLE PRECISION NOT NULL
                CHECK (confidence_score >= 0 AND confidence_score <= 1),
            is_correct BOOLEAN,
            user_feedback TEXT,
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
        )
    """)

    op.execute("""
        CREATE INDEX IF NOT EXISTS ix_classification_history_waste_category_id
        ON waste.classification_history(waste_category_id)
    """)
    op.execute("""
        CREATE INDEX IF NOT EXISTS ix_classification_history_created_at
        ON waste.classification_history(created_at DESC, id DESC)
    """)


def downgrade() -> None:
    """Drop waste schema.

    주의: 모든 데이터가 삭제됩니다!
    """
    op.execute("DROP TABLE IF EXISTS waste.classification_history CASCADE")
    op.execute("DROP TABLE IF EXISTS waste.waste_categories CASCADE")
    op.execute("DROP SCHEMA IF EXISTS waste CASCADE")
