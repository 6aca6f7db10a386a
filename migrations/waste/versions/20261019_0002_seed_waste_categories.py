"""Seed waste categories.

Revision ID: 0002
Revises: 0001
Create Date: 2026-10-19

waste_categories.yaml의 8개 카테고리를 적재합니다.
이름이 이미 있으면 안내 문구만 갱신합니다.
"""

from typing import Sequence

import sqlalchemy as sa
from alembic import op

from waste.infrastructure.asset_loader import load_category_seed

# revision identifiers, used by Alembic.
revision: str = "0002"
down_revision: str | None = "0001"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

UPSERT_CATEGORY = sa.text("""
    INSERT INTO waste.waste_categories
        (name, color_code, description, disposal_instructions, environmental_impact)
    VALUES
        (:name, :color_code, :description, :disposal_instructions, :environmental_impact)
    ON CONFLICT (name) DO UPDATE SET
        color_code = EXCLUDED.color_code,
        description = EXCLUDED.description,
        disposal_instructions = EXCLUDED.disposal_instructions,
        environmental_impact = EXCLUDED.environmental_impact
""")


def upgrade() -> None:
    """Insert seed categories."""
    for category in load_category_seed():
        op.execute(
            UPSERT_CATEGORY.bindparams(
                name=category["name"],
                color_code=category.get("color_code"),
                description=category.get("description"),
                disposal_instructions=category.get("disposal_instructions"),
                environmental_impact=category.get("environmental_impact"),
            )
        )


def downgrade() -> None:
    """Remove seed categories (이력이 참조하는 행은 유지)."""
    names = [category["name"] for category in load_category_seed()]
    op.execute(
        sa.text("""
            DELETE FROM waste.waste_categories c
            WHERE c.name IN :names
              AND NOT EXISTS (
                  SELECT 1 FROM waste.classification_history h
                  WHERE h.waste_category_id = c.id
              )
        """).bindparams(sa.bindparam("names", value=names, expanding=True))
    )
