"""Waste Category Controller.

- GET /waste/categories: 카테고리 목록 (이름 오름차순)
"""

from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter
from pydantic import BaseModel, Field

from waste.domain.entities import WasteCategory
from waste.setup.dependencies import ListCategoriesQueryDep

router = APIRouter(prefix="/waste", tags=["categories"])


class CategoryResponse(BaseModel):
    """카테고리 스키마."""

    id: int
    name: str
    color_code: str | None = None
    description: str | None = None
    disposal_instructions: str | None = None
    environmental_impact: str | None = None
    created_at: datetime | None = None

    @classmethod
    def from_entity(cls, category: WasteCategory) -> "CategoryResponse":
        return cls(
            id=category.id,
            name=category.name,
            color_code=category.color_code,
            description=category.description,
            disposal_instructions=category.disposal_instructions,
            environmental_impact=category.environmental_impact,
            created_at=category.created_at,
        )


class CategoryListResponse(BaseModel):
    """카테고리 목록 응답."""

    data: list[CategoryResponse] = Field(description="카테고리 목록")


@router.get(
    "/categories",
    response_model=CategoryListResponse,
    summary="List waste categories",
)
async def list_categories(query: ListCategoriesQueryDep) -> CategoryListResponse:
    """분리배출 안내가 포함된 카테고리 목록을 반환합니다."""
    categories = await query.execute()
    return CategoryListResponse(data=[CategoryResponse.from_entity(c) for c in categories])
