"""Category Queries."""

from waste.application.category.queries.list_categories import ListCategoriesQuery

__all__ = ["ListCategoriesQuery"]
