"""Category Ports."""

from waste.application.category.ports.category_reader import CategoryReaderPort

__all__ = ["CategoryReaderPort"]
