"""Waste PostgreSQL Persistence Layer."""

from waste.infrastructure.persistence_postgres.registry import (
    mapper_registry,
    metadata,
)

__all__ = ["mapper_registry", "metadata"]
