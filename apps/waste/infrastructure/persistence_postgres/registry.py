"""SQLAlchemy Mapper Registry for Waste Domain.

모든 매핑 파일에서 이 registry와 metadata를 공유합니다.
"""

from sqlalchemy import MetaData
from sqlalchemy.orm import registry

from waste.infrastructure.persistence_postgres.constants import WASTE_SCHEMA

# waste 스키마용 공용 메타데이터
metadata = MetaData(schema=WASTE_SCHEMA)
mapper_registry = registry(metadata=metadata)
