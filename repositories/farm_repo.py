"""
repositories/farm_repo.py
-------------------------
Data access layer for farms (`farms_c`).
"""

from models.farm import FARM_SCHEMA, Farm
from repositories.base_repo import RecordRepository


class FarmRepository(RecordRepository[Farm]):
    """Repository for CRUD operations on the farms table."""

    schema = FARM_SCHEMA
    entity_name = "farm"
    entity_plural = "farms"
