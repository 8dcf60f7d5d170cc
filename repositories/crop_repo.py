"""
repositories/crop_repo.py
-------------------------
Data access layer for crops (`crops_c`).
"""

from models.crop import CROP_SCHEMA, Crop
from repositories.base_repo import FarmScopedRepository


class CropRepository(FarmScopedRepository[Crop]):
    """Repository for CRUD operations on the crops table."""

    schema = CROP_SCHEMA
    entity_name = "crop"
    entity_plural = "crops"
