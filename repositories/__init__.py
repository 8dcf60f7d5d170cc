"""
repositories/ - Data Access Layer
==================================
Each repository binds one record store table and maps its External
Records to domain model objects. Repositories never raise and never cache.
"""

from repositories.base_repo import RecordNotFoundError, RecordReadError
from repositories.crop_repo import CropRepository
from repositories.farm_repo import FarmRepository
from repositories.financial_repo import FinancialRepository
from repositories.task_repo import TaskRepository

__all__ = [
    "RecordNotFoundError",
    "RecordReadError",
    "FarmRepository",
    "CropRepository",
    "TaskRepository",
    "FinancialRepository",
]
