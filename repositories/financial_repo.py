"""
repositories/financial_repo.py
------------------------------
Data access layer for farm income and expenses (`financialEntries_c`).
"""

from models.financial_entry import FINANCIAL_ENTRY_SCHEMA, FinancialEntry, FinancialSummary
from repositories.base_repo import FarmScopedRepository
from utils.logger import get_logger

logger = get_logger(__name__)


class FinancialRepository(FarmScopedRepository[FinancialEntry]):
    """Repository for CRUD operations on the financial entries table."""

    schema = FINANCIAL_ENTRY_SCHEMA
    entity_name = "financial entry"
    entity_plural = "financial entries"

    async def get_summary(self) -> FinancialSummary:
        """
        Get total income, total expenses and net balance over all entries.

        Returns:
            The summary; all zeros when nothing could be read.
        """
        try:
            entries = await self.get_all()
            return FinancialSummary.from_entries(entries)
        except Exception as e:
            logger.error(f"Error calculating financial summary: {e}")
            return FinancialSummary()
