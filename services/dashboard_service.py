"""
services/dashboard_service.py
-----------------------------
Aggregates farms, crops, tasks and finances into the dashboard overview
and the per-farm detail view.
"""

import asyncio
from dataclasses import dataclass, field
from typing import Any, Optional

from models.crop import Crop
from models.farm import Farm
from models.financial_entry import FinancialEntry, FinancialSummary
from models.task import Task
from repositories.crop_repo import CropRepository
from repositories.farm_repo import FarmRepository
from repositories.financial_repo import FinancialRepository
from repositories.task_repo import TaskRepository
from utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class DashboardOverview:
    farm_count: int
    active_crop_count: int
    upcoming_tasks: list[Task]
    summary: FinancialSummary


@dataclass
class FarmDetail:
    """One farm together with everything recorded against it."""
    farm: Farm
    crops: list[Crop] = field(default_factory=list)
    tasks: list[Task] = field(default_factory=list)
    entries: list[FinancialEntry] = field(default_factory=list)

    @property
    def summary(self) -> FinancialSummary:
        return FinancialSummary.from_entries(self.entries)


class DashboardService:
    """Builds read-only views across the four repositories."""

    def __init__(
        self,
        farms: FarmRepository,
        crops: CropRepository,
        tasks: TaskRepository,
        finances: FinancialRepository,
    ):
        self.farms = farms
        self.crops = crops
        self.tasks = tasks
        self.finances = finances

    async def get_overview(self) -> DashboardOverview:
        """Read every repository concurrently and summarize."""
        farms, crops, upcoming, summary = await asyncio.gather(
            self.farms.get_all(),
            self.crops.get_all(),
            self.tasks.get_upcoming(),
            self.finances.get_summary(),
        )
        return DashboardOverview(
            farm_count=len(farms),
            active_crop_count=sum(1 for c in crops if c.is_active()),
            upcoming_tasks=upcoming,
            summary=summary,
        )

    async def get_farm_detail(self, farm_id: Any) -> Optional[FarmDetail]:
        """
        Get a farm with its crops, tasks and financial entries.

        Returns:
            The detail view, or None if the farm does not exist.
        """
        farm = await self.farms.get_by_id(farm_id)
        if farm is None:
            logger.info(f"Farm #{farm_id} not found")
            return None
        crops, tasks, entries = await asyncio.gather(
            self.crops.get_by_farm_id(farm_id),
            self.tasks.get_by_farm_id(farm_id),
            self.finances.get_by_farm_id(farm_id),
        )
        return FarmDetail(farm=farm, crops=crops, tasks=tasks, entries=entries)


def format_overview(overview: DashboardOverview) -> str:
    """Render the overview as a plain-text report."""
    s = overview.summary
    lines = [
        "🌾 Farm dashboard\n",
        f"🏡 Farms: {overview.farm_count}",
        f"🌱 Active crops: {overview.active_crop_count}",
        f"📋 Upcoming tasks: {len(overview.upcoming_tasks)}",
    ]
    for task in overview.upcoming_tasks:
        lines.append(f"  • {task.title} (due {task.due_date}, {task.priority or 'normal'})")
    lines.append("")
    lines.append(f"💰 Total income: {s.total_income:.2f}")
    lines.append(f"💸 Total expenses: {s.total_expenses:.2f}")
    lines.append(f"📈 Net balance: {s.net_balance:.2f}")
    return "\n".join(lines)
