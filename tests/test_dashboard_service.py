"""Dashboard service tests over the in-memory store."""

from datetime import timedelta

import pytest

from repositories import CropRepository, FarmRepository, FinancialRepository, TaskRepository
from services.dashboard_service import DashboardService, format_overview
from utils.dates import to_iso, utc_now


@pytest.fixture
def dashboard(farm_repo, crop_repo, task_repo, financial_repo) -> DashboardService:
    return DashboardService(farm_repo, crop_repo, task_repo, financial_repo)


@pytest.fixture
def seeded(store) -> dict:
    farm = store.seed("farms_c", Name="Oak Farm", location_c="Kent", size_c=40, sizeUnit_c="acres")
    other = store.seed("farms_c", Name="Elm Farm", location_c="Devon", size_c=12, sizeUnit_c="ha")
    store.seed("crops_c", farmId_c=farm["Id"], cropType_c="Corn", status_c="growing")
    store.seed("crops_c", farmId_c=farm["Id"], cropType_c="Barley", status_c="Harvested")
    store.seed("crops_c", farmId_c=other["Id"], cropType_c="Kale", status_c="planted")
    store.seed(
        "tasks_c", title_c="Check irrigation", completed_c=False, farmId_c=farm["Id"],
        dueDate_c=to_iso(utc_now() + timedelta(days=2)), priority_c="high",
    )
    store.seed(
        "tasks_c", title_c="Order seed", completed_c=False, farmId_c=other["Id"],
        dueDate_c=to_iso(utc_now() + timedelta(days=20)),
    )
    store.seed("financialEntries_c", type_c="income", amount_c=500, farmId_c=farm["Id"])
    store.seed("financialEntries_c", type_c="expense", amount_c=120, farmId_c=farm["Id"])
    store.seed("financialEntries_c", type_c="expense", amount_c=30, farmId_c=other["Id"])
    return {"farm": farm, "other": other}


@pytest.mark.asyncio
async def test_overview(dashboard, seeded) -> None:
    overview = await dashboard.get_overview()

    assert overview.farm_count == 2
    assert overview.active_crop_count == 2
    assert [t.title for t in overview.upcoming_tasks] == ["Check irrigation"]
    assert overview.summary.net_balance == 350

    report = format_overview(overview)
    assert "Farms: 2" in report
    assert "Check irrigation" in report
    assert "Net balance: 350.00" in report


@pytest.mark.asyncio
async def test_farm_detail(dashboard, seeded) -> None:
    detail = await dashboard.get_farm_detail(seeded["farm"]["Id"])

    assert detail.farm.name == "Oak Farm"
    assert [c.crop_type for c in detail.crops] == ["Corn", "Barley"]
    assert [t.title for t in detail.tasks] == ["Check irrigation"]
    assert detail.summary.total_income == 500
    assert detail.summary.total_expenses == 120


@pytest.mark.asyncio
async def test_farm_detail_missing(dashboard, seeded) -> None:
    assert await dashboard.get_farm_detail(999) is None


@pytest.mark.asyncio
async def test_overview_degrades_without_client(reporter) -> None:
    dashboard = DashboardService(
        FarmRepository(None, reporter),
        CropRepository(None, reporter),
        TaskRepository(None, reporter),
        FinancialRepository(None, reporter),
    )
    overview = await dashboard.get_overview()

    assert overview.farm_count == 0
    assert overview.upcoming_tasks == []
    assert overview.summary.net_balance == 0
