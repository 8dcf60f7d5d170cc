"""Financial repository tests: summary reduction and numeric coercion."""

import httpx
import pytest

from models.financial_entry import FinancialEntry, FinancialSummary
from repositories import FinancialRepository


@pytest.mark.asyncio
async def test_summary(financial_repo, store) -> None:
    store.seed("financialEntries_c", type_c="income", amount_c=100, farmId_c=1)
    store.seed("financialEntries_c", type_c="expense", amount_c=40, farmId_c=1)

    summary = await financial_repo.get_summary()

    assert summary.to_dict() == {"totalIncome": 100, "totalExpenses": 40, "netBalance": 60}


@pytest.mark.asyncio
async def test_summary_treats_unknown_type_as_expense(financial_repo, store) -> None:
    store.seed("financialEntries_c", type_c="income", amount_c=50.5)
    store.seed("financialEntries_c", type_c="refund", amount_c=10)
    store.seed("financialEntries_c", type_c="expense", amount_c=None)

    summary = await financial_repo.get_summary()

    assert summary == FinancialSummary(total_income=50.5, total_expenses=10.0, net_balance=40.5)


@pytest.mark.asyncio
async def test_summary_with_string_amounts(financial_repo, store) -> None:
    store.seed("financialEntries_c", type_c="income", amount_c="100.25")
    store.seed("financialEntries_c", type_c="expense", amount_c="0.25")

    summary = await financial_repo.get_summary()

    assert summary == FinancialSummary(total_income=100.25, total_expenses=0.25, net_balance=100.0)


@pytest.mark.asyncio
async def test_summary_zeroed_on_failure(financial_repo, store) -> None:
    store.next_error = httpx.ConnectError("offline")
    assert await financial_repo.get_summary() == FinancialSummary()


@pytest.mark.asyncio
async def test_summary_zeroed_without_client(reporter) -> None:
    repo = FinancialRepository(None, reporter)
    assert await repo.get_summary() == FinancialSummary(0.0, 0.0, 0.0)


@pytest.mark.asyncio
async def test_create_coerces_amount_and_farm(financial_repo, store) -> None:
    entry = FinancialEntry(type="income", amount="250.75", category="sales",
                           description="Market day", date="2024-04-20", farm_id="5")

    created = await financial_repo.create(entry)

    assert created.amount == 250.75
    assert created.farm_id == "5"
    assert await financial_repo.get_by_id(created.id) == created


@pytest.mark.asyncio
async def test_get_by_farm_id(financial_repo, store) -> None:
    store.seed("financialEntries_c", type_c="income", amount_c=1, farmId_c=1)
    store.seed("financialEntries_c", type_c="income", amount_c=2, farmId_c={"Id": 2})

    entries = await financial_repo.get_by_farm_id(2)

    assert [e.amount for e in entries] == [2]
    assert entries[0].farm_id == "2"
