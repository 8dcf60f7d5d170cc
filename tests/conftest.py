"""Shared pytest fixtures for the test suite.

Fixture overview
----------------
store       : empty in-memory record store
reporter    : collects user-facing messages
*_repo      : one repository per entity, wired to `store` and `reporter`
"""

import pytest

from reporting.reporter import CollectingReporter
from repositories import CropRepository, FarmRepository, FinancialRepository, TaskRepository
from tests.fake_store import FakeRecordStore


@pytest.fixture
def store() -> FakeRecordStore:
    return FakeRecordStore()


@pytest.fixture
def reporter() -> CollectingReporter:
    return CollectingReporter()


@pytest.fixture
def farm_repo(store, reporter) -> FarmRepository:
    return FarmRepository(store, reporter)


@pytest.fixture
def crop_repo(store, reporter) -> CropRepository:
    return CropRepository(store, reporter)


@pytest.fixture
def task_repo(store, reporter) -> TaskRepository:
    return TaskRepository(store, reporter)


@pytest.fixture
def financial_repo(store, reporter) -> FinancialRepository:
    return FinancialRepository(store, reporter)
