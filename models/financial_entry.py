"""
models/financial_entry.py
-------------------------
Domain models for farm income/expense entries and their summary.
"""

from dataclasses import dataclass
from typing import Optional

from models.mapping import (
    DomainRecord,
    EntitySchema,
    FieldSpec,
    normalize_relation,
    to_float,
    to_int,
)

INCOME = "income"
EXPENSE = "expense"


@dataclass
class FinancialEntry(DomainRecord):
    """
    Represents a single financial transaction of a farm.

    Attributes:
        id: Record store id (None for new records).
        type: Either 'income' or 'expense'.
        amount: Transaction amount.
        category: Category such as 'seeds', 'equipment', 'sales'.
        description: Human-readable note, also used as the display name.
        date: ISO date of the transaction.
        farm_id: Id of the owning farm, always a string once read.
    """
    type: Optional[str] = None  # 'income' | 'expense'
    amount: Optional[float] = None
    category: Optional[str] = None
    description: Optional[str] = None
    date: Optional[str] = None
    farm_id: Optional[str] = None
    id: Optional[int] = None

    def is_income(self) -> bool:
        """Returns True if this is an income entry."""
        return self.type == INCOME

    def __str__(self) -> str:
        sign = "+" if self.is_income() else "-"
        return f"{sign}{self.amount or 0:.2f} | {self.category} | {self.date}"


@dataclass
class FinancialSummary(DomainRecord):
    """Income, expenses and balance over a set of entries."""
    total_income: float = 0.0
    total_expenses: float = 0.0
    net_balance: float = 0.0

    @classmethod
    def from_entries(cls, entries: list[FinancialEntry]) -> "FinancialSummary":
        """Sum amounts; anything that is not income counts as an expense."""
        income = sum(e.amount or 0.0 for e in entries if e.is_income())
        expenses = sum(e.amount or 0.0 for e in entries if not e.is_income())
        return cls(total_income=income, total_expenses=expenses, net_balance=income - expenses)


FINANCIAL_ENTRY_SCHEMA = EntitySchema(
    table="financialEntries_c",
    model=FinancialEntry,
    fields=(
        FieldSpec("type_c", "type"),
        FieldSpec("amount_c", "amount", read=to_float, write=to_float),
        FieldSpec("category_c", "category"),
        FieldSpec("description_c", "description"),
        FieldSpec("date_c", "date"),
        FieldSpec("farmId_c", "farm_id", read=normalize_relation, write=to_int),
    ),
    name_source="description",
)
