"""
store/query.py
--------------
Builders for the record store's query payload: field selection,
operator-based `where` predicates and ordering keys.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Operator(str, Enum):
    """Comparison operators understood by the record store."""
    EQUAL_TO = "EqualTo"
    LESS_THAN_OR_EQUAL_TO = "LessThanOrEqualTo"
    GREATER_THAN_OR_EQUAL_TO = "GreaterThanOrEqualTo"


class SortType(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


@dataclass(frozen=True)
class Condition:
    """A single `where` predicate: `field <operator> any of values`."""
    field: str
    operator: Operator
    values: tuple

    def to_params(self) -> dict:
        return {
            "FieldName": self.field,
            "Operator": self.operator.value,
            "Values": list(self.values),
        }


@dataclass(frozen=True)
class OrderBy:
    field: str
    sort_type: SortType = SortType.ASC

    def to_params(self) -> dict:
        return {"fieldName": self.field, "sorttype": self.sort_type.value}


@dataclass
class Query:
    """
    A fetch query against one table.

    Attributes:
        fields: External field names to select.
        where: Predicates, all of which must hold.
        order_by: Ordering keys, applied in sequence.
    """
    fields: list[str] = field(default_factory=list)
    where: list[Condition] = field(default_factory=list)
    order_by: list[OrderBy] = field(default_factory=list)

    def filter(self, field_name: str, operator: Operator, *values: Any) -> "Query":
        """Append a predicate and return self for chaining."""
        self.where.append(Condition(field_name, operator, values))
        return self

    def sort(self, field_name: str, sort_type: SortType = SortType.ASC) -> "Query":
        """Append an ordering key and return self for chaining."""
        self.order_by.append(OrderBy(field_name, sort_type))
        return self

    def to_params(self) -> dict:
        """Serialize into the store's wire structure; empty sections are omitted."""
        params: dict = {"fields": [{"field": {"Name": name}} for name in self.fields]}
        if self.where:
            params["where"] = [c.to_params() for c in self.where]
        if self.order_by:
            params["orderBy"] = [o.to_params() for o in self.order_by]
        return params
