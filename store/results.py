"""
store/results.py
----------------
Response envelope returned by the record store, and the bulk-result
partition used by create/update/delete.
"""

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class FieldError:
    """A validation error attached to one field of one record."""
    field_label: str
    message: str

    def __str__(self) -> str:
        return f"{self.field_label}: {self.message}"

    @classmethod
    def from_json(cls, payload: Any) -> "FieldError":
        if isinstance(payload, dict):
            return cls(
                field_label=str(payload.get("fieldLabel") or payload.get("fieldName") or "Field"),
                message=str(payload.get("message", "")),
            )
        return cls(field_label="Field", message=str(payload))


@dataclass
class RecordResult:
    """Outcome of a bulk write for a single record."""
    success: bool
    data: Optional[dict] = None
    message: Optional[str] = None
    errors: list[FieldError] = field(default_factory=list)

    def error_messages(self) -> list[str]:
        """Every field-level error followed by the record-level message, if any."""
        messages = [str(e) for e in self.errors]
        if self.message:
            messages.append(self.message)
        return messages

    @classmethod
    def from_json(cls, payload: dict) -> "RecordResult":
        return cls(
            success=bool(payload.get("success")),
            data=payload.get("data"),
            message=payload.get("message"),
            errors=[FieldError.from_json(e) for e in payload.get("errors") or []],
        )


@dataclass
class StoreResponse:
    """
    The envelope every record store call answers with.

    Reads carry `data` (a record or a list of records); bulk writes carry
    `results`, one entry per submitted record.
    """
    success: bool
    message: Optional[str] = None
    data: Any = None
    results: Optional[list[RecordResult]] = None

    @classmethod
    def from_json(cls, payload: dict) -> "StoreResponse":
        raw_results = payload.get("results")
        return cls(
            success=bool(payload.get("success")),
            message=payload.get("message"),
            data=payload.get("data"),
            results=(
                [RecordResult.from_json(r) for r in raw_results]
                if raw_results is not None
                else None
            ),
        )


@dataclass
class BulkOutcome:
    """Per-record results of a bulk write, split by success."""
    succeeded: list[RecordResult]
    failed: list[RecordResult]

    @property
    def any_succeeded(self) -> bool:
        return bool(self.succeeded)


def partition_results(results: list[RecordResult]) -> BulkOutcome:
    """Split bulk write results into succeeded and failed, preserving order."""
    return BulkOutcome(
        succeeded=[r for r in results if r.success],
        failed=[r for r in results if not r.success],
    )
