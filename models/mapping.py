"""
models/mapping.py
-----------------
Explicit schemas that translate between External Records (the flat,
`_c`-suffixed dicts the record store persists) and domain dataclasses.
"""

from dataclasses import dataclass, fields
from typing import Any, Callable, Mapping, Optional, Union

# A relation column comes back either as a bare id or as an embedded
# lookup object such as {"Id": 3, "Name": "North Field"}.
Identifier = Union[int, str]
RelationRef = Union[Identifier, Mapping[str, Any]]

Converter = Callable[[Any], Any]


def normalize_relation(ref: Optional[RelationRef]) -> Optional[str]:
    """
    Normalize a relation value to a string id.

    >>> normalize_relation(7), normalize_relation({"Id": 7}), normalize_relation(None)
    ('7', '7', None)
    """
    if ref is None or ref == "":
        return None
    if isinstance(ref, Mapping):
        inner = ref.get("Id")
        return None if inner is None else str(inner)
    return str(ref)


def to_int(value: Any) -> Optional[int]:
    """Coerce an id-like value to int; None and "" stay None."""
    if value is None or value == "":
        return None
    if isinstance(value, Mapping):
        value = value.get("Id")
    return int(value)


def to_float(value: Any) -> Optional[float]:
    """Coerce a numeric field to float; None and "" stay None."""
    if value is None or value == "":
        return None
    return float(value)


_FALSE_STRINGS = {"", "false", "0", "no", "off"}


def to_bool(value: Any) -> bool:
    """Coerce a checkbox field to bool; understands "true"/"false" strings."""
    if isinstance(value, str):
        return value.strip().lower() not in _FALSE_STRINGS
    return bool(value)


@dataclass(frozen=True)
class FieldSpec:
    """
    One External ↔ Domain field pairing.

    Attributes:
        external: Column name in the record store.
        attribute: Attribute name on the domain dataclass.
        read: Optional converter applied when reading a record.
        write: Optional converter applied when writing a record.
    """
    external: str
    attribute: str
    read: Optional[Converter] = None
    write: Optional[Converter] = None


def map_record(record: Mapping[str, Any], field_map: tuple[FieldSpec, ...]) -> dict[str, Any]:
    """Map an External Record to domain attribute values, `id` included."""
    values: dict[str, Any] = {"id": record.get("Id")}
    for field_spec in field_map:
        value = record.get(field_spec.external)
        values[field_spec.attribute] = field_spec.read(value) if field_spec.read else value
    return values


def unmap_record(values: Mapping[str, Any], field_map: tuple[FieldSpec, ...]) -> dict[str, Any]:
    """Map domain attribute values to an External Record (without `Id`)."""
    record: dict[str, Any] = {}
    for field_spec in field_map:
        value = values.get(field_spec.attribute)
        record[field_spec.external] = field_spec.write(value) if field_spec.write else value
    return record


def _camel(name: str) -> str:
    if name == "id":
        return "Id"
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


class DomainRecord:
    """Mixin for domain dataclasses."""

    def to_dict(self) -> dict[str, Any]:
        """Return the camelCase domain shape, e.g. {"Id": 1, "dueDate": ...}."""
        return {_camel(f.name): getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class EntitySchema:
    """
    Everything a repository needs to know about one entity type.

    Attributes:
        table: Record store table name.
        model: Domain dataclass constructed on read.
        fields: Total, fixed field mapping for the entity.
        name_source: Domain attribute copied into the store's `Name`
            column on write, for entities whose `Name` is not mapped.
    """
    table: str
    model: type
    fields: tuple[FieldSpec, ...]
    name_source: Optional[str] = None

    def selection(self) -> list[str]:
        """Field-selection list sent with every read."""
        names = ["Id", "Name"]
        names.extend(s.external for s in self.fields if s.external not in names)
        return names

    def external_name(self, attribute: str) -> str:
        for field_spec in self.fields:
            if field_spec.attribute == attribute:
                return field_spec.external
        raise KeyError(f"{self.table} has no field mapped to '{attribute}'")

    def to_domain(self, record: Mapping[str, Any]):
        """Build a domain object from an External Record."""
        return self.model(**map_record(record, self.fields))

    def to_external(self, obj, record_id: Optional[Any] = None) -> dict[str, Any]:
        """Build an External Record from a domain object, optionally keyed by id."""
        values = {f.name: getattr(obj, f.name) for f in fields(obj)}
        record: dict[str, Any] = {}
        if record_id is not None:
            record["Id"] = int(record_id)
        if self.name_source:
            record["Name"] = values.get(self.name_source)
        record.update(unmap_record(values, self.fields))
        return record
