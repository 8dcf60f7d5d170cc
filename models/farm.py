"""
models/farm.py
--------------
Domain model for a farm.
"""

from dataclasses import dataclass
from typing import Optional

from models.mapping import DomainRecord, EntitySchema, FieldSpec, to_float


@dataclass
class Farm(DomainRecord):
    """
    Represents a single farm.

    Attributes:
        id: Record store id (None for new records).
        name: Display name of the farm.
        location: Free-form location (town, region, coordinates).
        size: Farm area, expressed in `size_unit`.
        size_unit: Area unit, e.g. 'acres' or 'hectares'.
    """
    name: Optional[str] = None
    location: Optional[str] = None
    size: Optional[float] = None
    size_unit: Optional[str] = None
    id: Optional[int] = None

    def __str__(self) -> str:
        return f"{self.name} ({self.size} {self.size_unit}) | {self.location}"


FARM_SCHEMA = EntitySchema(
    table="farms_c",
    model=Farm,
    fields=(
        FieldSpec("Name", "name"),
        FieldSpec("location_c", "location"),
        FieldSpec("size_c", "size", read=to_float, write=to_float),
        FieldSpec("sizeUnit_c", "size_unit"),
    ),
)
