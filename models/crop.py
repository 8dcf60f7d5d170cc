"""
models/crop.py
--------------
Domain model for a crop planted on a farm.
"""

from dataclasses import dataclass
from typing import Optional

from models.mapping import DomainRecord, EntitySchema, FieldSpec, normalize_relation, to_int

HARVESTED = "harvested"


@dataclass
class Crop(DomainRecord):
    """
    Represents one planting of a crop.

    Attributes:
        id: Record store id (None for new records).
        farm_id: Id of the owning farm, always a string once read.
        crop_type: What is planted (e.g. 'Corn').
        field_location: Field or plot within the farm.
        planting_date: ISO date the crop was planted.
        expected_harvest_date: ISO date the harvest is expected.
        status: Growth stage, e.g. 'planted', 'growing', 'ready', 'harvested'.
        notes: Optional free text.
    """
    farm_id: Optional[str] = None
    crop_type: Optional[str] = None
    field_location: Optional[str] = None
    planting_date: Optional[str] = None
    expected_harvest_date: Optional[str] = None
    status: Optional[str] = None
    notes: Optional[str] = None
    id: Optional[int] = None

    def is_active(self) -> bool:
        """Returns True until the crop has been harvested."""
        return (self.status or "").lower() != HARVESTED

    def __str__(self) -> str:
        return f"{self.crop_type} @ {self.field_location} | {self.status}"


CROP_SCHEMA = EntitySchema(
    table="crops_c",
    model=Crop,
    fields=(
        FieldSpec("farmId_c", "farm_id", read=normalize_relation, write=to_int),
        FieldSpec("cropType_c", "crop_type"),
        FieldSpec("fieldLocation_c", "field_location"),
        FieldSpec("plantingDate_c", "planting_date"),
        FieldSpec("expectedHarvestDate_c", "expected_harvest_date"),
        FieldSpec("status_c", "status"),
        FieldSpec("notes_c", "notes"),
    ),
    name_source="crop_type",
)
