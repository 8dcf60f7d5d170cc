"""
models/task.py
--------------
Domain model for farm tasks (chores, inspections, deliveries).
"""

from dataclasses import dataclass
from typing import Optional

from models.mapping import DomainRecord, EntitySchema, FieldSpec, normalize_relation, to_bool, to_int


@dataclass
class Task(DomainRecord):
    """
    Represents a task scheduled on a farm.

    Attributes:
        id: Record store id (None for new records).
        title: Short title, also used as the record's display name.
        description: Optional details.
        due_date: ISO timestamp the task is due.
        priority: 'low' | 'medium' | 'high'.
        completed: Whether the task is done.
        recurring: Whether the task repeats.
        farm_id: Id of the owning farm, always a string once read.
    """
    title: Optional[str] = None
    description: Optional[str] = None
    due_date: Optional[str] = None
    priority: Optional[str] = None
    completed: bool = False
    recurring: bool = False
    farm_id: Optional[str] = None
    id: Optional[int] = None

    def __str__(self) -> str:
        status = "✅" if self.completed else "⏳"
        return f"{status} {self.title} (due {self.due_date}, {self.priority})"


TASK_SCHEMA = EntitySchema(
    table="tasks_c",
    model=Task,
    fields=(
        FieldSpec("title_c", "title"),
        FieldSpec("description_c", "description"),
        FieldSpec("dueDate_c", "due_date"),
        FieldSpec("priority_c", "priority"),
        FieldSpec("completed_c", "completed", read=to_bool, write=to_bool),
        FieldSpec("recurring_c", "recurring"),
        FieldSpec("farmId_c", "farm_id", read=normalize_relation, write=to_int),
    ),
    name_source="title",
)
