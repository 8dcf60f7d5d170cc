"""
repositories/task_repo.py
-------------------------
Data access layer for farm tasks (`tasks_c`).
"""

from dataclasses import replace
from datetime import datetime, timedelta
from typing import Any, Optional

from config import UPCOMING_TASK_DAYS
from models.task import TASK_SCHEMA, Task
from repositories.base_repo import FarmScopedRepository, RecordNotFoundError
from store.query import Operator, SortType
from utils.dates import to_iso, utc_now
from utils.logger import get_logger

logger = get_logger(__name__)


class TaskRepository(FarmScopedRepository[Task]):
    """Repository for CRUD operations on the tasks table."""

    schema = TASK_SCHEMA
    entity_name = "task"
    entity_plural = "tasks"

    async def get_upcoming(
        self, now: Optional[datetime] = None, days: int = UPCOMING_TASK_DAYS
    ) -> list[Task]:
        """
        Fetch incomplete tasks due within the next `days` days.

        Args:
            now: Start of the window (defaults to the current UTC time).
            days: Window length in days.

        Returns:
            Tasks with due date in [now, now + days], ascending by due date.
        """
        start = now or utc_now()
        end = start + timedelta(days=days)
        due = self.schema.external_name("due_date")
        query = (
            self._query()
            .filter(self.schema.external_name("completed"), Operator.EQUAL_TO, False)
            .filter(due, Operator.LESS_THAN_OR_EQUAL_TO, to_iso(end))
            .filter(due, Operator.GREATER_THAN_OR_EQUAL_TO, to_iso(start))
            .sort(due, SortType.ASC)
        )
        return await self._fetch(query, "fetching upcoming tasks")

    async def toggle_complete(self, task_id: Any) -> Optional[Task]:
        """
        Flip a task's `completed` flag.

        Reads the task, then writes it back with the flag inverted. A
        concurrent update between the two calls is overwritten.

        Returns:
            The updated task, or None. Only a task the store confirms missing
            is reported as "Task not found"; read failures are reported by the
            read itself or only logged.
        """
        client = self._resolve_client()
        if client is None:
            return None
        try:
            current = await self._read(client, task_id)
            if current is None:
                raise RecordNotFoundError(f"Task {task_id} not found")
            return await self.update(task_id, replace(current, completed=not current.completed))
        except RecordNotFoundError as e:
            logger.error(f"Error toggling task completion: {e}")
            self.reporter.error("Task not found")
            return None
        except Exception as e:
            logger.error(f"Error toggling task completion for {task_id}: {e}")
            return None

    def _prepare_create(self, record: dict) -> dict:
        # New tasks always start open.
        record[self.schema.external_name("completed")] = False
        return record
