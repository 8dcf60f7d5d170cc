"""
repositories/base_repo.py
-------------------------
Generic, schema-mapped CRUD repository over the record store.

Every public operation is a coroutine that never raises: failures are
logged, surfaced through the injected reporter where the user should see
them, and converted to the operation's failure value ([], None or False).
"""

from typing import Any, Generic, Optional, TypeVar

from models.mapping import EntitySchema
from reporting.reporter import LogReporter, Reporter
from store.client import RecordStoreClient
from store.query import Operator, Query
from store.results import RecordResult, StoreResponse, partition_results
from utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class RecordNotFoundError(LookupError):
    """Raised inside a repository when a record it must modify does not exist."""


class RecordReadError(RuntimeError):
    """Raised inside a repository when the store rejects a read (already reported)."""


class RecordRepository(Generic[T]):
    """
    Base repository bound to one EntitySchema.

    Subclasses set `schema`, `entity_name` and `entity_plural`.
    """

    schema: EntitySchema
    entity_name: str = "record"
    entity_plural: str = "records"

    def __init__(self, client: Optional[RecordStoreClient], reporter: Optional[Reporter] = None):
        self.client = client
        self.reporter: Reporter = reporter or LogReporter()

    # ── READ ──────────────────────────────────────────────

    async def get_all(self) -> list[T]:
        """
        Fetch every record of the table.

        Returns:
            Domain objects in the store's native order, or [] on failure.
        """
        return await self._fetch(self._query(), f"fetching {self.entity_plural}")

    async def get_by_id(self, record_id: Any) -> Optional[T]:
        """
        Fetch a single record.

        Args:
            record_id: Record id, anything `int()` accepts.

        Returns:
            The domain object, or None if it does not exist or the call failed.
        """
        client = self._resolve_client()
        if client is None:
            return None
        try:
            return await self._read(client, record_id)
        except RecordReadError:
            return None
        except Exception as e:
            logger.error(f"Error fetching {self.entity_name} {record_id}: {e}")
            return None

    # ── CREATE ────────────────────────────────────────────

    async def create(self, obj: T) -> Optional[T]:
        """
        Create a record from a domain object.

        Returns:
            The created object echoing the server-assigned id, or None.
        """
        client = self._resolve_client()
        if client is None:
            return None
        try:
            record = self._prepare_create(self.schema.to_external(obj))
            response = await client.create_record(self.schema.table, {"records": [record]})
            created = self._settle(response, "create")
            if created is None:
                return None
            result = self.schema.to_domain(created.data or {})
            logger.info(f"Created {self.entity_name} #{result.id}")
            return result
        except Exception as e:
            logger.error(f"Error creating {self.entity_name}: {e}")
            return None

    # ── UPDATE ────────────────────────────────────────────

    async def update(self, record_id: Any, obj: T) -> Optional[T]:
        """
        Overwrite a record with every field of `obj`.

        Returns:
            The updated object, or None.
        """
        client = self._resolve_client()
        if client is None:
            return None
        try:
            record = self.schema.to_external(obj, record_id=record_id)
            response = await client.update_record(self.schema.table, {"records": [record]})
            updated = self._settle(response, "update")
            if updated is None:
                return None
            return self.schema.to_domain(updated.data or {})
        except Exception as e:
            logger.error(f"Error updating {self.entity_name} {record_id}: {e}")
            return None

    # ── DELETE ────────────────────────────────────────────

    async def delete(self, record_id: Any) -> bool:
        """
        Delete a record.

        Returns:
            True if the store reports the record deleted, False otherwise.
        """
        client = self._resolve_client()
        if client is None:
            return False
        try:
            response = await client.delete_record(
                self.schema.table, {"RecordIds": [int(record_id)]}
            )
            deleted = self._settle(response, "delete") is not None
            if deleted:
                logger.info(f"Deleted {self.entity_name} #{record_id}")
            return deleted
        except Exception as e:
            logger.error(f"Error deleting {self.entity_name} {record_id}: {e}")
            return False

    # ── HELPERS ───────────────────────────────────────────

    def _resolve_client(self) -> Optional[RecordStoreClient]:
        """Return the client, or None (logged) when it cannot be used."""
        if self.client is None or not self.client.is_available:
            logger.error("Record store client not available")
            return None
        return self.client

    async def _read(self, client: RecordStoreClient, record_id: Any) -> Optional[T]:
        """
        Read one record.

        Returns:
            The domain object, or None only when the store answered and the
            record does not exist.

        Raises:
            RecordReadError: The store rejected the request (already reported).
        """
        response = await client.get_record_by_id(
            self.schema.table, int(record_id), self._query().to_params()
        )
        if not response.success:
            self._reject(response)
            raise RecordReadError(response.message or f"Read from {self.schema.table} rejected")
        if not response.data:
            return None
        return self.schema.to_domain(response.data)

    def _query(self) -> Query:
        return Query(fields=self.schema.selection())

    def _prepare_create(self, record: dict) -> dict:
        """Hook for entity-specific defaults on creation."""
        return record

    async def _fetch(self, query: Query, action: str) -> list[T]:
        client = self._resolve_client()
        if client is None:
            return []
        try:
            response = await client.fetch_records(self.schema.table, query.to_params())
            if not response.success:
                self._reject(response)
                return []
            return [self.schema.to_domain(r) for r in response.data or []]
        except Exception as e:
            logger.error(f"Error {action}: {e}")
            return []

    def _reject(self, response: StoreResponse) -> None:
        message = response.message or f"Request to {self.schema.table} was rejected"
        logger.error(message)
        self.reporter.error(message)

    def _settle(self, response: StoreResponse, verb: str) -> Optional[RecordResult]:
        """
        Partition a bulk write response and report every failed record.

        Returns:
            The first succeeded result, or None if nothing succeeded.
        """
        if not response.success:
            self._reject(response)
            return None
        if response.results is None:
            return None

        outcome = partition_results(response.results)
        if outcome.failed:
            logger.error(
                f"Failed to {verb} {len(outcome.failed)} {self.schema.table} records"
            )
            for failed in outcome.failed:
                messages = failed.error_messages() or [f"Failed to {verb} {self.entity_name}"]
                for message in messages:
                    self.reporter.error(message)

        return outcome.succeeded[0] if outcome.any_succeeded else None


class FarmScopedRepository(RecordRepository[T]):
    """Repository for entities that belong to a farm through `farmId_c`."""

    async def get_by_farm_id(self, farm_id: Any) -> list[T]:
        """
        Fetch every record belonging to one farm.

        Returns:
            Domain objects whose `farm_id` equals `farm_id`, or [] on failure.
        """
        action = f"fetching {self.entity_plural} by farm {farm_id}"
        try:
            query = self._query().filter(
                self.schema.external_name("farm_id"), Operator.EQUAL_TO, int(farm_id)
            )
        except (TypeError, ValueError) as e:
            logger.error(f"Error {action}: {e}")
            return []
        return await self._fetch(query, action)
