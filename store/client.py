"""
store/client.py
---------------
Async HTTP client for the hosted record store.
Also manages the process-wide client handle used by the entry point.
"""

from typing import Any, Optional

import httpx

from config import (
    RECORD_STORE_API_KEY,
    RECORD_STORE_PROJECT_ID,
    RECORD_STORE_TIMEOUT,
    RECORD_STORE_URL,
)
from store.results import StoreResponse
from utils.logger import get_logger

logger = get_logger(__name__)


class RecordStoreClient:
    """
    Thin wrapper around the record store's REST API.

    Every primitive returns a parsed StoreResponse. HTTP status errors and
    transport errors propagate as httpx exceptions; callers decide how to
    degrade. There is no retry logic here.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        project_id: str = "",
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.project_id = project_id
        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None
        self._closed = False

    @property
    def is_available(self) -> bool:
        """True when the client is configured and has not been closed."""
        return bool(self.base_url and self.api_key) and not self._closed

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create the pooled HTTP client."""
        if self._client is None or self._client.is_closed:
            headers = {"Authorization": f"Bearer {self.api_key}"}
            if self.project_id:
                headers["X-Project-Id"] = self.project_id
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                headers=headers,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close HTTP connections; the client is unavailable afterwards."""
        self._closed = True
        if self._client and not self._client.is_closed:
            await self._client.aclose()
        self._client = None

    async def _request(self, method: str, path: str, body: Optional[dict] = None) -> StoreResponse:
        client = self._get_client()
        response = await client.request(method, path, json=body)
        response.raise_for_status()
        return StoreResponse.from_json(response.json())

    # ── Primitives ────────────────────────────────────────

    async def fetch_records(self, table: str, query: dict) -> StoreResponse:
        """Fetch every record of `table` matching `query`."""
        return await self._request("POST", f"/tables/{table}/records/fetch", query)

    async def get_record_by_id(self, table: str, record_id: int, query: dict) -> StoreResponse:
        """Fetch a single record; `data` is None when it does not exist."""
        return await self._request("POST", f"/tables/{table}/records/{record_id}/fetch", query)

    async def create_record(self, table: str, params: dict[str, Any]) -> StoreResponse:
        """Create `params["records"]`; answers with one result per record."""
        return await self._request("POST", f"/tables/{table}/records", params)

    async def update_record(self, table: str, params: dict[str, Any]) -> StoreResponse:
        """Update `params["records"]` (each carrying its `Id`)."""
        return await self._request("PUT", f"/tables/{table}/records", params)

    async def delete_record(self, table: str, params: dict[str, Any]) -> StoreResponse:
        """Delete `params["RecordIds"]`."""
        return await self._request("DELETE", f"/tables/{table}/records", params)


# ── Process-wide handle ───────────────────────────────────

_client: RecordStoreClient | None = None


def init_client() -> Optional[RecordStoreClient]:
    """
    Create the shared client from configuration.

    Returns:
        The client, or None when the store URL or API key is missing.
    """
    global _client
    if _client is not None:
        return _client
    if not RECORD_STORE_URL or not RECORD_STORE_API_KEY:
        logger.error("Record store is not configured (RECORD_STORE_URL / RECORD_STORE_API_KEY).")
        return None
    _client = RecordStoreClient(
        base_url=RECORD_STORE_URL,
        api_key=RECORD_STORE_API_KEY,
        project_id=RECORD_STORE_PROJECT_ID,
        timeout=RECORD_STORE_TIMEOUT,
    )
    logger.info("Record store client initialized.")
    return _client


def get_client() -> Optional[RecordStoreClient]:
    """Return the shared client, or None if it has not been initialized."""
    return _client


async def close_client() -> None:
    """Close the shared client."""
    global _client
    if _client is not None:
        await _client.close()
        _client = None
        logger.info("Record store client closed.")
