"""
Record store client tests.

Requests are served by httpx.MockTransport so that paths, methods,
headers and bodies can be asserted without a network.
"""

import json

import httpx
import pytest

from store.client import RecordStoreClient


def make_client(handler) -> RecordStoreClient:
    return RecordStoreClient(
        base_url="https://store.example.com/api/",
        api_key="secret",
        project_id="proj-1",
        transport=httpx.MockTransport(handler),
    )


@pytest.mark.asyncio
async def test_fetch_records_sends_query_with_auth() -> None:
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["path"] = request.url.path
        seen["auth"] = request.headers["Authorization"]
        seen["project"] = request.headers["X-Project-Id"]
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"success": True, "data": [{"Id": 1, "Name": "Oak"}]})

    client = make_client(handler)
    response = await client.fetch_records("farms_c", {"fields": [{"field": {"Name": "Id"}}]})
    await client.close()

    assert seen["method"] == "POST"
    assert seen["path"] == "/api/tables/farms_c/records/fetch"
    assert seen["auth"] == "Bearer secret"
    assert seen["project"] == "proj-1"
    assert seen["body"] == {"fields": [{"field": {"Name": "Id"}}]}
    assert response.success is True
    assert response.data == [{"Id": 1, "Name": "Oak"}]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "call, method, path",
    [
        ("get", "POST", "/api/tables/tasks_c/records/4/fetch"),
        ("create", "POST", "/api/tables/tasks_c/records"),
        ("update", "PUT", "/api/tables/tasks_c/records"),
        ("delete", "DELETE", "/api/tables/tasks_c/records"),
    ],
)
async def test_primitives_routes(call: str, method: str, path: str) -> None:
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["path"] = request.url.path
        return httpx.Response(200, json={"success": True, "results": []})

    client = make_client(handler)
    if call == "get":
        await client.get_record_by_id("tasks_c", 4, {})
    elif call == "create":
        await client.create_record("tasks_c", {"records": [{}]})
    elif call == "update":
        await client.update_record("tasks_c", {"records": [{"Id": 4}]})
    else:
        await client.delete_record("tasks_c", {"RecordIds": [4]})
    await client.close()

    assert seen == {"method": method, "path": path}


@pytest.mark.asyncio
async def test_server_error_raises() -> None:
    client = make_client(lambda request: httpx.Response(503, json={"message": "down"}))
    with pytest.raises(httpx.HTTPStatusError):
        await client.fetch_records("farms_c", {})
    await client.close()


@pytest.mark.asyncio
async def test_availability() -> None:
    assert not RecordStoreClient(base_url="", api_key="k").is_available
    assert not RecordStoreClient(base_url="https://x", api_key="").is_available

    client = make_client(lambda request: httpx.Response(200, json={"success": True}))
    assert client.is_available
    await client.close()
    assert not client.is_available
