"""Tests for the HTTP client end to end through the ASGI app."""
import httpx
import pytest


async def test_info(api_client):
    assert await api_client.info() == {"message": "Dream Vacation API is running!"}


async def test_japan_scenario(api_client):
    created = await api_client.create_destination("Japan")
    assert created["country"] == "Japan"
    assert created["capital"] == "Unknown"
    assert created["population"] == 0
    assert created["region"] == "Unknown"
    assert created["id"] is not None

    listed = await api_client.list_destinations()
    assert listed[0]["id"] == created["id"]

    await api_client.delete_destination(created["id"])
    assert all(d["id"] != created["id"] for d in await api_client.list_destinations())


async def test_create_missing_country_raises(api_client):
    with pytest.raises(httpx.HTTPStatusError) as exc_info:
        await api_client.create_destination("")
    assert exc_info.value.response.status_code == 400
    assert exc_info.value.response.json() == {"error": "Country is required"}


async def test_base_url_trailing_slash():
    from planner.api_client import DestinationsClient

    client = DestinationsClient("http://localhost:5000/")
    assert client.base_url == "http://localhost:5000"
    await client.close()
