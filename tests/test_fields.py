"""Tests for field management."""
from venuebook.models import Field
from tests.conftest import API


async def test_create_field(client, owner_headers, venue):
    res = await client.post(
        f"{API}/venues/{venue['id']}/fields",
        json={"name": "Court B", "type": "basketball"},
        headers=owner_headers,
    )

    assert res.status_code == 201
    data = res.json()["data"]
    assert data["venue_id"] == venue["id"]
    assert data["type"] == "basketball"


async def test_create_field_rejects_unknown_type(client, owner_headers, venue, count_rows):
    res = await client.post(
        f"{API}/venues/{venue['id']}/fields",
        json={"name": "Court B", "type": "cricket"},
        headers=owner_headers,
    )

    assert res.status_code == 422
    assert await count_rows(Field) == 0


async def test_create_field_in_missing_venue_returns_404(client, owner_headers):
    res = await client.post(
        f"{API}/venues/999/fields",
        json={"name": "Court B", "type": "soccer"},
        headers=owner_headers,
    )

    assert res.status_code == 404


async def test_list_fields_filters_by_venue(client, owner_headers, venue, field):
    other = await client.post(
        f"{API}/venues",
        json={"name": "Other", "phone": "0811", "address": "Jl. Lain"},
        headers=owner_headers,
    )
    other_id = other.json()["data"]["id"]
    await client.post(
        f"{API}/venues/{other_id}/fields",
        json={"name": "Court Z", "type": "volleyball"},
        headers=owner_headers,
    )

    res = await client.get(f"{API}/venues/{venue['id']}/fields", headers=owner_headers)

    assert res.status_code == 200
    assert [f["id"] for f in res.json()["data"]] == [field["id"]]


async def test_show_field(client, owner_headers, venue, field):
    res = await client.get(f"{API}/venues/{venue['id']}/fields/{field['id']}", headers=owner_headers)

    assert res.status_code == 200
    assert res.json()["data"]["name"] == "Court A"


async def test_show_field_under_wrong_venue_returns_404(client, owner_headers, field):
    res = await client.get(f"{API}/venues/999/fields/{field['id']}", headers=owner_headers)

    assert res.status_code == 404


async def test_update_field(client, owner_headers, venue, field):
    res = await client.put(
        f"{API}/venues/{venue['id']}/fields/{field['id']}",
        json={"name": "Court A2", "type": "minisoccer"},
        headers=owner_headers,
    )

    assert res.status_code == 200
    data = res.json()["data"]
    assert data["name"] == "Court A2"
    assert data["type"] == "minisoccer"


async def test_update_field_in_missing_venue_returns_404(client, owner_headers, field):
    res = await client.put(
        f"{API}/venues/999/fields/{field['id']}",
        json={"name": "Court A2", "type": "minisoccer"},
        headers=owner_headers,
    )

    assert res.status_code == 404


async def test_delete_field(client, owner_headers, venue, field, count_rows):
    res = await client.delete(f"{API}/venues/{venue['id']}/fields/{field['id']}", headers=owner_headers)

    assert res.status_code == 200
    assert await count_rows(Field) == 0


async def test_field_mutations_on_another_owners_venue_are_forbidden(
    client, create_account, venue, field, count_rows
):
    other = await create_account("other@example.com", role="owner")
    fields_url = f"{API}/venues/{venue['id']}/fields"

    created = await client.post(fields_url, json={"name": "Court X", "type": "soccer"}, headers=other)
    updated = await client.put(
        f"{fields_url}/{field['id']}", json={"name": "Taken", "type": "soccer"}, headers=other
    )
    deleted = await client.delete(f"{fields_url}/{field['id']}", headers=other)

    assert created.status_code == 403
    assert updated.status_code == 403
    assert deleted.status_code == 403
    assert await count_rows(Field) == 1

    res = await client.get(f"{fields_url}/{field['id']}", headers=other)
    assert res.json()["data"]["name"] == "Court A"
    assert res.json()["data"]["type"] == "futsal"
