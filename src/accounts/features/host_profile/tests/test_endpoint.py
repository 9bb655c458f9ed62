import pytest

from src.accounts.urls import HOST_PROFILE_URL


@pytest.mark.asyncio
async def test_get_profile_of_new_host(host_client):
    response = await host_client.get(HOST_PROFILE_URL)

    assert response.status_code == 200
    data = response.json()
    assert data["email"] == "host@example.com"
    assert data["verified"] is False
    assert data["preferredName"] is None


@pytest.mark.asyncio
async def test_update_profile_changes_only_sent_fields(host_client):
    await host_client.put(HOST_PROFILE_URL, json={"firstName": "Ada", "lastName": "Lovelace"})

    response = await host_client.put(HOST_PROFILE_URL, json={"preferredName": "Ada L."})

    assert response.status_code == 200
    data = response.json()
    assert data["preferredName"] == "Ada L."
    assert data["firstName"] == "Ada"
    assert data["lastName"] == "Lovelace"


@pytest.mark.asyncio
async def test_profile_requires_a_session(client):
    response = await client.get(HOST_PROFILE_URL)

    assert response.status_code == 401
