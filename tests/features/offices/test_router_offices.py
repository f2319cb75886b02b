# (c) Copyright Datacraft, 2026
"""
Offices router tests.
"""
import uuid

from httpx import AsyncClient
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from officeflow.core.features.offices.db.orm import Office


async def test_list_offices_empty(api_client: AsyncClient):
	response = await api_client.get("/offices")

	assert response.status_code == 200, response.json()
	assert response.json() == []


async def test_create_office(
	api_client: AsyncClient,
	db_session: AsyncSession,
	organization,
):
	response = await api_client.post(
		"/offices",
		json={
			"name": "Berlin",
			"address": "Unter den Linden 1",
			"city": "Berlin",
			"country": "DE",
			"timeZone": "Europe/Berlin",
			"isActive": False,
		},
	)

	assert response.status_code == 201, response.json()
	data = response.json()
	assert data["name"] == "Berlin"
	assert data["timeZone"] == "Europe/Berlin"
	assert data["isActive"] is True
	assert data["organizationId"] == str(organization.id)
	assert uuid.UUID(data["id"])

	count = await db_session.scalar(select(func.count(Office.id)))
	assert count == 1


async def test_create_office_invalid_body(
	api_client: AsyncClient,
	db_session: AsyncSession,
):
	response = await api_client.post("/offices", json={"city": "Berlin"})

	assert response.status_code == 400
	assert "name" in response.json()["error"]["fieldErrors"]

	count = await db_session.scalar(select(func.count(Office.id)))
	assert count == 0


async def test_get_office(api_client: AsyncClient):
	created = (await api_client.post("/offices", json={"name": "Paris"})).json()

	response = await api_client.get(f"/offices/{created['id']}")

	assert response.status_code == 200, response.json()
	assert response.json() == created


async def test_get_office_not_found(api_client: AsyncClient):
	response = await api_client.get(f"/offices/{uuid.uuid4()}")

	assert response.status_code == 404


async def test_get_office_invalid_id(api_client: AsyncClient):
	response = await api_client.get("/offices/not-a-uuid")

	assert response.status_code == 400


async def test_list_offices_newest_first(api_client: AsyncClient):
	for name in ("First", "Second", "Third"):
		await api_client.post("/offices", json={"name": name})

	response = await api_client.get("/offices")

	assert [o["name"] for o in response.json()] == ["Third", "Second", "First"]


async def test_list_offices_is_capped(
	api_client: AsyncClient,
	db_session: AsyncSession,
	organization,
):
	db_session.add_all(
		Office(organization_id=organization.id, name=f"Office {i}") for i in range(205)
	)
	await db_session.commit()

	response = await api_client.get("/offices")

	assert response.status_code == 200
	assert len(response.json()) == 200


async def test_update_only_city(api_client: AsyncClient):
	created = (
		await api_client.post(
			"/offices",
			json={
				"name": "HQ",
				"address": "Main Street 1",
				"city": "Munich",
				"country": "DE",
				"timeZone": "Europe/Berlin",
			},
		)
	).json()

	response = await api_client.put(f"/offices/{created['id']}", json={"city": "Hamburg"})

	assert response.status_code == 200, response.json()
	updated = response.json()
	assert updated["city"] == "Hamburg"
	assert updated["updatedAt"] != created["updatedAt"]
	for field in ("id", "organizationId", "name", "address", "country", "timeZone", "isActive", "createdAt"):
		assert updated[field] == created[field], field


async def test_update_null_keeps_value(api_client: AsyncClient):
	created = (await api_client.post("/offices", json={"name": "HQ", "city": "Munich"})).json()

	response = await api_client.put(
		f"/offices/{created['id']}",
		json={"city": None, "isActive": False},
	)

	assert response.status_code == 200, response.json()
	assert response.json()["city"] == "Munich"
	assert response.json()["isActive"] is False


async def test_update_office_not_found(api_client: AsyncClient):
	response = await api_client.put(f"/offices/{uuid.uuid4()}", json={"city": "Hamburg"})

	assert response.status_code == 404


async def test_update_office_invalid_body(api_client: AsyncClient):
	created = (await api_client.post("/offices", json={"name": "HQ"})).json()

	response = await api_client.put(f"/offices/{created['id']}", json={"name": ""})

	assert response.status_code == 400
	assert "name" in response.json()["error"]["fieldErrors"]


async def test_delete_office(
	api_client: AsyncClient,
	db_session: AsyncSession,
):
	created = (await api_client.post("/offices", json={"name": "HQ"})).json()

	response = await api_client.delete(f"/offices/{created['id']}")
	assert response.status_code == 204

	count = await db_session.scalar(select(func.count(Office.id)))
	assert count == 0

	response = await api_client.get(f"/offices/{created['id']}")
	assert response.status_code == 404


async def test_delete_missing_office_still_succeeds(api_client: AsyncClient):
	response = await api_client.delete(f"/offices/{uuid.uuid4()}")

	assert response.status_code == 204
