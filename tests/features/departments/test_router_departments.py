# (c) Copyright Datacraft, 2026
"""
Departments router tests.
"""
import uuid

from httpx import AsyncClient
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from officeflow.core.features.departments.db.orm import Department


async def test_create_and_list_departments(api_client: AsyncClient):
	response = await api_client.post(
		"/departments",
		json={"name": "Litigation", "description": "Court cases"},
	)
	assert response.status_code == 201, response.json()
	created = response.json()
	assert created["isActive"] is True

	response = await api_client.get("/departments")

	assert response.status_code == 200
	assert response.json() == [created]


async def test_create_department_invalid_body(
	api_client: AsyncClient,
	db_session: AsyncSession,
):
	response = await api_client.post("/departments", json={"description": "No name"})

	assert response.status_code == 400
	assert "name" in response.json()["error"]["fieldErrors"]

	count = await db_session.scalar(select(func.count(Department.id)))
	assert count == 0


async def test_update_department_description_only(api_client: AsyncClient):
	created = (
		await api_client.post("/departments", json={"name": "Tax", "description": "Old"})
	).json()

	response = await api_client.put(
		f"/departments/{created['id']}",
		json={"description": "New"},
	)

	assert response.status_code == 200, response.json()
	assert response.json()["name"] == "Tax"
	assert response.json()["description"] == "New"


async def test_get_missing_department(api_client: AsyncClient):
	response = await api_client.get(f"/departments/{uuid.uuid4()}")

	assert response.status_code == 404


async def test_delete_department(api_client: AsyncClient):
	created = (await api_client.post("/departments", json={"name": "Tax"})).json()

	response = await api_client.delete(f"/departments/{created['id']}")
	assert response.status_code == 204

	response = await api_client.delete(f"/departments/{created['id']}")
	assert response.status_code == 204

	response = await api_client.get("/departments")
	assert response.json() == []
