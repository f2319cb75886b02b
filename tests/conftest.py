# (c) Copyright Datacraft, 2026
"""Shared fixtures: SQLite database, in-memory document store, API client."""
import copy
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from uuid_extensions import uuid7str

from officeflow.app import app
from officeflow.core.db import models  # noqa: F401
from officeflow.core.db.base import Base
from officeflow.core.db.cosmos import DocumentConflictError, get_document_store
from officeflow.core.db.engine import get_db
from officeflow.core.features.organizations.db.orm import Organization


class InMemoryDocumentStore:
	"""Stand-in for the Cosmos document store, keyed by (partition key, id)."""

	def __init__(self):
		self.items: dict[tuple[str, str], dict[str, Any]] = {}

	async def query_items(
		self,
		query: str,
		parameters: list[dict[str, Any]] | None = None,
	) -> list[dict[str, Any]]:
		params = {p["name"]: p["value"] for p in parameters or []}
		documents = list(self.items.values())
		if "@tenantId" in params:
			documents = [d for d in documents if d["partitionKey"] == params["@tenantId"]]
		if "@status" in params:
			documents = [d for d in documents if d["status"] == params["@status"]]
		documents.sort(key=lambda d: d["metadata"]["createdAt"], reverse=True)
		return copy.deepcopy(documents)

	async def read_item(self, item_id: str, partition_key: str) -> dict[str, Any] | None:
		document = self.items.get((partition_key, item_id))
		return copy.deepcopy(document)

	async def create_item(self, body: dict[str, Any]) -> dict[str, Any]:
		stored = {**copy.deepcopy(body), "_etag": uuid7str(), "_rid": "rid", "_ts": 1}
		self.items[(body["partitionKey"], body["id"])] = stored
		return copy.deepcopy(stored)

	async def replace_item(
		self,
		item_id: str,
		body: dict[str, Any],
		etag: str | None = None,
	) -> dict[str, Any]:
		key = (body["partitionKey"], item_id)
		current = self.items[key]
		if etag and current["_etag"] != etag:
			raise DocumentConflictError(item_id)
		stored = {**copy.deepcopy(body), "_etag": uuid7str(), "_rid": "rid", "_ts": 2}
		self.items[key] = stored
		return copy.deepcopy(stored)

	async def delete_item(self, item_id: str, partition_key: str) -> bool:
		return self.items.pop((partition_key, item_id), None) is not None


@pytest.fixture
async def db_engine(tmp_path):
	engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'officeflow.db'}")
	async with engine.begin() as conn:
		await conn.run_sync(Base.metadata.create_all)
	yield engine
	await engine.dispose()


@pytest.fixture
def session_factory(db_engine) -> async_sessionmaker[AsyncSession]:
	return async_sessionmaker(db_engine, expire_on_commit=False)


@pytest.fixture
async def db_session(session_factory):
	async with session_factory() as session:
		yield session


@pytest.fixture
async def make_organization(db_session: AsyncSession):
	"""Factory fixture for creating organizations."""
	async def _make_organization(name: str = "Acme Legal") -> Organization:
		organization = Organization(name=name)
		db_session.add(organization)
		await db_session.commit()
		await db_session.refresh(organization)
		return organization

	return _make_organization


@pytest.fixture
async def organization(make_organization) -> Organization:
	return await make_organization()


@pytest.fixture
def document_store() -> InMemoryDocumentStore:
	return InMemoryDocumentStore()


@pytest.fixture
async def api_client(session_factory, document_store, organization):
	async def override_get_db():
		async with session_factory() as session:
			yield session

	app.dependency_overrides[get_db] = override_get_db
	app.dependency_overrides[get_document_store] = lambda: document_store

	async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
		yield client

	app.dependency_overrides.clear()
