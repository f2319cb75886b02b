# (c) Copyright Datacraft, 2026
"""Cosmos DB document store."""
import logging
import threading
from typing import Any

from azure.core import MatchConditions
from azure.cosmos.aio import ContainerProxy, CosmosClient
from azure.cosmos.exceptions import (
	CosmosAccessConditionFailedError,
	CosmosResourceNotFoundError,
)

from officeflow.core.config import get_settings

logger = logging.getLogger(__name__)


class DocumentConflictError(Exception):
	"""Stored document changed since it was read."""


class DocumentStore:
	"""Thin async wrapper around one Cosmos container.

	Not-found and precondition failures are translated so callers never
	handle SDK exceptions directly.
	"""

	def __init__(self, container: ContainerProxy):
		self._container = container

	async def query_items(
		self,
		query: str,
		parameters: list[dict[str, Any]] | None = None,
	) -> list[dict[str, Any]]:
		items = self._container.query_items(query=query, parameters=parameters or [])
		return [item async for item in items]

	async def read_item(self, item_id: str, partition_key: str) -> dict[str, Any] | None:
		try:
			return await self._container.read_item(item=item_id, partition_key=partition_key)
		except CosmosResourceNotFoundError:
			return None

	async def create_item(self, body: dict[str, Any]) -> dict[str, Any]:
		return await self._container.create_item(body=body)

	async def replace_item(
		self,
		item_id: str,
		body: dict[str, Any],
		etag: str | None = None,
	) -> dict[str, Any]:
		"""Replace a document, only if its etag still matches when given."""
		kwargs = {}
		if etag:
			kwargs = {"etag": etag, "match_condition": MatchConditions.IfNotModified}
		try:
			return await self._container.replace_item(item=item_id, body=body, **kwargs)
		except CosmosAccessConditionFailedError as e:
			raise DocumentConflictError(item_id) from e

	async def delete_item(self, item_id: str, partition_key: str) -> bool:
		try:
			await self._container.delete_item(item=item_id, partition_key=partition_key)
		except CosmosResourceNotFoundError:
			return False
		return True


_client: CosmosClient | None = None
_stores: dict[str, DocumentStore] = {}
_lock = threading.Lock()


def _get_client() -> CosmosClient:
	global _client
	if _client is None:
		settings = get_settings()
		if not settings.cosmosdb_connection_string:
			raise RuntimeError("COSMOSDB_CONNECTION_STRING is not configured")
		_client = CosmosClient.from_connection_string(settings.cosmosdb_connection_string)
		logger.info("Cosmos client created")
	return _client


def get_container_store(name: str) -> DocumentStore:
	"""Return the memoized store for a container, creating it on first use."""
	store = _stores.get(name)
	if store is not None:
		return store

	with _lock:
		store = _stores.get(name)
		if store is None:
			database = _get_client().get_database_client(get_settings().cosmosdb_database_name)
			store = DocumentStore(database.get_container_client(name))
			_stores[name] = store

	return store


def get_document_store() -> DocumentStore:
	return get_container_store(get_settings().cosmosdb_documents_container)


async def close_cosmos() -> None:
	global _client
	with _lock:
		client, _client = _client, None
		_stores.clear()
	if client is not None:
		await client.close()
		logger.info("Cosmos client closed")
