# (c) Copyright Datacraft, 2026
"""Documents data access on top of the Cosmos document store."""
import logging
from typing import Any

from uuid_extensions import uuid7str

from officeflow.core.db.cosmos import DocumentConflictError, DocumentStore

from ..schema import DocumentCreate, DocumentUpdate

logger = logging.getLogger(__name__)


def build_list_query(
	tenant_id: str | None = None,
	status: str | None = None,
) -> tuple[str, list[dict[str, Any]]]:
	"""Parameterized listing query; absent filters are left out entirely."""
	conditions = []
	parameters = []

	if tenant_id:
		conditions.append("c.partitionKey = @tenantId")
		parameters.append({"name": "@tenantId", "value": tenant_id})

	if status:
		conditions.append("c.status = @status")
		parameters.append({"name": "@status", "value": status})

	query = "SELECT * FROM c"
	if conditions:
		query += " WHERE " + " AND ".join(conditions)
	query += " ORDER BY c.metadata.createdAt DESC"

	return query, parameters


def public_view(document: dict[str, Any]) -> dict[str, Any]:
	"""Strip Cosmos system properties (``_rid``, ``_etag``, ``_ts``...)."""
	return {key: value for key, value in document.items() if not key.startswith("_")}


async def list_documents(
	store: DocumentStore,
	tenant_id: str | None = None,
	status: str | None = None,
) -> list[dict[str, Any]]:
	query, parameters = build_list_query(tenant_id, status)
	return await store.query_items(query, parameters)


async def get_document(
	store: DocumentStore,
	document_id: str,
	partition_key: str,
) -> dict[str, Any] | None:
	return await store.read_item(document_id, partition_key)


async def create_document(
	store: DocumentStore,
	data: DocumentCreate,
) -> dict[str, Any]:
	body = data.model_dump(mode="json", by_alias=True, exclude_none=True)
	body["id"] = uuid7str()
	document = await store.create_item(body)
	logger.info(f"Document {body['id']} created in partition {data.partition_key}")
	return document


def _merge_updates(data: DocumentUpdate) -> dict[str, Any]:
	updates = data.model_dump(
		mode="json",
		by_alias=True,
		exclude_unset=True,
		exclude_none=True,
		exclude={"metadata", "permissions"},
	)
	# Nested blocks replace the stored ones, so keep their defaults
	if data.metadata is not None:
		updates["metadata"] = data.metadata.model_dump(mode="json", by_alias=True, exclude_none=True)
	if data.permissions is not None:
		updates["permissions"] = data.permissions.model_dump(mode="json", by_alias=True)
	return updates


async def update_document(
	store: DocumentStore,
	document_id: str,
	data: DocumentUpdate,
) -> dict[str, Any] | None:
	"""
	Shallow-merge the submitted fields over the stored document.

	Returns None when the document does not exist. Raises
	DocumentConflictError when the caller's ``metadata.version`` is stale or
	the document changed between read and replace. Every successful update
	increments ``metadata.version``.
	"""
	existing = await store.read_item(document_id, data.partition_key)
	if existing is None:
		return None

	stored_version = existing.get("metadata", {}).get("version", 1)
	if data.metadata is not None and "version" in data.metadata.model_fields_set:
		if data.metadata.version != stored_version:
			raise DocumentConflictError(document_id)

	merged = {**public_view(existing), **_merge_updates(data)}
	merged["id"] = document_id
	merged["metadata"] = {**merged.get("metadata", {}), "version": stored_version + 1}

	return await store.replace_item(document_id, merged, etag=existing.get("_etag"))


async def delete_document(
	store: DocumentStore,
	document_id: str,
	partition_key: str,
) -> None:
	deleted = await store.delete_item(document_id, partition_key)
	if not deleted:
		logger.debug(f"Document {document_id} was already absent")
