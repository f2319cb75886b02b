# (c) Copyright Datacraft, 2026
"""Documents API router."""
from typing import Annotated, Any

from fastapi import APIRouter, Depends, HTTPException, Query, status

from officeflow.core.db.cosmos import DocumentConflictError, DocumentStore, get_document_store

from .db import api as db_api
from .schema import DocumentCreate, DocumentStatus, DocumentUpdate

router = APIRouter(prefix="/documents", tags=["Documents"])

Store = Annotated[DocumentStore, Depends(get_document_store)]


@router.get("", response_model=list[dict[str, Any]])
async def list_documents(
	store: Store,
	tenant_id: Annotated[str | None, Query(alias="tenantId")] = None,
	doc_status: Annotated[DocumentStatus | None, Query(alias="status")] = None,
):
	"""List documents, newest first, optionally by tenant and status."""
	documents = await db_api.list_documents(
		store,
		tenant_id=tenant_id,
		status=doc_status.value if doc_status else None,
	)
	return [db_api.public_view(d) for d in documents]


@router.get("/{document_id}", response_model=dict[str, Any])
async def get_document(
	document_id: str,
	store: Store,
	pk: Annotated[str, Query(min_length=1)],
):
	document = await db_api.get_document(store, document_id, pk)
	if document is None:
		raise HTTPException(
			status_code=status.HTTP_404_NOT_FOUND,
			detail="Not found",
		)

	return db_api.public_view(document)


@router.post("", response_model=dict[str, Any], status_code=status.HTTP_201_CREATED)
async def create_document(
	data: DocumentCreate,
	store: Store,
):
	document = await db_api.create_document(store, data)
	return db_api.public_view(document)


@router.put("/{document_id}", response_model=dict[str, Any])
async def update_document(
	document_id: str,
	data: DocumentUpdate,
	store: Store,
):
	"""Merge the submitted fields over the stored document."""
	try:
		document = await db_api.update_document(store, document_id, data)
	except DocumentConflictError:
		raise HTTPException(
			status_code=status.HTTP_409_CONFLICT,
			detail="Version conflict",
		)

	if document is None:
		raise HTTPException(
			status_code=status.HTTP_404_NOT_FOUND,
			detail="Not found",
		)

	return db_api.public_view(document)


@router.delete("/{document_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_document(
	document_id: str,
	store: Store,
	pk: Annotated[str, Query(min_length=1)],
):
	await db_api.delete_document(store, document_id, pk)
