# (c) Copyright Datacraft, 2026
"""Clients API router."""
import uuid
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from officeflow.core.db.engine import get_db
from officeflow.core.features.organizations.dependencies import OrganizationId

from .db import api as db_api
from .schema import Client, ClientCreate, ClientUpdate

router = APIRouter(prefix="/users/clients", tags=["Clients"])


@router.get("", response_model=list[Client])
async def list_clients(
	session: Annotated[AsyncSession, Depends(get_db)],
	organization_id: OrganizationId,
):
	clients = await db_api.list_clients(session, organization_id)
	return [Client.model_validate(c) for c in clients]


@router.post("", response_model=Client, status_code=status.HTTP_201_CREATED)
async def create_client(
	data: ClientCreate,
	session: Annotated[AsyncSession, Depends(get_db)],
	organization_id: OrganizationId,
):
	"""Register a client. Duplicate submissions create duplicate rows."""
	client = await db_api.create_client(
		session,
		organization_id,
		first_name=data.first_name,
		last_name=data.last_name,
		email=str(data.email),
		phone=data.phone,
		firm_name=data.firm_name,
		firm_address=data.firm_address,
	)
	await session.commit()

	return Client.model_validate(client)


@router.get("/{client_id}", response_model=Client)
async def get_client(
	client_id: uuid.UUID,
	session: Annotated[AsyncSession, Depends(get_db)],
	organization_id: OrganizationId,
):
	client = await db_api.get_client(session, client_id, organization_id)
	if not client:
		raise HTTPException(
			status_code=status.HTTP_404_NOT_FOUND,
			detail="Not found",
		)

	return Client.model_validate(client)


@router.put("/{client_id}", response_model=Client)
async def update_client(
	client_id: uuid.UUID,
	data: ClientUpdate,
	session: Annotated[AsyncSession, Depends(get_db)],
	organization_id: OrganizationId,
):
	updates = data.model_dump()
	if updates["email"] is not None:
		updates["email"] = str(updates["email"])

	client = await db_api.update_client(session, client_id, organization_id, **updates)
	await session.commit()

	if not client:
		raise HTTPException(
			status_code=status.HTTP_404_NOT_FOUND,
			detail="Not found",
		)

	return Client.model_validate(client)


@router.delete("/{client_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_client(
	client_id: uuid.UUID,
	session: Annotated[AsyncSession, Depends(get_db)],
	organization_id: OrganizationId,
):
	await db_api.delete_client(session, client_id, organization_id)
	await session.commit()
