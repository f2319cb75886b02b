# (c) Copyright Datacraft, 2026
"""Clients database API."""
import uuid
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from officeflow.core.db import scoped

from .orm import Client


async def list_clients(
	session: AsyncSession,
	organization_id: uuid.UUID,
) -> list[Client]:
	return await scoped.list_scoped(session, Client, organization_id)


async def get_client(
	session: AsyncSession,
	client_id: uuid.UUID,
	organization_id: uuid.UUID,
) -> Client | None:
	return await scoped.get_scoped(session, Client, client_id, organization_id)


async def create_client(
	session: AsyncSession,
	organization_id: uuid.UUID,
	first_name: str,
	last_name: str,
	email: str,
	phone: str | None = None,
	firm_name: str | None = None,
	firm_address: str | None = None,
) -> Client:
	client = Client(
		organization_id=organization_id,
		first_name=first_name,
		last_name=last_name,
		email=email,
		phone=phone,
		firm_name=firm_name,
		firm_address=firm_address,
		is_active=True,
	)
	session.add(client)
	await session.flush()
	await session.refresh(client)
	return client


async def update_client(
	session: AsyncSession,
	client_id: uuid.UUID,
	organization_id: uuid.UUID,
	**updates: Any,
) -> Client | None:
	return await scoped.coalesce_update(session, Client, client_id, organization_id, updates)


async def delete_client(
	session: AsyncSession,
	client_id: uuid.UUID,
	organization_id: uuid.UUID,
) -> None:
	await scoped.delete_scoped(session, Client, client_id, organization_id)
