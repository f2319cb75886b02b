# (c) Copyright Datacraft, 2026
"""Offices database API."""
import uuid
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from officeflow.core.db import scoped

from .orm import Office


async def list_offices(
	session: AsyncSession,
	organization_id: uuid.UUID,
) -> list[Office]:
	return await scoped.list_scoped(session, Office, organization_id)


async def get_office(
	session: AsyncSession,
	office_id: uuid.UUID,
	organization_id: uuid.UUID,
) -> Office | None:
	return await scoped.get_scoped(session, Office, office_id, organization_id)


async def create_office(
	session: AsyncSession,
	organization_id: uuid.UUID,
	name: str,
	address: str | None = None,
	city: str | None = None,
	country: str | None = None,
	time_zone: str | None = None,
) -> Office:
	"""Create a new, active office."""
	office = Office(
		organization_id=organization_id,
		name=name,
		address=address,
		city=city,
		country=country,
		time_zone=time_zone,
		is_active=True,
	)
	session.add(office)
	await session.flush()
	await session.refresh(office)
	return office


async def update_office(
	session: AsyncSession,
	office_id: uuid.UUID,
	organization_id: uuid.UUID,
	**updates: Any,
) -> Office | None:
	return await scoped.coalesce_update(session, Office, office_id, organization_id, updates)


async def delete_office(
	session: AsyncSession,
	office_id: uuid.UUID,
	organization_id: uuid.UUID,
) -> None:
	await scoped.delete_scoped(session, Office, office_id, organization_id)
