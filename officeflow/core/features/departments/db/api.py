# (c) Copyright Datacraft, 2026
"""Departments database API."""
import uuid
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from officeflow.core.db import scoped

from .orm import Department


async def list_departments(
	session: AsyncSession,
	organization_id: uuid.UUID,
) -> list[Department]:
	"""List the newest departments."""
	return await scoped.list_scoped(session, Department, organization_id)


async def get_department(
	session: AsyncSession,
	department_id: uuid.UUID,
	organization_id: uuid.UUID,
) -> Department | None:
	"""Get department by ID."""
	return await scoped.get_scoped(session, Department, department_id, organization_id)


async def create_department(
	session: AsyncSession,
	organization_id: uuid.UUID,
	name: str,
	description: str | None = None,
) -> Department:
	"""Create a new department."""
	department = Department(
		organization_id=organization_id,
		name=name,
		description=description,
		is_active=True,
	)
	session.add(department)
	await session.flush()
	await session.refresh(department)
	return department


async def update_department(
	session: AsyncSession,
	department_id: uuid.UUID,
	organization_id: uuid.UUID,
	**updates: Any,
) -> Department | None:
	"""Update a department."""
	return await scoped.coalesce_update(
		session, Department, department_id, organization_id, updates
	)


async def delete_department(
	session: AsyncSession,
	department_id: uuid.UUID,
	organization_id: uuid.UUID,
) -> None:
	"""Delete a department."""
	await scoped.delete_scoped(session, Department, department_id, organization_id)
