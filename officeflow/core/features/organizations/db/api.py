# (c) Copyright Datacraft, 2026
"""Organizations database API."""
import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from .orm import Organization


async def get_organization(
	session: AsyncSession,
	organization_id: uuid.UUID,
) -> Organization | None:
	return await session.get(Organization, organization_id)


async def get_first_organization(session: AsyncSession) -> Organization | None:
	"""Oldest organization, used when a deployment serves a single one."""
	stmt = select(Organization).order_by(Organization.created_at.asc()).limit(1)
	result = await session.execute(stmt)
	return result.scalar_one_or_none()


async def create_organization(session: AsyncSession, name: str) -> Organization:
	organization = Organization(name=name)
	session.add(organization)
	await session.flush()
	await session.refresh(organization)
	return organization
