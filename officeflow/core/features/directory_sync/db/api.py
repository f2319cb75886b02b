# (c) Copyright Datacraft, 2026
"""Directory cache database API."""
import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from officeflow.core.db.base import utc_now

from .orm import DirectoryUser


async def upsert_directory_user(
	session: AsyncSession,
	organization_id: uuid.UUID,
	azure_ad_user_id: str,
	display_name: str | None,
	email: str | None,
) -> DirectoryUser:
	"""Insert the cache entry or refresh the existing one for this external id."""
	stmt = select(DirectoryUser).where(
		DirectoryUser.organization_id == organization_id,
		DirectoryUser.azure_ad_user_id == azure_ad_user_id,
	)
	result = await session.execute(stmt)
	user = result.scalar_one_or_none()

	if user is None:
		user = DirectoryUser(
			organization_id=organization_id,
			azure_ad_user_id=azure_ad_user_id,
			display_name=display_name,
			email=email,
		)
		session.add(user)
	else:
		user.display_name = display_name
		user.email = email
		user.last_sync_at = utc_now()

	await session.flush()
	return user


async def list_directory_users(
	session: AsyncSession,
	organization_id: uuid.UUID,
) -> list[DirectoryUser]:
	stmt = (
		select(DirectoryUser)
		.where(DirectoryUser.organization_id == organization_id)
		.order_by(DirectoryUser.azure_ad_user_id)
	)
	result = await session.execute(stmt)
	return list(result.scalars().all())
