# (c) Copyright Datacraft, 2026
"""Transactional synchronization of directory users."""
import logging
import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from .db import api as db_api
from .schema import AzureAdUser

logger = logging.getLogger(__name__)


async def sync_directory_users(
	session: AsyncSession,
	organization_id: uuid.UUID,
	users: list[AzureAdUser],
) -> int:
	"""
	Upsert all users in one transaction.

	Records are applied in input order. Any failure rolls back the whole
	batch and re-raises, so either every record is stored or none is.
	Re-running the same batch only refreshes the sync timestamps.
	"""
	# The organization lookup may already have opened a transaction
	if session.in_transaction():
		await session.commit()

	try:
		async with session.begin():
			for user in users:
				await db_api.upsert_directory_user(
					session,
					organization_id,
					azure_ad_user_id=user.id,
					display_name=user.display_name,
					email=user.email,
				)
	except Exception:
		logger.exception(f"Directory sync of {len(users)} users rolled back")
		raise

	logger.info(f"Synchronized {len(users)} directory users")
	return len(users)
