# (c) Copyright Datacraft, 2026
"""Resolve the organization a request is scoped to."""
import logging
import uuid
from typing import Annotated

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from officeflow.core.config import get_settings
from officeflow.core.db.engine import get_db

from .db import api as db_api

logger = logging.getLogger(__name__)


async def get_organization_id(
	request: Request,
	session: Annotated[AsyncSession, Depends(get_db)],
) -> uuid.UUID:
	"""
	Resolve the current organization.

	Order: explicit request header, then the configured default, then the
	oldest organization in the database.
	"""
	settings = get_settings()

	raw_id = request.headers.get(settings.organization_header)
	if raw_id:
		try:
			organization_id = uuid.UUID(raw_id)
		except ValueError:
			raise HTTPException(
				status_code=status.HTTP_400_BAD_REQUEST,
				detail=f"Invalid {settings.organization_header} header",
			)
		organization = await db_api.get_organization(session, organization_id)
	elif settings.default_organization_id:
		organization = await db_api.get_organization(session, settings.default_organization_id)
	else:
		organization = await db_api.get_first_organization(session)

	if organization is None:
		logger.warning(f"Organization could not be resolved (header={raw_id})")
		raise HTTPException(
			status_code=status.HTTP_404_NOT_FOUND,
			detail="Organization not found",
		)

	return organization.id


OrganizationId = Annotated[uuid.UUID, Depends(get_organization_id)]
