# (c) Copyright Datacraft, 2026
"""Directory sync API router."""
from typing import Annotated

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from officeflow.core.db.engine import get_db
from officeflow.core.features.organizations.dependencies import OrganizationId

from .schema import SyncRequest, SyncResult
from .service import sync_directory_users

router = APIRouter(prefix="/users", tags=["Directory sync"])


@router.post("/sync-azure-ad", response_model=SyncResult)
async def sync_azure_ad_users(
	session: Annotated[AsyncSession, Depends(get_db)],
	organization_id: OrganizationId,
	data: Annotated[SyncRequest | None, Body()] = None,
):
	"""Merge a batch of already fetched Azure AD users into the cache."""
	users = data.users if data else []
	try:
		updated = await sync_directory_users(session, organization_id, users)
	except Exception:
		return JSONResponse(
			status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
			content={"error": "Sync failed"},
		)

	return SyncResult(updated=updated)
