# (c) Copyright Datacraft, 2026
"""Bearer token check for uploads."""
import logging
from typing import Annotated

import httpx
from fastapi import Depends, Header, HTTPException, status

from officeflow.core.config import get_settings

from .schema import UserInfo

logger = logging.getLogger(__name__)


def get_access_token(
	authorization: Annotated[str | None, Header()] = None,
) -> str:
	token = (authorization or "").replace("Bearer ", "", 1).strip()
	if not token:
		raise HTTPException(
			status_code=status.HTTP_401_UNAUTHORIZED,
			detail="No access token provided",
		)
	return token


async def fetch_user_info(access_token: str) -> UserInfo:
	"""Exchange the caller's token for their profile."""
	url = get_settings().user_info_url
	async with httpx.AsyncClient(timeout=10.0) as client:
		response = await client.get(url, headers={"Authorization": f"Bearer {access_token}"})
		response.raise_for_status()
		return UserInfo.model_validate(response.json())


async def get_current_user(
	access_token: Annotated[str, Depends(get_access_token)],
) -> UserInfo:
	try:
		return await fetch_user_info(access_token)
	except (httpx.HTTPError, ValueError) as e:
		logger.error(f"Access token rejected: {e}")
		raise HTTPException(
			status_code=status.HTTP_401_UNAUTHORIZED,
			detail="Invalid access token",
		)
