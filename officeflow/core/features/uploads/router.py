# (c) Copyright Datacraft, 2026
"""File upload router."""
import logging
from datetime import datetime, timezone
from typing import Annotated

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status
from uuid_extensions import uuid7str

from officeflow.core.config import get_settings

from .auth import get_current_user
from .schema import ALLOWED_MIME_TYPES, UploadedFile, UploadResponse, UserInfo

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/files", tags=["Files"])


@router.post("/upload", response_model=UploadResponse)
async def upload_file(
	user: Annotated[UserInfo, Depends(get_current_user)],
	file: Annotated[UploadFile | None, File()] = None,
):
	"""
	Accept a single file from an authenticated user.

	Only size and type are checked; persisting the content is left to the
	storage backend.
	"""
	if file is None or not file.filename:
		raise HTTPException(
			status_code=status.HTTP_400_BAD_REQUEST,
			detail="No file provided",
		)

	max_size = get_settings().max_upload_size_mb * 1024 * 1024
	size = file.size
	if size is None:
		size = len(await file.read())

	if size > max_size:
		raise HTTPException(
			status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
			detail=f"File too large. Maximum size is {get_settings().max_upload_size_mb}MB",
		)

	if file.content_type not in ALLOWED_MIME_TYPES:
		raise HTTPException(
			status_code=status.HTTP_400_BAD_REQUEST,
			detail="File type not allowed",
		)

	logger.info(f"File {file.filename} uploaded by {user.display_name}")

	return UploadResponse(
		message="File uploaded successfully",
		file=UploadedFile(
			id=f"file_{uuid7str()}",
			name=file.filename,
			size=size,
			type=file.content_type,
			uploaded_by=user.display_name,
			uploaded_at=datetime.now(timezone.utc),
		),
	)
