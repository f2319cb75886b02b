# (c) Copyright Datacraft, 2026
"""Upload schemas."""
from datetime import datetime

from officeflow.core.schemas import CamelModel

ALLOWED_MIME_TYPES = frozenset({
	"application/pdf",
	"application/msword",
	"application/vnd.openxmlformats-officedocument.wordprocessingml.document",
	"application/vnd.ms-excel",
	"application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
	"text/plain",
	"image/jpeg",
	"image/png",
	"image/gif",
})


class UserInfo(CamelModel):
	"""Profile of the caller as reported by the identity provider."""
	id: str | None = None
	display_name: str | None = None
	mail: str | None = None
	user_principal_name: str | None = None


class UploadedFile(CamelModel):
	id: str
	name: str
	size: int
	type: str
	uploaded_by: str | None = None
	uploaded_at: datetime
	status: str = "uploaded"


class UploadResponse(CamelModel):
	message: str
	file: UploadedFile
