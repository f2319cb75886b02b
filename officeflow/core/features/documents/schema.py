# (c) Copyright Datacraft, 2026
"""Document schemas."""
from enum import Enum
from typing import Annotated

from pydantic import AfterValidator, AnyUrl, Field, TypeAdapter

from officeflow.core.schemas import CamelModel

_url_adapter = TypeAdapter(AnyUrl)


def _check_url(value: str) -> str:
	# Validate only; the URL is stored exactly as submitted
	_url_adapter.validate_python(value)
	return value


Url = Annotated[str, AfterValidator(_check_url)]


class DocumentStatus(str, Enum):
	DRAFT = "draft"
	PENDING = "pending"
	APPROVED = "approved"
	REJECTED = "rejected"
	ARCHIVED = "archived"


class ApprovalFlow(str, Enum):
	PARALLEL = "parallel"
	CONSECUTIVE = "consecutive"


class Priority(str, Enum):
	LOW = "low"
	MEDIUM = "medium"
	HIGH = "high"


class DocumentMetadata(CamelModel):
	created_by: str
	created_at: str
	modified_by: str | None = None
	modified_at: str | None = None
	office_id: str | None = None
	department_id: str | None = None
	client_id: str | None = None
	approval_flow: ApprovalFlow | None = None
	validators: list[str] = Field(default_factory=list)
	signers: list[str] = Field(default_factory=list)
	deadline: str | None = None
	priority: Priority = Priority.LOW
	is_locked: bool = False
	locked_by: str | None = None
	locked_at: str | None = None
	version: int = 1
	parent_document_id: str | None = None


class DocumentPermissions(CamelModel):
	owners: list[str] = Field(default_factory=list)
	viewers: list[str] = Field(default_factory=list)
	editors: list[str] = Field(default_factory=list)
	approvers: list[str] = Field(default_factory=list)


class DocumentCreate(CamelModel):
	partition_key: str = Field(..., min_length=1)
	name: str
	file_name: str
	file_size: int | float
	mime_type: str
	blob_url: Url
	status: DocumentStatus = DocumentStatus.DRAFT
	category: str = ""
	tags: list[str] = Field(default_factory=list)
	metadata: DocumentMetadata
	permissions: DocumentPermissions = Field(default_factory=DocumentPermissions)


class DocumentUpdate(CamelModel):
	"""
	Fields to merge over the stored document.

	Only top-level fields are merged: a submitted ``metadata`` or
	``permissions`` block replaces the stored one as a whole.
	"""
	partition_key: str = Field(..., min_length=1)
	name: str | None = None
	file_name: str | None = None
	file_size: int | float | None = None
	mime_type: str | None = None
	blob_url: Url | None = None
	status: DocumentStatus | None = None
	category: str | None = None
	tags: list[str] | None = None
	metadata: DocumentMetadata | None = None
	permissions: DocumentPermissions | None = None
