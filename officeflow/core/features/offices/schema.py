# (c) Copyright Datacraft, 2026
"""Office schemas."""
import uuid
from datetime import datetime

from pydantic import Field

from officeflow.core.schemas import CamelModel


class Office(CamelModel):
	id: uuid.UUID
	organization_id: uuid.UUID
	name: str
	address: str | None = None
	city: str | None = None
	country: str | None = None
	time_zone: str | None = None
	is_active: bool = True
	created_at: datetime | None = None
	updated_at: datetime | None = None


class OfficeCreate(CamelModel):
	name: str = Field(..., min_length=1, max_length=100)
	address: str | None = Field(None, max_length=500)
	city: str | None = Field(None, max_length=100)
	country: str | None = Field(None, max_length=100)
	time_zone: str | None = Field(None, max_length=50)
	# Accepted for compatibility, new offices always start active
	is_active: bool = True


class OfficeUpdate(CamelModel):
	"""Partial update, null or missing fields keep their stored value."""
	name: str | None = Field(None, min_length=1, max_length=100)
	address: str | None = Field(None, max_length=500)
	city: str | None = Field(None, max_length=100)
	country: str | None = Field(None, max_length=100)
	time_zone: str | None = Field(None, max_length=50)
	is_active: bool | None = None
