# (c) Copyright Datacraft, 2026
"""Department schemas."""
import uuid
from datetime import datetime

from pydantic import Field

from officeflow.core.schemas import CamelModel


class Department(CamelModel):
	"""Department model."""
	id: uuid.UUID
	organization_id: uuid.UUID
	name: str
	description: str | None = None
	is_active: bool = True
	created_at: datetime | None = None
	updated_at: datetime | None = None


class DepartmentCreate(CamelModel):
	"""Create department request."""
	name: str = Field(..., min_length=1, max_length=100)
	description: str | None = Field(None, max_length=500)
	is_active: bool = True


class DepartmentUpdate(CamelModel):
	"""Update department request."""
	name: str | None = Field(None, min_length=1, max_length=100)
	description: str | None = Field(None, max_length=500)
	is_active: bool | None = None
