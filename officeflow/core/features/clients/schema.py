# (c) Copyright Datacraft, 2026
"""Client schemas."""
import uuid
from datetime import datetime

from pydantic import EmailStr, Field

from officeflow.core.schemas import CamelModel


class Client(CamelModel):
	id: uuid.UUID
	organization_id: uuid.UUID
	first_name: str
	last_name: str
	email: str
	phone: str | None = None
	firm_name: str | None = None
	firm_address: str | None = None
	is_active: bool = True
	created_at: datetime | None = None
	updated_at: datetime | None = None


class ClientCreate(CamelModel):
	first_name: str = Field(..., min_length=1, max_length=100)
	last_name: str = Field(..., min_length=1, max_length=100)
	email: EmailStr
	phone: str | None = Field(None, max_length=50)
	firm_name: str | None = Field(None, max_length=200)
	firm_address: str | None = Field(None, max_length=500)
	is_active: bool = True


class ClientUpdate(CamelModel):
	first_name: str | None = Field(None, min_length=1, max_length=100)
	last_name: str | None = Field(None, min_length=1, max_length=100)
	email: EmailStr | None = None
	phone: str | None = Field(None, max_length=50)
	firm_name: str | None = Field(None, max_length=200)
	firm_address: str | None = Field(None, max_length=500)
	is_active: bool | None = None
