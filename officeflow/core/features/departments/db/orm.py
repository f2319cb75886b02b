# (c) Copyright Datacraft, 2026
"""Departments ORM models."""
from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from officeflow.core.db.base import Base, OrganizationScoped, TimestampColumns


class Department(Base, OrganizationScoped, TimestampColumns):
	"""Department of an organization."""
	__tablename__ = "Departments"

	name: Mapped[str] = mapped_column("Name", String(100), nullable=False)
	description: Mapped[str | None] = mapped_column("Description", String(500))
	is_active: Mapped[bool] = mapped_column("IsActive", Boolean, default=True, nullable=False)

	def __repr__(self) -> str:
		return f"Department({self.id=}, {self.name=})"
