# (c) Copyright Datacraft, 2026
"""Clients ORM models."""
from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from officeflow.core.db.base import Base, OrganizationScoped, TimestampColumns


class Client(Base, OrganizationScoped, TimestampColumns):
	__tablename__ = "Clients"

	first_name: Mapped[str] = mapped_column("FirstName", String(100), nullable=False)
	last_name: Mapped[str] = mapped_column("LastName", String(100), nullable=False)
	email: Mapped[str] = mapped_column("Email", String(255), nullable=False)
	phone: Mapped[str | None] = mapped_column("Phone", String(50))
	firm_name: Mapped[str | None] = mapped_column("FirmName", String(200))
	firm_address: Mapped[str | None] = mapped_column("FirmAddress", String(500))
	is_active: Mapped[bool] = mapped_column("IsActive", Boolean, default=True, nullable=False)

	def __repr__(self) -> str:
		return f"Client({self.id=}, {self.email=})"
