# (c) Copyright Datacraft, 2026
"""Offices ORM models."""
from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from officeflow.core.db.base import Base, OrganizationScoped, TimestampColumns


class Office(Base, OrganizationScoped, TimestampColumns):
	__tablename__ = "Offices"

	name: Mapped[str] = mapped_column("Name", String(100), nullable=False)
	address: Mapped[str | None] = mapped_column("Address", String(500))
	city: Mapped[str | None] = mapped_column("City", String(100))
	country: Mapped[str | None] = mapped_column("Country", String(100))
	time_zone: Mapped[str | None] = mapped_column("TimeZone", String(50))
	is_active: Mapped[bool] = mapped_column("IsActive", Boolean, default=True, nullable=False)

	def __repr__(self) -> str:
		return f"Office({self.id=}, {self.name=}, {self.city=})"
