# (c) Copyright Datacraft, 2026
"""Declarative base and shared column mixins."""
import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Uuid
from sqlalchemy.orm import DeclarativeBase, Mapped, declared_attr, mapped_column
from uuid_extensions import uuid7


def utc_now() -> datetime:
	return datetime.now(timezone.utc)


class Base(DeclarativeBase):
	pass


class OrganizationScoped:
	"""Generated primary key plus the owning organization."""

	id: Mapped[uuid.UUID] = mapped_column("Id", Uuid, primary_key=True, default=uuid7)

	@declared_attr
	def organization_id(cls) -> Mapped[uuid.UUID]:
		return mapped_column(
			"OrganizationId",
			Uuid,
			ForeignKey("Organizations.Id"),
			nullable=False,
			index=True,
		)


class TimestampColumns:
	created_at: Mapped[datetime] = mapped_column(
		"CreatedAt", DateTime(timezone=True), default=utc_now, nullable=False
	)
	updated_at: Mapped[datetime] = mapped_column(
		"UpdatedAt", DateTime(timezone=True), default=utc_now, nullable=False
	)
