# (c) Copyright Datacraft, 2026
"""Organizations ORM models."""
import uuid
from datetime import datetime

from sqlalchemy import DateTime, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column
from uuid_extensions import uuid7

from officeflow.core.db.base import Base, utc_now


class Organization(Base):
	__tablename__ = "Organizations"

	id: Mapped[uuid.UUID] = mapped_column("Id", Uuid, primary_key=True, default=uuid7)
	name: Mapped[str] = mapped_column("Name", String(200), nullable=False)
	created_at: Mapped[datetime] = mapped_column(
		"CreatedAt", DateTime(timezone=True), default=utc_now, nullable=False
	)

	def __repr__(self) -> str:
		return f"Organization({self.id=}, {self.name=})"
