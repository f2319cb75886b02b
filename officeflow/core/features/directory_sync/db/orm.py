# (c) Copyright Datacraft, 2026
"""Directory cache ORM models."""
import uuid
from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Index, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column
from uuid_extensions import uuid7

from officeflow.core.db.base import Base, utc_now


class DirectoryUser(Base):
	"""Cached copy of an Azure AD user."""
	__tablename__ = "AzureAdCache"

	id: Mapped[uuid.UUID] = mapped_column("Id", Uuid, primary_key=True, default=uuid7)
	organization_id: Mapped[uuid.UUID] = mapped_column(
		"OrganizationId",
		Uuid,
		ForeignKey("Organizations.Id"),
		nullable=False,
	)
	azure_ad_user_id: Mapped[str] = mapped_column("AzureAdUserId", String(255), nullable=False)
	display_name: Mapped[str | None] = mapped_column("DisplayName", String(200))
	email: Mapped[str | None] = mapped_column("Email", String(255))
	last_sync_at: Mapped[datetime] = mapped_column(
		"LastSyncAt", DateTime(timezone=True), default=utc_now, nullable=False
	)
	created_at: Mapped[datetime] = mapped_column(
		"CreatedAt", DateTime(timezone=True), default=utc_now, nullable=False
	)

	def __repr__(self) -> str:
		return f"DirectoryUser({self.azure_ad_user_id=}, {self.email=})"

	__table_args__ = (
		Index(
			"idx_azure_ad_cache_org_user_unique",
			"OrganizationId",
			"AzureAdUserId",
			unique=True,
		),
	)
