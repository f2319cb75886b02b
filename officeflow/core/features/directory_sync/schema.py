# (c) Copyright Datacraft, 2026
"""Directory sync schemas."""
from pydantic import Field

from officeflow.core.schemas import CamelModel


class AzureAdUser(CamelModel):
	"""User record as returned by Microsoft Graph."""
	id: str = Field(..., min_length=1, max_length=255)
	display_name: str | None = Field(None, max_length=200)
	mail: str | None = Field(None, max_length=255)
	user_principal_name: str | None = Field(None, max_length=255)

	@property
	def email(self) -> str | None:
		return self.mail or self.user_principal_name


class SyncRequest(CamelModel):
	users: list[AzureAdUser] = Field(default_factory=list)


class SyncResult(CamelModel):
	updated: int
