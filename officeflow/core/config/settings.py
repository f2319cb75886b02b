# (c) Copyright Datacraft, 2026
"""Application settings configuration."""
import uuid
from pathlib import Path

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
	api_prefix: str = ''
	environment: str = 'development'
	log_config: Path | None = Path("logging.yaml")

	# Cosmos DB (documents)
	cosmosdb_connection_string: str | None = None
	cosmosdb_database_name: str | None = None
	cosmosdb_documents_container: str = 'documents'

	# SQL Server (organizational entities)
	sql_server: str | None = None
	sql_database: str | None = None
	sql_user: str | None = None
	sql_password: str | None = None
	sql_trust_cert: bool = False
	sql_driver: str = 'ODBC Driver 18 for SQL Server'
	# Full SQLAlchemy URL, takes precedence over the SQL Server fields
	sql_url: str | None = None
	sql_pool_max: int = Field(gt=0, default=10)
	sql_pool_idle_timeout: int = Field(gt=0, default=30)

	# Organization scoping
	default_organization_id: uuid.UUID | None = None
	organization_header: str = 'X-Organization-Id'

	# Uploads
	user_info_url: str = 'https://graph.microsoft.com/v1.0/me'
	max_upload_size_mb: int = Field(gt=0, default=10)

	@computed_field
	@property
	def sqlalchemy_url(self) -> str:
		if self.sql_url:
			return self.sql_url
		url = URL.create(
			"mssql+aioodbc",
			username=self.sql_user,
			password=self.sql_password,
			host=self.sql_server,
			database=self.sql_database,
			query={
				"driver": self.sql_driver,
				"Encrypt": "yes",
				"TrustServerCertificate": "yes" if self.sql_trust_cert else "no",
			},
		)
		return url.render_as_string(hide_password=False)

	model_config = SettingsConfigDict(
		env_file='.env',
		env_file_encoding='utf-8',
		extra='ignore',
	)


_settings: Settings | None = None


def get_settings() -> Settings:
	global _settings
	if _settings is None:
		_settings = Settings()
	return _settings
