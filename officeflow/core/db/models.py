# (c) Copyright Datacraft, 2026
"""Re-export ORM models so the metadata knows every table."""
from officeflow.core.features.clients.db.orm import Client
from officeflow.core.features.departments.db.orm import Department
from officeflow.core.features.directory_sync.db.orm import DirectoryUser
from officeflow.core.features.offices.db.orm import Office
from officeflow.core.features.organizations.db.orm import Organization

__all__ = [
	"Client",
	"Department",
	"DirectoryUser",
	"Office",
	"Organization",
]
