# (c) Copyright Datacraft, 2026
"""Offices feature."""

from .schema import Office, OfficeCreate, OfficeUpdate

__all__ = [
	"Office",
	"OfficeCreate",
	"OfficeUpdate",
]
