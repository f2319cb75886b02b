# (c) Copyright Datacraft, 2026
"""Offices database models and operations."""

from .orm import Office

__all__ = [
	"Office",
]
