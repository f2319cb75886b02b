# (c) Copyright Datacraft, 2026
"""Directory cache database models and operations."""

from .orm import DirectoryUser

__all__ = [
	"DirectoryUser",
]
