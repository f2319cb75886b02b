# (c) Copyright Datacraft, 2026
"""Organizations database models and operations."""

from .orm import Organization

__all__ = [
	"Organization",
]
