# (c) Copyright Datacraft, 2026
"""Departments database models and operations."""

from .orm import Department

__all__ = [
	"Department",
]
