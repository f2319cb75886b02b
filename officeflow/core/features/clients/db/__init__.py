# (c) Copyright Datacraft, 2026
"""Clients database models and operations."""

from .orm import Client

__all__ = [
	"Client",
]
