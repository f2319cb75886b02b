# (c) Copyright Datacraft, 2026
"""Departments feature."""

from .schema import Department, DepartmentCreate, DepartmentUpdate

__all__ = [
	"Department",
	"DepartmentCreate",
	"DepartmentUpdate",
]
