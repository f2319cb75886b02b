# (c) Copyright Datacraft, 2026
"""Departments API router."""
import uuid
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from officeflow.core.db.engine import get_db
from officeflow.core.features.organizations.dependencies import OrganizationId

from .db import api as db_api
from .schema import Department, DepartmentCreate, DepartmentUpdate

router = APIRouter(prefix="/departments", tags=["Departments"])


@router.get("", response_model=list[Department])
async def list_departments(
	session: Annotated[AsyncSession, Depends(get_db)],
	organization_id: OrganizationId,
):
	"""List all departments."""
	departments = await db_api.list_departments(session, organization_id)
	return [Department.model_validate(d) for d in departments]


@router.post("", response_model=Department, status_code=status.HTTP_201_CREATED)
async def create_department(
	data: DepartmentCreate,
	session: Annotated[AsyncSession, Depends(get_db)],
	organization_id: OrganizationId,
):
	"""Create a new department."""
	department = await db_api.create_department(
		session,
		organization_id,
		name=data.name,
		description=data.description,
	)
	await session.commit()

	return Department.model_validate(department)


@router.get("/{department_id}", response_model=Department)
async def get_department(
	department_id: uuid.UUID,
	session: Annotated[AsyncSession, Depends(get_db)],
	organization_id: OrganizationId,
):
	"""Get department details."""
	department = await db_api.get_department(session, department_id, organization_id)
	if not department:
		raise HTTPException(
			status_code=status.HTTP_404_NOT_FOUND,
			detail="Not found",
		)

	return Department.model_validate(department)


@router.put("/{department_id}", response_model=Department)
async def update_department(
	department_id: uuid.UUID,
	data: DepartmentUpdate,
	session: Annotated[AsyncSession, Depends(get_db)],
	organization_id: OrganizationId,
):
	"""Update a department."""
	department = await db_api.update_department(
		session,
		department_id,
		organization_id,
		**data.model_dump(),
	)
	await session.commit()

	if not department:
		raise HTTPException(
			status_code=status.HTTP_404_NOT_FOUND,
			detail="Not found",
		)

	return Department.model_validate(department)


@router.delete("/{department_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_department(
	department_id: uuid.UUID,
	session: Annotated[AsyncSession, Depends(get_db)],
	organization_id: OrganizationId,
):
	"""Delete a department."""
	await db_api.delete_department(session, department_id, organization_id)
	await session.commit()
