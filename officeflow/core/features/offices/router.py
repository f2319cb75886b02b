# (c) Copyright Datacraft, 2026
"""Offices API router."""
import uuid
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from officeflow.core.db.engine import get_db
from officeflow.core.features.organizations.dependencies import OrganizationId

from .db import api as db_api
from .schema import Office, OfficeCreate, OfficeUpdate

router = APIRouter(prefix="/offices", tags=["Offices"])


@router.get("", response_model=list[Office])
async def list_offices(
	session: Annotated[AsyncSession, Depends(get_db)],
	organization_id: OrganizationId,
):
	"""List the newest offices of the organization."""
	offices = await db_api.list_offices(session, organization_id)
	return [Office.model_validate(o) for o in offices]


@router.get("/{office_id}", response_model=Office)
async def get_office(
	office_id: uuid.UUID,
	session: Annotated[AsyncSession, Depends(get_db)],
	organization_id: OrganizationId,
):
	office = await db_api.get_office(session, office_id, organization_id)
	if not office:
		raise HTTPException(
			status_code=status.HTTP_404_NOT_FOUND,
			detail="Not found",
		)

	return Office.model_validate(office)


@router.post("", response_model=Office, status_code=status.HTTP_201_CREATED)
async def create_office(
	data: OfficeCreate,
	session: Annotated[AsyncSession, Depends(get_db)],
	organization_id: OrganizationId,
):
	"""Create a new office."""
	office = await db_api.create_office(
		session,
		organization_id,
		name=data.name,
		address=data.address,
		city=data.city,
		country=data.country,
		time_zone=data.time_zone,
	)
	await session.commit()

	return Office.model_validate(office)


@router.put("/{office_id}", response_model=Office)
async def update_office(
	office_id: uuid.UUID,
	data: OfficeUpdate,
	session: Annotated[AsyncSession, Depends(get_db)],
	organization_id: OrganizationId,
):
	"""Update an office, keeping fields that are not supplied."""
	office = await db_api.update_office(
		session,
		office_id,
		organization_id,
		**data.model_dump(),
	)
	await session.commit()

	if not office:
		raise HTTPException(
			status_code=status.HTTP_404_NOT_FOUND,
			detail="Not found",
		)

	return Office.model_validate(office)


@router.delete("/{office_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_office(
	office_id: uuid.UUID,
	session: Annotated[AsyncSession, Depends(get_db)],
	organization_id: OrganizationId,
):
	await db_api.delete_office(session, office_id, organization_id)
	await session.commit()
