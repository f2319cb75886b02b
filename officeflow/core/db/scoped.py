# (c) Copyright Datacraft, 2026
"""
Organization-scoped statements shared by the relational features.

Every statement filters on ``organization_id`` so rows of one organization
are never visible to, or writable from, another. A row of a different
organization is indistinguishable from a missing one.
"""
import uuid
from typing import Any, TypeVar

from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from .base import utc_now

# Row cap for list endpoints
MAX_LIST_ROWS = 200

ModelT = TypeVar("ModelT")


async def list_scoped(
	session: AsyncSession,
	model: type[ModelT],
	organization_id: uuid.UUID,
	limit: int = MAX_LIST_ROWS,
) -> list[ModelT]:
	"""Newest rows first, at most ``limit`` of them."""
	stmt = (
		select(model)
		.where(model.organization_id == organization_id)
		.order_by(model.created_at.desc())
		.limit(limit)
	)
	result = await session.execute(stmt)
	return list(result.scalars().all())


async def get_scoped(
	session: AsyncSession,
	model: type[ModelT],
	row_id: uuid.UUID,
	organization_id: uuid.UUID,
) -> ModelT | None:
	stmt = select(model).where(
		model.id == row_id,
		model.organization_id == organization_id,
	)
	result = await session.execute(stmt)
	return result.scalar_one_or_none()


async def coalesce_update(
	session: AsyncSession,
	model: type[ModelT],
	row_id: uuid.UUID,
	organization_id: uuid.UUID,
	values: dict[str, Any],
) -> ModelT | None:
	"""
	Update a row in a single statement, keeping stored values for null fields.

	The statement always runs; a missing row shows up only as ``None``.
	"""
	assignments = {
		getattr(model, key): func.coalesce(value, getattr(model, key))
		for key, value in values.items()
	}
	assignments[model.updated_at] = utc_now()

	stmt = (
		update(model)
		.where(
			model.id == row_id,
			model.organization_id == organization_id,
		)
		.values(assignments)
		.returning(model)
		.execution_options(synchronize_session=False, populate_existing=True)
	)
	result = await session.execute(stmt)
	return result.scalar_one_or_none()


async def delete_scoped(
	session: AsyncSession,
	model: type[ModelT],
	row_id: uuid.UUID,
	organization_id: uuid.UUID,
) -> int:
	"""Delete without checking existence first, returns the affected row count."""
	stmt = (
		delete(model)
		.where(
			model.id == row_id,
			model.organization_id == organization_id,
		)
		.execution_options(synchronize_session=False)
	)
	result = await session.execute(stmt)
	return result.rowcount
