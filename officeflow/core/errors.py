# (c) Copyright Datacraft, 2026
"""Validation error reporting."""
from collections import defaultdict
from typing import Any

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

# Leading location segments that name the request part, not a field
_REQUEST_PARTS = {"body", "query", "path", "header", "cookie"}


def flatten_errors(errors: list[dict[str, Any]]) -> dict[str, Any]:
	"""
	Group validation errors by field.

	Errors attached to a field end up under its dotted path in
	``fieldErrors``; errors about the payload as a whole (wrong type,
	invalid JSON) end up in ``formErrors``.
	"""
	form_errors: list[str] = []
	field_errors: dict[str, list[str]] = defaultdict(list)

	for error in errors:
		loc = list(error.get("loc", ()))
		if loc and loc[0] in _REQUEST_PARTS:
			loc = loc[1:]
		if loc:
			field_errors[".".join(str(part) for part in loc)].append(error["msg"])
		else:
			form_errors.append(error["msg"])

	return {"formErrors": form_errors, "fieldErrors": dict(field_errors)}


async def validation_exception_handler(
	request: Request,
	exc: RequestValidationError,
) -> JSONResponse:
	return JSONResponse(
		status_code=status.HTTP_400_BAD_REQUEST,
		content={"error": flatten_errors(exc.errors())},
	)
