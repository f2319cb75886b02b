# (c) Copyright Datacraft, 2026
"""
Upload router tests.
"""
from unittest.mock import AsyncMock, patch

import httpx
import pytest
from httpx import AsyncClient

from officeflow.core.config import get_settings
from officeflow.core.features.uploads.schema import UserInfo

AUTH = {"Authorization": "Bearer token-123"}


@pytest.fixture
def user_info():
	with patch(
		"officeflow.core.features.uploads.auth.fetch_user_info",
		new=AsyncMock(return_value=UserInfo(display_name="Ada Lovelace")),
	) as mock:
		yield mock


async def test_upload_without_token(api_client: AsyncClient):
	response = await api_client.post(
		"/files/upload",
		files={"file": ("contract.pdf", b"%PDF-1.4", "application/pdf")},
	)

	assert response.status_code == 401
	assert response.json()["detail"] == "No access token provided"


async def test_upload_with_rejected_token(api_client: AsyncClient):
	error = httpx.HTTPStatusError(
		"401 Unauthorized",
		request=httpx.Request("GET", "https://graph.microsoft.com/v1.0/me"),
		response=httpx.Response(401),
	)
	with patch(
		"officeflow.core.features.uploads.auth.fetch_user_info",
		new=AsyncMock(side_effect=error),
	):
		response = await api_client.post(
			"/files/upload",
			headers=AUTH,
			files={"file": ("contract.pdf", b"%PDF-1.4", "application/pdf")},
		)

	assert response.status_code == 401
	assert response.json()["detail"] == "Invalid access token"


async def test_upload_file(api_client: AsyncClient, user_info):
	response = await api_client.post(
		"/files/upload",
		headers=AUTH,
		files={"file": ("contract.pdf", b"%PDF-1.4", "application/pdf")},
	)

	assert response.status_code == 200, response.json()
	data = response.json()
	assert data["message"] == "File uploaded successfully"
	assert data["file"]["name"] == "contract.pdf"
	assert data["file"]["size"] == 8
	assert data["file"]["type"] == "application/pdf"
	assert data["file"]["uploadedBy"] == "Ada Lovelace"
	assert data["file"]["status"] == "uploaded"
	user_info.assert_awaited_once_with("token-123")


async def test_upload_without_file(api_client: AsyncClient, user_info):
	response = await api_client.post("/files/upload", headers=AUTH)

	assert response.status_code == 400
	assert response.json()["detail"] == "No file provided"


async def test_upload_disallowed_type(api_client: AsyncClient, user_info):
	response = await api_client.post(
		"/files/upload",
		headers=AUTH,
		files={"file": ("archive.zip", b"PK\x03\x04", "application/zip")},
	)

	assert response.status_code == 400
	assert response.json()["detail"] == "File type not allowed"


async def test_upload_too_large(api_client: AsyncClient, user_info, monkeypatch):
	monkeypatch.setattr(get_settings(), "max_upload_size_mb", 1)
	content = b"x" * (1024 * 1024 + 1)

	response = await api_client.post(
		"/files/upload",
		headers=AUTH,
		files={"file": ("big.txt", content, "text/plain")},
	)

	assert response.status_code == 413
