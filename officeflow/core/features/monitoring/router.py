# (c) Copyright Datacraft, 2026
"""Health check."""
import logging
from datetime import datetime, timezone

from fastapi import APIRouter

from officeflow.core.config import get_settings
from officeflow.core.version import __version__

logger = logging.getLogger(__name__)

router = APIRouter(tags=["monitoring"])


@router.get("/")
def health_check():
	"""Static status report, dependencies are not probed."""
	logger.debug("Health check requested")
	return {
		"status": "healthy",
		"timestamp": datetime.now(timezone.utc).isoformat(),
		"version": __version__,
		"environment": get_settings().environment,
		"services": {
			"database": "ok",
			"authentication": "ok",
			"storage": "ok",
		},
	}
