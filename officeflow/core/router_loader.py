# (c) Copyright Datacraft, 2026
"""Discover feature routers."""
import importlib
import logging
from pathlib import Path

from fastapi import APIRouter

logger = logging.getLogger(__name__)


def discover_routers(core_path: Path) -> list[tuple[APIRouter, str]]:
	"""Import ``features/<name>/router.py`` modules and collect their routers."""
	routers = []
	features_path = core_path / "features"

	for router_file in sorted(features_path.glob("*/router.py")):
		feature_name = router_file.parent.name
		module = importlib.import_module(f"officeflow.core.features.{feature_name}.router")
		router = getattr(module, "router", None)
		if isinstance(router, APIRouter):
			routers.append((router, feature_name))
		else:
			logger.warning(f"Feature {feature_name} has no router")

	return routers
