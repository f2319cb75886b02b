import logging
from contextlib import asynccontextmanager
from logging.config import dictConfig
from pathlib import Path

import yaml
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from officeflow.core.config import get_settings
from officeflow.core.db.cosmos import close_cosmos
from officeflow.core.db.engine import dispose_engine
from officeflow.core.errors import validation_exception_handler
from officeflow.core.router_loader import discover_routers
from officeflow.core.version import __version__

logger = logging.getLogger(__name__)
config = get_settings()
prefix = config.api_prefix


@asynccontextmanager
async def lifespan(app: FastAPI):
	"""Application lifespan handler for startup/shutdown events."""
	logger.info(f"Starting officeflow API server ({config.environment})...")

	yield

	logger.info("Shutting down officeflow API server...")
	await close_cosmos()
	await dispose_engine()


app = FastAPI(
	title="Officeflow REST API",
	version=__version__,
	lifespan=lifespan,
)

app.add_middleware(
	CORSMiddleware,
	allow_origins=["*"],
	allow_credentials=True,
	allow_methods=["*"],
	allow_headers=["*"],
)

app.add_exception_handler(RequestValidationError, validation_exception_handler)

# Auto-discover and register all feature routers
core_path = Path(__file__).parent / "core"
for router, feature_name in discover_routers(core_path):
	app.include_router(router, prefix=prefix)


if config.log_config and config.log_config.is_file():
	with open(config.log_config, "r") as stream:
		dictConfig(yaml.safe_load(stream))
