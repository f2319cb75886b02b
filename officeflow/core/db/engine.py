# (c) Copyright Datacraft, 2026
"""Lazily constructed SQLAlchemy engine and session factory."""
import logging
import threading

from sqlalchemy.ext.asyncio import (
	AsyncEngine,
	AsyncSession,
	async_sessionmaker,
	create_async_engine,
)

from officeflow.core.config import get_settings

logger = logging.getLogger(__name__)

_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None
_lock = threading.Lock()


def get_engine() -> AsyncEngine:
	"""Return the process-wide engine, creating it on first use."""
	global _engine, _session_factory
	if _engine is not None:
		return _engine

	with _lock:
		if _engine is None:
			settings = get_settings()
			kwargs = {}
			if settings.sqlalchemy_url.startswith("mssql"):
				kwargs = dict(
					pool_size=settings.sql_pool_max,
					max_overflow=0,
					pool_recycle=settings.sql_pool_idle_timeout,
					pool_pre_ping=True,
				)
			_engine = create_async_engine(settings.sqlalchemy_url, **kwargs)
			_session_factory = async_sessionmaker(_engine, expire_on_commit=False)
			logger.info(f"SQL engine created (pool max={settings.sql_pool_max})")

	return _engine


def get_session_factory() -> async_sessionmaker[AsyncSession]:
	get_engine()
	return _session_factory


async def get_db():
	async with get_session_factory()() as session:
		yield session


async def dispose_engine() -> None:
	global _engine, _session_factory
	with _lock:
		engine, _engine, _session_factory = _engine, None, None
	if engine is not None:
		await engine.dispose()
		logger.info("SQL engine disposed")
