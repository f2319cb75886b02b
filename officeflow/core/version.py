# (c) Copyright Datacraft, 2026
"""Package version."""
from importlib.metadata import PackageNotFoundError, version

try:
	__version__ = version("officeflow")
except PackageNotFoundError:
	__version__ = "1.0.0"
