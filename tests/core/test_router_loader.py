# (c) Copyright Datacraft, 2026
from pathlib import Path

import officeflow.core
from officeflow.core.router_loader import discover_routers


def test_discovers_every_feature_router():
	core_path = Path(officeflow.core.__file__).parent

	names = [name for _, name in discover_routers(core_path)]

	assert names == [
		"clients",
		"departments",
		"directory_sync",
		"documents",
		"monitoring",
		"offices",
		"uploads",
	]
