# (c) Copyright Datacraft, 2026
"""
Schema migration tests.
"""
import importlib

from alembic.migration import MigrationContext
from alembic.operations import Operations
from sqlalchemy import create_engine, inspect

migration = importlib.import_module("officeflow.core.alembic.versions.of_0001_initial_schema")


def test_initial_schema_upgrade_and_downgrade(tmp_path):
	engine = create_engine(f"sqlite:///{tmp_path / 'migrations.db'}")

	with engine.begin() as conn:
		with Operations.context(MigrationContext.configure(conn)):
			migration.upgrade()

	tables = set(inspect(engine).get_table_names())
	assert {"Organizations", "Offices", "Departments", "Clients", "AzureAdCache"} <= tables

	indexes = inspect(engine).get_indexes("AzureAdCache")
	assert any(i["unique"] and i["column_names"] == ["OrganizationId", "AzureAdUserId"] for i in indexes)

	with engine.begin() as conn:
		with Operations.context(MigrationContext.configure(conn)):
			migration.downgrade()

	assert inspect(engine).get_table_names() == []
	engine.dispose()
