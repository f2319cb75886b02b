# (c) Copyright Datacraft, 2026
"""Organizations, offices, departments, clients and the Azure AD cache.

Revision ID: of_0001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

revision: str = 'of_0001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
	return [
		sa.Column('CreatedAt', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
		sa.Column('UpdatedAt', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
	]


def _organization_fk() -> sa.Column:
	return sa.Column('OrganizationId', sa.Uuid, sa.ForeignKey('Organizations.Id'), nullable=False)


def upgrade() -> None:
	op.create_table(
		'Organizations',
		sa.Column('Id', sa.Uuid, primary_key=True),
		sa.Column('Name', sa.String(200), nullable=False),
		sa.Column('CreatedAt', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
	)

	op.create_table(
		'Offices',
		sa.Column('Id', sa.Uuid, primary_key=True),
		_organization_fk(),
		sa.Column('Name', sa.String(100), nullable=False),
		sa.Column('Address', sa.String(500)),
		sa.Column('City', sa.String(100)),
		sa.Column('Country', sa.String(100)),
		sa.Column('TimeZone', sa.String(50)),
		sa.Column('IsActive', sa.Boolean, nullable=False, server_default=sa.true()),
		*_timestamps(),
	)
	op.create_index('ix_Offices_OrganizationId', 'Offices', ['OrganizationId'])

	op.create_table(
		'Departments',
		sa.Column('Id', sa.Uuid, primary_key=True),
		_organization_fk(),
		sa.Column('Name', sa.String(100), nullable=False),
		sa.Column('Description', sa.String(500)),
		sa.Column('IsActive', sa.Boolean, nullable=False, server_default=sa.true()),
		*_timestamps(),
	)
	op.create_index('ix_Departments_OrganizationId', 'Departments', ['OrganizationId'])

	op.create_table(
		'Clients',
		sa.Column('Id', sa.Uuid, primary_key=True),
		_organization_fk(),
		sa.Column('FirstName', sa.String(100), nullable=False),
		sa.Column('LastName', sa.String(100), nullable=False),
		sa.Column('Email', sa.String(255), nullable=False),
		sa.Column('Phone', sa.String(50)),
		sa.Column('FirmName', sa.String(200)),
		sa.Column('FirmAddress', sa.String(500)),
		sa.Column('IsActive', sa.Boolean, nullable=False, server_default=sa.true()),
		*_timestamps(),
	)
	op.create_index('ix_Clients_OrganizationId', 'Clients', ['OrganizationId'])

	op.create_table(
		'AzureAdCache',
		sa.Column('Id', sa.Uuid, primary_key=True),
		_organization_fk(),
		sa.Column('AzureAdUserId', sa.String(255), nullable=False),
		sa.Column('DisplayName', sa.String(200)),
		sa.Column('Email', sa.String(255)),
		sa.Column('LastSyncAt', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
		sa.Column('CreatedAt', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
	)
	op.create_index(
		'idx_azure_ad_cache_org_user_unique',
		'AzureAdCache',
		['OrganizationId', 'AzureAdUserId'],
		unique=True,
	)


def downgrade() -> None:
	op.drop_index('idx_azure_ad_cache_org_user_unique', table_name='AzureAdCache')
	op.drop_table('AzureAdCache')
	op.drop_index('ix_Clients_OrganizationId', table_name='Clients')
	op.drop_table('Clients')
	op.drop_index('ix_Departments_OrganizationId', table_name='Departments')
	op.drop_table('Departments')
	op.drop_index('ix_Offices_OrganizationId', table_name='Offices')
	op.drop_table('Offices')
	op.drop_table('Organizations')
