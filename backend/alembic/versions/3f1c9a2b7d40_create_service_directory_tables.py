"""Create account, listing and audit log tables

Revision ID: 3f1c9a2b7d40
Revises:
Create Date: 2026-10-19 10:12:44.318205

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# Revision identifiers used by Alembic
revision: str = '3f1c9a2b7d40'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # End-user accounts
    op.create_table(
        'UserSignUp',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('password', sa.String(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_UserSignUp_id'), 'UserSignUp', ['id'], unique=False)
    op.create_index(op.f('ix_UserSignUp_email'), 'UserSignUp', ['email'], unique=True)

    # Provider accounts
    op.create_table(
        'ServiceProvidersSignUp',
        sa.Column('provider_id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('password', sa.String(), nullable=False),
        sa.PrimaryKeyConstraint('provider_id'),
    )
    op.create_index(op.f('ix_ServiceProvidersSignUp_provider_id'), 'ServiceProvidersSignUp', ['provider_id'], unique=False)
    op.create_index(op.f('ix_ServiceProvidersSignUp_email'), 'ServiceProvidersSignUp', ['email'], unique=True)

    # Provider listings, one per provider and service type
    op.create_table(
        'ServiceProviders',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('address', sa.String(), nullable=False),
        sa.Column('contact_number', sa.String(length=10), nullable=False),
        sa.Column('DOB', sa.Date(), nullable=False),
        sa.Column('service_type', sa.String(), nullable=False),
        sa.Column('Experience', sa.String(), nullable=False),
        sa.ForeignKeyConstraint(['email'], ['ServiceProvidersSignUp.email']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('email', 'service_type', name='uq_provider_service_type'),
    )
    op.create_index(op.f('ix_ServiceProviders_id'), 'ServiceProviders', ['id'], unique=False)
    op.create_index(op.f('ix_ServiceProviders_email'), 'ServiceProviders', ['email'], unique=False)
    op.create_index(op.f('ix_ServiceProviders_service_type'), 'ServiceProviders', ['service_type'], unique=False)

    # Audit trail
    op.create_table(
        'logs',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('ts', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.Column('actor_email', sa.String(), nullable=True),
        sa.Column('role', sa.String(length=20), nullable=True),
        sa.Column('action', sa.String(length=50), nullable=True),
        sa.Column('resource', sa.String(length=50), nullable=True),
        sa.Column('status', sa.String(length=20), nullable=True),
        sa.Column('ip', sa.String(length=64), nullable=True),
        sa.Column('meta', sa.JSON(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_logs_id'), 'logs', ['id'], unique=False)
    op.create_index(op.f('ix_logs_ts'), 'logs', ['ts'], unique=False)
    op.create_index(op.f('ix_logs_actor_email'), 'logs', ['actor_email'], unique=False)
    op.create_index(op.f('ix_logs_action'), 'logs', ['action'], unique=False)
    op.create_index(op.f('ix_logs_resource'), 'logs', ['resource'], unique=False)
    op.create_index(op.f('ix_logs_status'), 'logs', ['status'], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table('logs')
    op.drop_table('ServiceProviders')
    op.drop_table('ServiceProvidersSignUp')
    op.drop_table('UserSignUp')
