"""Initial schema: users, roles, members, archives, action log, baptisms, weddings

Revision ID: 001_initial
Revises:
Create Date: 2025-01-10 00:00:00.000000

Tags: initial, members, archives
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001_initial'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('username', sa.String(length=100), nullable=False),
        sa.Column('password', sa.String(length=255), nullable=False),
        sa.Column('role', sa.String(length=50), server_default='user', nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_users_id'), 'users', ['id'], unique=False)
    op.create_index(op.f('ix_users_username'), 'users', ['username'], unique=True)

    op.create_table(
        'roles',
        sa.Column('role_name', sa.String(length=50), nullable=False),
        sa.Column('description', sa.String(length=255), nullable=True),
        sa.PrimaryKeyConstraint('role_name')
    )

    op.create_table(
        'sequence_counters',
        sa.Column('name', sa.String(length=50), nullable=False),
        sa.Column('last_value', sa.Integer(), server_default='0', nullable=False),
        sa.PrimaryKeyConstraint('name')
    )

    op.create_table(
        'members',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('palo', sa.Integer(), nullable=False),
        sa.Column('first_name', sa.String(length=100), nullable=False),
        sa.Column('surname', sa.String(length=100), nullable=False),
        sa.Column('receipts', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_members_id'), 'members', ['id'], unique=False)
    op.create_index(op.f('ix_members_palo'), 'members', ['palo'], unique=True)

    op.create_table(
        'archives',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('record_type', sa.String(length=20), nullable=False),
        sa.Column('details', sa.JSON(), nullable=False),
        sa.Column('palo', sa.Integer(), nullable=True),
        sa.Column('archived_date', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_archives_id'), 'archives', ['id'], unique=False)
    op.create_index(op.f('ix_archives_record_type'), 'archives', ['record_type'], unique=False)
    op.create_index(op.f('ix_archives_palo'), 'archives', ['palo'], unique=False)
    op.create_index(op.f('ix_archives_archived_date'), 'archives', ['archived_date'], unique=False)

    op.create_table(
        'action_logs',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=True),
        sa.Column('action', sa.String(length=100), nullable=False),
        sa.Column('details', sa.JSON(), nullable=True),
        sa.Column('timestamp', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_action_logs_id'), 'action_logs', ['id'], unique=False)
    op.create_index(op.f('ix_action_logs_user_id'), 'action_logs', ['user_id'], unique=False)
    op.create_index(op.f('ix_action_logs_action'), 'action_logs', ['action'], unique=False)
    op.create_index(op.f('ix_action_logs_timestamp'), 'action_logs', ['timestamp'], unique=False)

    op.create_table(
        'baptisms',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('first_name', sa.String(length=100), nullable=False),
        sa.Column('middle_name', sa.String(length=100), nullable=True),
        sa.Column('surname', sa.String(length=100), nullable=False),
        sa.Column('date_of_birth', sa.Date(), nullable=False),
        sa.Column('father_first_name', sa.String(length=100), nullable=False),
        sa.Column('father_middle_name', sa.String(length=100), nullable=True),
        sa.Column('father_surname', sa.String(length=100), nullable=False),
        sa.Column('mother_first_name', sa.String(length=100), nullable=False),
        sa.Column('mother_middle_name', sa.String(length=100), nullable=True),
        sa.Column('mother_surname', sa.String(length=100), nullable=False),
        sa.Column('baptism_date', sa.Date(), nullable=False),
        sa.Column('pastor', sa.String(length=150), nullable=False),
        sa.Column('archived', sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_baptisms_id'), 'baptisms', ['id'], unique=False)
    op.create_index(op.f('ix_baptisms_surname'), 'baptisms', ['surname'], unique=False)
    op.create_index(op.f('ix_baptisms_baptism_date'), 'baptisms', ['baptism_date'], unique=False)
    op.create_index(op.f('ix_baptisms_archived'), 'baptisms', ['archived'], unique=False)

    op.create_table(
        'weddings',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('groom_first_name', sa.String(length=100), nullable=False),
        sa.Column('groom_middle_name', sa.String(length=100), nullable=True),
        sa.Column('groom_surname', sa.String(length=100), nullable=False),
        sa.Column('groom_id_number', sa.String(length=50), nullable=True),
        sa.Column('bride_first_name', sa.String(length=100), nullable=False),
        sa.Column('bride_middle_name', sa.String(length=100), nullable=True),
        sa.Column('bride_surname', sa.String(length=100), nullable=False),
        sa.Column('bride_id_number', sa.String(length=50), nullable=True),
        sa.Column('wedding_date', sa.Date(), nullable=False),
        sa.Column('pastor', sa.String(length=150), nullable=False),
        sa.Column('location', sa.String(length=255), nullable=False),
        sa.Column('archived', sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_weddings_id'), 'weddings', ['id'], unique=False)
    op.create_index(op.f('ix_weddings_groom_surname'), 'weddings', ['groom_surname'], unique=False)
    op.create_index(op.f('ix_weddings_bride_surname'), 'weddings', ['bride_surname'], unique=False)
    op.create_index(op.f('ix_weddings_wedding_date'), 'weddings', ['wedding_date'], unique=False)
    op.create_index(op.f('ix_weddings_archived'), 'weddings', ['archived'], unique=False)


def downgrade() -> None:
    op.drop_table('weddings')
    op.drop_table('baptisms')
    op.drop_table('action_logs')
    op.drop_table('archives')
    op.drop_table('members')
    op.drop_table('sequence_counters')
    op.drop_table('roles')
    op.drop_table('users')
