"""Create Leaflings tables

Revision ID: 001
Revises:
Create Date: 2024-06-01 10:00:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

# Care levels are stored by member name, plant types and roles by value
EXPERIENCE_LEVEL = sa.Enum('BEGINNER', 'INTERMEDIATE', 'EXPERT', name='experience_level', native_enum=False)
WATER_LEVEL = sa.Enum('LOW', 'MEDIUM', 'HIGH', name='water_level', native_enum=False)
LIGHT_LEVEL = sa.Enum('LOW', 'MEDIUM', 'HIGH', name='light_level', native_enum=False)
PLANT_TYPE = sa.Enum(
    'Decorative', 'Medicinal', 'Fruit', 'Vegetable', 'Flower', 'Succulent',
    name='plant_type', native_enum=False,
)
PERSON_ROLE = sa.Enum('user', 'admin', name='person_role', native_enum=False)


def upgrade() -> None:
    """Create Leaflings tables"""

    # 1. Accounts (users and admins share one table)
    op.create_table('persons',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('person_type', sa.String(16), nullable=False),
        sa.Column('username', sa.String(64), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('password_hash', sa.String(255), nullable=False),
        sa.Column('role', PERSON_ROLE, nullable=False),
        sa.Column('contact', sa.String(9), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('role_paid', sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column('location', sa.String(64), nullable=True),
        sa.Column('care_experience', EXPERIENCE_LEVEL, nullable=True),
        sa.Column('water_availability', WATER_LEVEL, nullable=True),
        sa.Column('luminosity_availability', LIGHT_LEVEL, nullable=True),
        sa.Column('user_avatar', sa.String(256), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_persons_email', 'persons', ['email'], unique=True)
    op.create_index('ix_persons_person_type', 'persons', ['person_type'])

    # 2. Catalog
    op.create_table('plants',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('admin_id', sa.Integer(), nullable=True),
        sa.Column('name', sa.String(64), nullable=False),
        sa.Column('type', PLANT_TYPE, nullable=False),
        sa.Column('exp_suggested', EXPERIENCE_LEVEL, nullable=False),
        sa.Column('water_needs', WATER_LEVEL, nullable=False),
        sa.Column('luminosity_needed', LIGHT_LEVEL, nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('plant_image', sa.String(256), nullable=True),
        sa.ForeignKeyConstraint(['admin_id'], ['persons.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_plants_admin_id', 'plants', ['admin_id'])
    op.create_index('ix_plants_name', 'plants', ['name'])

    op.create_table('plant_tasks',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('admin_id', sa.Integer(), nullable=True),
        sa.Column('plant_id', sa.Integer(), nullable=False),
        sa.Column('task_name', sa.String(48), nullable=False),
        sa.Column('task_description', sa.String(96), nullable=False),
        sa.ForeignKeyConstraint(['admin_id'], ['persons.id'], ondelete='SET NULL'),
        sa.ForeignKeyConstraint(['plant_id'], ['plants.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_plant_tasks_admin_id', 'plant_tasks', ['admin_id'])
    op.create_index('ix_plant_tasks_plant_id', 'plant_tasks', ['plant_id'])

    # 3. Journal
    op.create_table('user_plants',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('plant_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['persons.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['plant_id'], ['plants.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'plant_id', name='uq_user_plants_user_plant'),
    )
    op.create_index('ix_user_plants_user_id', 'user_plants', ['user_id'])
    op.create_index('ix_user_plants_plant_id', 'user_plants', ['plant_id'])

    op.create_table('diaries',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_plant_id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(64), nullable=False),
        sa.Column('creation_date', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.ForeignKeyConstraint(['user_plant_id'], ['user_plants.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_plant_id'),
    )

    op.create_table('logs',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('diary_id', sa.Integer(), nullable=False),
        sa.Column('log_date', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('log_description', sa.String(500), nullable=False),
        sa.ForeignKeyConstraint(['diary_id'], ['diaries.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_logs_diary_id', 'logs', ['diary_id'])

    op.create_table('warnings',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('location', sa.String(64), nullable=False),
        sa.Column('message', sa.String(255), nullable=False),
        sa.Column('reminder_date', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['persons.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_warnings_user_id', 'warnings', ['user_id'])

    # 4. Advertising and payments
    op.create_table('ads',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('admin_id', sa.Integer(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('start_date', sa.DateTime(), nullable=False),
        sa.Column('end_date', sa.DateTime(), nullable=False),
        sa.Column('ad_file', sa.String(256), nullable=True),
        sa.ForeignKeyConstraint(['admin_id'], ['persons.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.CheckConstraint('end_date >= start_date', name='ck_ads_window'),
    )
    op.create_index('ix_ads_admin_id', 'ads', ['admin_id'])
    op.create_index('ix_ads_is_active', 'ads', ['is_active'])

    op.create_table('payments',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(64), nullable=False),
        sa.Column('creation_date', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['persons.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_payments_user_id', 'payments', ['user_id'])


def downgrade() -> None:
    """Drop Leaflings tables"""
    op.drop_table('payments')
    op.drop_table('ads')
    op.drop_table('warnings')
    op.drop_table('logs')
    op.drop_table('diaries')
    op.drop_table('user_plants')
    op.drop_table('plant_tasks')
    op.drop_table('plants')
    op.drop_table('persons')
