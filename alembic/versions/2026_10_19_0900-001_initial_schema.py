"""Initial schema: users, workouts, recoveries

Revision ID: 001
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
import sqlmodel
from alembic import op

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create users, workouts and recoveries tables."""
    op.create_table('users', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('username', sqlmodel.sql.sqltypes.AutoString(length=30), nullable=False),
        sa.Column('email', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('hashed_password', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column('age', sa.Integer(), nullable=True),
        sa.Column('body_weight', sa.Float(), nullable=True),
        sa.Column('height', sa.Float(), nullable=True),
        sa.Column('fitness_level', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=False),
        sa.Column('goals', sa.JSON(), nullable=False),
        sa.Column('units', sqlmodel.sql.sqltypes.AutoString(length=10), nullable=False),
        sa.Column('recovery_reminders', sa.Boolean(), nullable=False, server_default='true'),
        sa.Column('workout_reminders', sa.Boolean(), nullable=False, server_default='true'),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default='true'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)
    op.create_index(op.f('ix_users_username'), 'users', ['username'], unique=True)

    op.create_table('workouts', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('name', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
        sa.Column('exercises', sa.JSON(), nullable=False),
        sa.Column('duration', sa.Float(), nullable=True),
        sa.Column('notes', sqlmodel.sql.sqltypes.AutoString(length=1000), nullable=True),
        sa.Column('tags', sa.JSON(), nullable=False),
        sa.Column('metric_total_volume', sa.Float(), nullable=False),
        sa.Column('metric_total_sets', sa.Integer(), nullable=False),
        sa.Column('metric_total_reps', sa.Integer(), nullable=False),
        sa.Column('metric_average_rpe', sa.Float(), nullable=True),
        sa.Column('metric_max_weight', sa.Float(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_workouts_user_id'), 'workouts', ['user_id'])
    op.create_index(op.f('ix_workouts_date'), 'workouts', ['date'])

    op.create_table('recoveries', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('workout_id', sa.Integer(), nullable=False),
        sa.Column('date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('sleep_hours', sa.Float(), nullable=True),
        sa.Column('sleep_quality', sa.Integer(), nullable=True),
        sa.Column('nutrition_quality', sa.Integer(), nullable=True),
        sa.Column('hydration', sa.Integer(), nullable=True),
        sa.Column('stress_level', sa.Integer(), nullable=True),
        sa.Column('work_stress', sa.Integer(), nullable=True),
        sa.Column('step_count', sa.Integer(), nullable=True),
        sa.Column('cardio_minutes', sa.Integer(), nullable=True),
        sa.Column('active_minutes', sa.Integer(), nullable=True),
        sa.Column('recovery_score', sa.Integer(), nullable=False),
        sa.Column('readiness_score', sa.Integer(), nullable=False),
        sa.Column('recommendations', sa.JSON(), nullable=True),
        sa.Column('feedback_accuracy', sa.Integer(), nullable=True),
        sa.Column('feedback_helpfulness', sa.Integer(), nullable=True),
        sa.Column('feedback_comments', sqlmodel.sql.sqltypes.AutoString(length=500), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.ForeignKeyConstraint(['workout_id'], ['workouts.id']),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_recoveries_user_id'), 'recoveries', ['user_id'])
    op.create_index(op.f('ix_recoveries_workout_id'), 'recoveries', ['workout_id'])
    op.create_index(op.f('ix_recoveries_date'), 'recoveries', ['date'])


def downgrade() -> None:
    """Drop all tables."""
    op.drop_index(op.f('ix_recoveries_date'), table_name='recoveries')
    op.drop_index(op.f('ix_recoveries_workout_id'), table_name='recoveries')
    op.drop_index(op.f('ix_recoveries_user_id'), table_name='recoveries')
    op.drop_table('recoveries')
    op.drop_index(op.f('ix_workouts_date'), table_name='workouts')
    op.drop_index(op.f('ix_workouts_user_id'), table_name='workouts')
    op.drop_table('workouts')
    op.drop_index(op.f('ix_users_username'), table_name='users')
    op.drop_index(op.f('ix_users_email'), table_name='users')
    op.drop_table('users')
