"""create workouts/sessions/sets/exercises + custom exercises

Revision ID: 4b1e0c9d2a7f
Revises:
Create Date: 2026-10-17 09:12:44.318204

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# define the enum type once so we can create/drop it explicitly on postgres
pg_workout_type = postgresql.ENUM('push', 'pull', 'shoulders', 'legs', name='workout_type', create_type=False)
workout_type = sa.Enum('push', 'pull', 'shoulders', 'legs', name='workout_type').with_variant(pg_workout_type, 'postgresql')


# revision identifiers, used by Alembic.
revision: str = '4b1e0c9d2a7f'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # 0) create enum type if it doesn't exist
    pg_workout_type.create(op.get_bind(), checkfirst=True)

    # 1) one lineage per workout type
    op.create_table(
        'workouts',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('workout_type', workout_type, nullable=False, index=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.UniqueConstraint('workout_type', name='uq_workout_type'),
    )

    # 2) logged sessions
    op.create_table(
        'workout_sessions',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('workout_id', sa.Uuid(), sa.ForeignKey('workouts.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('date', sa.DateTime(), nullable=False, index=True),
        sa.Column('duration_seconds', sa.Integer(), nullable=False),
        sa.Column('is_completed', sa.Boolean(), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
    )

    # 3) exercises referenced by sets
    op.create_table(
        'exercises',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('name', sa.String(length=120), nullable=False),
        sa.Column('muscle_group', sa.String(length=60), nullable=False, server_default=''),
        sa.Column('is_custom', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
    )

    # 4) sets, owned by a session and pointing at an exercise
    op.create_table(
        'workout_sets',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('session_id', sa.Uuid(), sa.ForeignKey('workout_sessions.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('exercise_id', sa.Uuid(), sa.ForeignKey('exercises.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('set_number', sa.Integer(), nullable=False),
        sa.Column('weight', sa.Float(), nullable=False),
        sa.Column('reps', sa.Integer(), nullable=False),
        sa.Column('is_completed', sa.Boolean(), nullable=False),
        sa.Column('completed_at', sa.DateTime(), nullable=True),
    )

    # 5) catalog entries, independent of logged data
    op.create_table(
        'custom_exercises',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('name', sa.String(length=120), nullable=False),
        sa.Column('workout_type', workout_type, nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.UniqueConstraint('workout_type', 'name', name='uq_custom_exercise_type_name'),
    )


def downgrade() -> None:
    # drop child tables in reverse order
    op.drop_table('custom_exercises')
    op.drop_table('workout_sets')
    op.drop_table('exercises')
    op.drop_table('workout_sessions')
    op.drop_table('workouts')

    # finally drop enum type
    pg_workout_type.drop(op.get_bind(), checkfirst=True)
