"""initial schema: teachers, attendance, timetable, substitutions, periods, activity, messages

Revision ID: 5b1e7c2d9a40
Revises:
Create Date: 2026-10-19 09:12:40.118204

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '5b1e7c2d9a40'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'teachers',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('name_key', sa.String(), nullable=False),
        sa.Column('phone_number', sa.String(), nullable=True),
        sa.Column('initials', sa.String(), nullable=False),
        sqlite_autoincrement=True,
    )
    op.create_index('ix_teachers_id', 'teachers', ['id'])
    op.create_index('ix_teachers_name_key', 'teachers', ['name_key'], unique=True)

    op.create_table(
        'attendance',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('teacher_id', sa.Integer(), sa.ForeignKey('teachers.id'), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('status', sa.String(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.UniqueConstraint('teacher_id', 'date', name='uq_attendance_teacher_date'),
        sqlite_autoincrement=True,
    )
    op.create_index('ix_attendance_id', 'attendance', ['id'])
    op.create_index('ix_attendance_date', 'attendance', ['date'])

    op.create_table(
        'timetable',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('day', sa.String(), nullable=False),
        sa.Column('period', sa.Integer(), nullable=False),
        sa.Column('class', sa.String(), nullable=False),
        sa.Column('teacher_id', sa.Integer(), sa.ForeignKey('teachers.id'), nullable=False),
        sqlite_autoincrement=True,
    )
    op.create_index('ix_timetable_id', 'timetable', ['id'])
    op.create_index('ix_timetable_day', 'timetable', ['day'])
    op.create_index('ix_timetable_teacher_id', 'timetable', ['teacher_id'])

    op.create_table(
        'substitutions',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('period', sa.Integer(), nullable=False),
        sa.Column('class', sa.String(), nullable=False),
        sa.Column('original_teacher_id', sa.Integer(), sa.ForeignKey('teachers.id'), nullable=False),
        sa.Column('substitute_teacher_id', sa.Integer(), sa.ForeignKey('teachers.id'), nullable=False),
        sa.Column('status', sa.String(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.UniqueConstraint('date', 'period', 'class', 'original_teacher_id', name='uq_substitution_slot'),
        sqlite_autoincrement=True,
    )
    op.create_index('ix_substitutions_id', 'substitutions', ['id'])
    op.create_index('ix_substitutions_date', 'substitutions', ['date'])

    op.create_table(
        'period_configs',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('period_number', sa.Integer(), nullable=False),
        sa.Column('start_time', sa.String(), nullable=False),
        sa.Column('end_time', sa.String(), nullable=False),
        sa.Column('active', sa.Boolean(), nullable=False),
        sqlite_autoincrement=True,
    )
    op.create_index('ix_period_configs_id', 'period_configs', ['id'])

    op.create_table(
        'activity_logs',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('teacher_id', sa.Integer(), sa.ForeignKey('teachers.id'), nullable=False),
        sa.Column('action', sa.String(), nullable=False),
        sa.Column('status', sa.String(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sqlite_autoincrement=True,
    )
    op.create_index('ix_activity_logs_id', 'activity_logs', ['id'])
    op.create_index('ix_activity_logs_created_at', 'activity_logs', ['created_at'])

    op.create_table(
        'messages',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('teacher_id', sa.Integer(), sa.ForeignKey('teachers.id'), nullable=False),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('status', sa.String(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sqlite_autoincrement=True,
    )
    op.create_index('ix_messages_id', 'messages', ['id'])


def downgrade() -> None:
    op.drop_table('messages')
    op.drop_table('activity_logs')
    op.drop_table('period_configs')
    op.drop_table('substitutions')
    op.drop_table('timetable')
    op.drop_table('attendance')
    op.drop_table('teachers')
