"""Create students, courses, assignments and schedule tables

Revision ID: 001
Revises: None
Create Date: 2024-09-01 00:00:00.000000+00:00

Tables are created parent-first (students → courses → assignments,
schedule) and dropped in reverse.
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "students",
        sa.Column("student_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("role", sa.String(20), nullable=False, server_default=sa.text("'user'")),
        sa.PrimaryKeyConstraint("student_id"),
        sa.UniqueConstraint("email", name="uq_students_email"),
    )

    op.create_table(
        "courses",
        sa.Column("course_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("student_id", sa.Integer(), nullable=False),
        sa.Column("course_name", sa.String(255), nullable=False),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=False),
        sa.PrimaryKeyConstraint("course_id"),
        sa.ForeignKeyConstraint(["student_id"], ["students.student_id"]),
    )
    op.create_index("idx_courses_student_id", "courses", ["student_id"])

    op.create_table(
        "assignments",
        sa.Column("assignment_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("student_id", sa.Integer(), nullable=False),
        sa.Column("course_id", sa.Integer(), nullable=True),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("deadline", sa.DateTime(timezone=False), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default=sa.text("'pending'")),
        sa.PrimaryKeyConstraint("assignment_id"),
        sa.ForeignKeyConstraint(["student_id"], ["students.student_id"]),
        sa.ForeignKeyConstraint(["course_id"], ["courses.course_id"]),
    )
    op.create_index("idx_assignments_student_id", "assignments", ["student_id"])

    op.create_table(
        "schedule",
        sa.Column("schedule_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("course_id", sa.Integer(), nullable=False),
        sa.Column("weekday", sa.String(10), nullable=False),
        sa.Column("start_time", sa.Time(), nullable=False),
        sa.Column("end_time", sa.Time(), nullable=False),
        sa.PrimaryKeyConstraint("schedule_id"),
        sa.ForeignKeyConstraint(["course_id"], ["courses.course_id"]),
    )
    op.create_index("idx_schedule_course_id", "schedule", ["course_id"])


def downgrade() -> None:
    """Drops every table. All data is lost."""
    op.drop_index("idx_schedule_course_id", table_name="schedule")
    op.drop_table("schedule")
    op.drop_index("idx_assignments_student_id", table_name="assignments")
    op.drop_table("assignments")
    op.drop_index("idx_courses_student_id", table_name="courses")
    op.drop_table("courses")
    op.drop_table("students")
