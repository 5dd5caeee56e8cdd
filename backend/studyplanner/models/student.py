"""
StudyPlanner Backend: Student SQLAlchemy Model
===============================================

What:  ORM model for the `students` table.
Who:   Used by StudentRepository and AuthService; read by Alembic.

Table notes:
    - email is UNIQUE; the handler checks for duplicates first so the
      client gets a 409 instead of an integrity error.
    - password_hash holds a bcrypt hash produced by `studyplanner.security`.
      It is never copied into a response schema.
    - role is 'user' or 'admin'; new registrations are always 'user'.
"""

from sqlalchemy import Integer, String, text
from sqlalchemy.orm import Mapped, mapped_column

from studyplanner.database import Base


class Student(Base):
    """A registered student. Owns courses and assignments."""

    __tablename__ = "students"

    id: Mapped[int] = mapped_column(
        "student_id",
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    name: Mapped[str] = mapped_column(String(100), nullable=False)

    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)

    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    role: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="user",
        server_default=text("'user'"),
    )

    def __repr__(self) -> str:
        return f"<Student(id={self.id}, email='{self.email}', role='{self.role}')>"
