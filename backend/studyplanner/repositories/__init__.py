"""
StudyPlanner Backend: Data-Access Collaborators
================================================

What:  One repository per entity, each wrapping the async session factory it
       is constructed with.
Why:   Handlers depend on a small call contract (find, list, insert, update,
       delete) and never on SQL or sessions.

Contract:
    - Lookups return a schema record or None; lists return a (possibly
      empty) list.
    - Writes return the new record / True on success, None / False on
      failure or when no row matched.
    - SQLAlchemy errors are logged here and never raised to the caller,
      except a unique-email violation, which surfaces as ConflictError.
    - Every call runs in its own session; multi-statement writes (cascading
      deletes) run in one transaction.

Inventory:
    - StudentRepository:     students (+ cascade to courses, assignments, schedules)
    - CourseRepository:      courses (+ cascade to schedules)
    - AssignmentRepository:  assignments, status transitions
    - ScheduleRepository:    schedule slots, listing by course or by owning student
"""

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from studyplanner.repositories.assignment_repository import AssignmentRepository
from studyplanner.repositories.course_repository import CourseRepository
from studyplanner.repositories.schedule_repository import ScheduleRepository
from studyplanner.repositories.student_repository import StudentRepository


@dataclass
class Repositories:
    """The set of collaborators handed to the route handlers."""

    students: StudentRepository
    courses: CourseRepository
    assignments: AssignmentRepository
    schedules: ScheduleRepository


def build_repositories(session_factory: async_sessionmaker[AsyncSession]) -> Repositories:
    return Repositories(
        students=StudentRepository(session_factory),
        courses=CourseRepository(session_factory),
        assignments=AssignmentRepository(session_factory),
        schedules=ScheduleRepository(session_factory),
    )
