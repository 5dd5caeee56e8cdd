"""
StudyPlanner Backend: Request/Response Schema Tests
====================================================

What we test:
    ✅ Each endpoint's body schema reports the first failure with the
       message the API promises
    ✅ Format errors win over missing-field errors
    ✅ Records serialize with camelCase keys, HH:MM times, upper-case
       weekdays and 'YYYY-MM-DD HH:MM:SS' deadlines
"""

from datetime import date, datetime, time

import pytest

from studyplanner.exceptions import BadRequestError
from studyplanner.responses import render
from studyplanner.schemas.assignment import AssignmentCreate, AssignmentUpdate, Status
from studyplanner.schemas.common import parse_body
from studyplanner.schemas.course import CourseCreate, CourseUpdate
from studyplanner.schemas.schedule import ScheduleCreate, ScheduleUpdate, Weekday
from studyplanner.schemas.student import LoginRequest, StudentCreate, StudentUpdate


def message_for(schema, data):
    with pytest.raises(BadRequestError) as exc_info:
        parse_body(schema, data)
    return exc_info.value.message


class TestStudentSchemas:

    def test_create_requires_all_fields(self):
        assert message_for(StudentCreate, {"name": "A", "email": "a@x.com"}) == (
            "Name, email, and password are required"
        )

    def test_blank_values_count_as_missing(self):
        assert message_for(StudentCreate, {"name": "  ", "email": "a@x.com", "password": "pw"}) == (
            "Name, email, and password are required"
        )

    def test_update_needs_name_or_email(self):
        assert message_for(StudentUpdate, {"password": "x"}) == (
            "At least one of name or email must be provided"
        )

    def test_update_with_email_only(self):
        body = parse_body(StudentUpdate, {"email": "new@x.com"})
        assert body.email == "new@x.com" and body.name is None

    def test_login_requires_both(self):
        assert message_for(LoginRequest, {"email": "a@x.com"}) == "Email and password are required"


class TestCourseSchemas:

    def test_valid_create(self):
        body = parse_body(
            CourseCreate,
            {"course_name": "Physics", "start_date": "2025-01-01", "end_date": "2025-01-01"},
        )
        assert body.start_date == date(2025, 1, 1) == body.end_date

    def test_bad_date_reported_before_missing_name(self):
        assert message_for(CourseCreate, {"start_date": "01/02/2025", "end_date": "2025-05-01"}) == (
            "Invalid date format. Use YYYY-MM-DD"
        )

    def test_missing_fields(self):
        assert message_for(CourseCreate, {"course_name": "Physics"}) == (
            "Course name, start date, and end date are required"
        )

    def test_update_is_partial(self):
        body = parse_body(CourseUpdate, {"end_date": "2025-12-31"})
        assert body.course_name is None and body.end_date == date(2025, 12, 31)


class TestAssignmentSchemas:

    def test_valid_create(self):
        body = parse_body(
            AssignmentCreate,
            {"course_id": "3", "title": "Essay", "deadline": "2025-03-01 17:00:00"},
        )
        assert body.course_id == 3
        assert body.deadline == datetime(2025, 3, 1, 17, 0, 0)
        assert body.description is None

    def test_bad_deadline(self):
        message = message_for(
            AssignmentCreate, {"course_id": "3", "title": "Essay", "deadline": "2025-03-01"}
        )
        assert message.startswith("Invalid date format")

    def test_bad_course_id(self):
        assert message_for(
            AssignmentCreate, {"course_id": "three", "title": "Essay", "deadline": "2025-03-01 17:00:00"}
        ) == "Invalid course_id"

    @pytest.mark.parametrize("course_id", ["0", "-5"])
    def test_non_positive_course_id(self, course_id):
        assert message_for(
            AssignmentCreate, {"course_id": course_id, "title": "Essay", "deadline": "2025-03-01 17:00:00"}
        ) == "Invalid course_id"
        assert message_for(AssignmentUpdate, {"course_id": course_id}) == "Invalid course_id"

    def test_missing_title(self):
        assert message_for(AssignmentCreate, {"course_id": "3", "deadline": "2025-03-01 17:00:00"}) == (
            "course_id, title, and deadline are required"
        )

    @pytest.mark.parametrize("raw,expected", [
        ("pending", Status.PENDING),
        ("COMPLETED", Status.COMPLETED),
        ("Completed", Status.COMPLETED),
    ])
    def test_status_case_insensitive(self, raw, expected):
        assert parse_body(AssignmentUpdate, {"status": raw}).status is expected

    def test_bogus_status(self):
        assert message_for(AssignmentUpdate, {"status": "bogus"}) == "Invalid status value"

    def test_status_only_update_has_no_field_changes(self):
        assert not parse_body(AssignmentUpdate, {"status": "completed"}).has_field_changes()
        assert parse_body(AssignmentUpdate, {"title": "New"}).has_field_changes()


class TestScheduleSchemas:

    def valid(self, **overrides):
        data = {"course_id": "1", "weekday": "monday", "start_time": "09:00", "end_time": "10:00"}
        data.update(overrides)
        return data

    def test_valid_create(self):
        body = parse_body(ScheduleCreate, self.valid())
        assert body.weekday is Weekday.MONDAY
        assert body.start_time == time(9, 0)

    def test_course_id_required_first(self):
        data = self.valid(weekday="funday")
        del data["course_id"]
        assert message_for(ScheduleCreate, data) == "course_id is required"

    def test_course_id_format(self):
        assert message_for(ScheduleCreate, self.valid(course_id="x")) == "Invalid course_id format"

    def test_course_id_must_be_positive(self):
        assert message_for(ScheduleCreate, self.valid(course_id="0")) == "Invalid course_id format"

    def test_weekday_value(self):
        assert message_for(ScheduleCreate, self.valid(weekday="funday")) == "Invalid weekday value"

    def test_time_errors_name_the_field(self):
        assert message_for(ScheduleCreate, self.valid(start_time="9am")) == (
            "Invalid start_time format. Use HH:MM"
        )
        assert message_for(ScheduleCreate, self.valid(end_time="25:00")) == (
            "Invalid end_time format. Use HH:MM"
        )

    def test_missing_times(self):
        data = self.valid()
        del data["end_time"]
        assert message_for(ScheduleCreate, data) == (
            "course_id, weekday, start_time, and end_time are required"
        )

    def test_equal_times_rejected(self):
        assert message_for(ScheduleCreate, self.valid(start_time="10:00", end_time="10:00")) == (
            "start_time must be before end_time"
        )

    def test_seconds_accepted(self):
        body = parse_body(ScheduleCreate, self.valid(start_time="09:00:00", end_time="09:45:30"))
        assert body.end_time == time(9, 45, 30)

    def test_update_single_message_for_format_errors(self):
        assert message_for(ScheduleUpdate, {"weekday": "someday"}) == "Invalid time or weekday format"
        assert message_for(ScheduleUpdate, {"end_time": "noon"}) == "Invalid time or weekday format"


class TestRecordSerialization:

    def test_course_keys(self, course_record):
        assert render(course_record) == {
            "courseId": 1,
            "studentId": 1,
            "courseName": "Algorithms",
            "startDate": "2025-01-06",
            "endDate": "2025-05-30",
        }

    def test_schedule_times_and_weekday(self, schedule_record):
        data = render(schedule_record)
        assert data["weekday"] == "MONDAY"
        assert data["startTime"] == "10:00"
        assert data["endTime"] == "11:30"
        assert data["scheduleId"] == 1

    def test_assignment_deadline_and_status(self, assignment_record):
        data = render(assignment_record)
        assert data["deadline"] == "2025-02-01 23:59:00"
        assert data["status"] == "pending"
        assert data["assignmentId"] == 1

    def test_student_has_no_password(self, student_record):
        assert set(render(student_record)) == {"id", "name", "email", "role"}

    def test_lists_render_each_record(self, course_record):
        assert render([course_record])[0]["courseName"] == "Algorithms"
