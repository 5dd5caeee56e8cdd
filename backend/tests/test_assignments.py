"""
StudyPlanner Backend: Assignment Handler Tests
===============================================

What we test:
    ✅ Create: status starts as pending, field checks in order
    ✅ PUT: status and field changes are independent repository calls
    ✅ PUT with nothing applicable → 400 "No fields were updated"
    ✅ Listing, 404s, and ownership checks
"""

from datetime import datetime

import pytest

from studyplanner.schemas.assignment import Status


class TestCreateAssignment:

    @pytest.mark.asyncio
    async def test_create(self, test_client, repositories, headers, assignment_record):
        repositories.assignments.insert.return_value = assignment_record

        response = await test_client.post(
            "/assignments",
            json={
                "course_id": 1,
                "title": "Problem set 1",
                "description": "Chapters 1-3",
                "deadline": "2025-02-01 23:59:00",
            },
            headers=headers(1),
        )

        assert response.status_code == 201
        body = response.json()
        assert body["status"] == "pending"
        assert body["deadline"] == "2025-02-01 23:59:00"
        assert body["assignmentId"] == 1
        repositories.assignments.insert.assert_awaited_once_with(
            student_id=1,
            course_id=1,
            title="Problem set 1",
            description="Chapters 1-3",
            deadline=datetime(2025, 2, 1, 23, 59, 0),
        )

    @pytest.mark.asyncio
    async def test_bad_course_id(self, test_client, headers):
        response = await test_client.post(
            "/assignments",
            json={"course_id": "abc", "title": "T", "deadline": "not a date"},
            headers=headers(1),
        )
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid course_id"}

    @pytest.mark.asyncio
    async def test_bad_deadline(self, test_client, headers):
        response = await test_client.post(
            "/assignments",
            json={"course_id": "1", "title": "T", "deadline": "2025-02-01"},
            headers=headers(1),
        )
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid date format. Use YYYY-MM-DD HH:MM:SS"}

    @pytest.mark.asyncio
    async def test_missing_title(self, test_client, headers):
        response = await test_client.post(
            "/assignments",
            json={"course_id": "1", "deadline": "2025-02-01 10:00:00"},
            headers=headers(1),
        )
        assert response.status_code == 400
        assert response.json() == {"error": "course_id, title, and deadline are required"}

    @pytest.mark.asyncio
    async def test_negative_course_id(self, test_client, repositories, headers):
        response = await test_client.post(
            "/assignments",
            json={"course_id": "-5", "title": "T", "deadline": "2025-01-01 10:00:00"},
            headers=headers(1),
        )
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid course_id"}
        repositories.assignments.insert.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_insert_failure(self, test_client, repositories, headers):
        repositories.assignments.insert.return_value = None
        response = await test_client.post(
            "/assignments",
            json={"course_id": "1", "title": "T", "deadline": "2025-02-01 10:00:00"},
            headers=headers(1),
        )
        assert response.status_code == 500
        assert response.json() == {"error": "Failed to create assignment"}


class TestReadAssignments:

    @pytest.mark.asyncio
    async def test_get(self, test_client, repositories, headers, assignment_record):
        repositories.assignments.find_by_id.return_value = assignment_record
        response = await test_client.get("/assignments/1", headers=headers(1))
        assert response.status_code == 200
        assert response.json()["title"] == "Problem set 1"

    @pytest.mark.asyncio
    async def test_get_missing(self, test_client, repositories, headers):
        repositories.assignments.find_by_id.return_value = None
        response = await test_client.get("/assignments/9", headers=headers(1))
        assert response.status_code == 404
        assert response.json() == {"error": "Assignment not found"}

    @pytest.mark.asyncio
    async def test_get_forbidden(self, test_client, repositories, headers, assignment_record):
        repositories.assignments.find_by_id.return_value = assignment_record
        response = await test_client.get("/assignments/1", headers=headers(2))
        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_listing(self, test_client, repositories, headers, assignment_record):
        repositories.assignments.list_by_student.return_value = [assignment_record]
        response = await test_client.get("/assignments/students/1", headers=headers(1))
        assert response.status_code == 200
        assert len(response.json()) == 1

    @pytest.mark.asyncio
    async def test_empty_listing(self, test_client, repositories, headers):
        repositories.assignments.list_by_student.return_value = []
        response = await test_client.get("/assignments/students/1", headers=headers(1))
        assert response.status_code == 404
        assert response.json() == {"error": "No assignments found"}


class TestUpdateAssignment:

    @pytest.mark.asyncio
    async def test_status_only(self, test_client, repositories, headers, assignment_record):
        completed = assignment_record.model_copy(update={"status": Status.COMPLETED})
        repositories.assignments.find_by_id.side_effect = [assignment_record, completed]
        repositories.assignments.set_status.return_value = True

        response = await test_client.put(
            "/assignments/1", json={"status": "COMPLETED"}, headers=headers(1)
        )

        assert response.status_code == 200
        assert response.json()["status"] == "completed"
        repositories.assignments.set_status.assert_awaited_once_with(1, Status.COMPLETED)
        repositories.assignments.update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_fields_merge_with_stored(self, test_client, repositories, headers, assignment_record):
        repositories.assignments.find_by_id.return_value = assignment_record
        repositories.assignments.update.return_value = True

        response = await test_client.put(
            "/assignments/1", json={"title": "Problem set 1 (revised)"}, headers=headers(1)
        )

        assert response.status_code == 200
        repositories.assignments.update.assert_awaited_once_with(
            1,
            title="Problem set 1 (revised)",
            description="Chapters 1-3",
            deadline=datetime(2025, 2, 1, 23, 59, 0),
            course_id=1,
        )
        repositories.assignments.set_status.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_either_call_succeeding_is_enough(
        self, test_client, repositories, headers, assignment_record
    ):
        repositories.assignments.find_by_id.return_value = assignment_record
        repositories.assignments.set_status.return_value = False
        repositories.assignments.update.return_value = True
        response = await test_client.put(
            "/assignments/1", json={"status": "pending", "title": "New"}, headers=headers(1)
        )
        assert response.status_code == 200

    @pytest.mark.asyncio
    async def test_nothing_updated(self, test_client, repositories, headers, assignment_record):
        repositories.assignments.find_by_id.return_value = assignment_record
        response = await test_client.put("/assignments/1", json={}, headers=headers(1))
        assert response.status_code == 400
        assert response.json() == {"error": "No fields were updated"}

    @pytest.mark.asyncio
    async def test_invalid_status(self, test_client, repositories, headers, assignment_record):
        repositories.assignments.find_by_id.return_value = assignment_record
        response = await test_client.put(
            "/assignments/1", json={"status": "done"}, headers=headers(1)
        )
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid status value"}

    @pytest.mark.asyncio
    async def test_not_found_before_auth(self, test_client, repositories, headers):
        repositories.assignments.find_by_id.return_value = None
        response = await test_client.put("/assignments/1", json={"title": "x"}, headers=headers(2))
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_forbidden(self, test_client, repositories, headers, assignment_record):
        repositories.assignments.find_by_id.return_value = assignment_record
        response = await test_client.put("/assignments/1", json={"title": "x"}, headers=headers(2))
        assert response.status_code == 403
        repositories.assignments.update.assert_not_awaited()


class TestDeleteAssignment:

    @pytest.mark.asyncio
    async def test_delete(self, test_client, repositories, headers, assignment_record):
        repositories.assignments.find_by_id.return_value = assignment_record
        repositories.assignments.delete.return_value = True
        response = await test_client.delete("/assignments/1", headers=headers(1))
        assert response.status_code == 200
        assert response.json() == {"message": "Assignment deleted successfully"}

    @pytest.mark.asyncio
    async def test_delete_failure(self, test_client, repositories, headers, assignment_record):
        repositories.assignments.find_by_id.return_value = assignment_record
        repositories.assignments.delete.return_value = False
        response = await test_client.delete("/assignments/1", headers=headers(1, "admin"))
        assert response.status_code == 500
        assert response.json() == {"error": "Failed to delete assignment"}
