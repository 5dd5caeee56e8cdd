"""
StudyPlanner Backend: Authorization Policy Tests
=================================================

What we test:
    ✅ admin is allowed whatever subject id it claims
    ✅ user is allowed iff subject id equals the owner id
    ✅ missing role or id → UNAUTHORIZED; unknown roles → FORBIDDEN
    ✅ the owner-only variant ignores the admin role
"""

import pytest

from studyplanner.auth import (
    AuthContext,
    Decision,
    authorize,
    authorize_owner_only,
    evaluate,
)
from studyplanner.exceptions import ForbiddenError, UnauthorizedError


class TestEvaluate:

    @pytest.mark.parametrize("subject_id", [1, 2, 999])
    def test_admin_always_allowed(self, subject_id):
        assert evaluate("admin", subject_id, owner_id=1) is Decision.ALLOWED

    def test_user_allowed_on_own_resource(self):
        assert evaluate("user", 4, owner_id=4) is Decision.ALLOWED

    def test_user_forbidden_on_other_resource(self):
        assert evaluate("user", 2, owner_id=1) is Decision.FORBIDDEN

    @pytest.mark.parametrize("role,subject_id", [(None, 1), ("user", None), (None, None)])
    def test_missing_identity_is_unauthorized(self, role, subject_id):
        assert evaluate(role, subject_id, owner_id=1) is Decision.UNAUTHORIZED

    def test_unknown_role_is_forbidden_even_for_owner(self):
        assert evaluate("tutor", 1, owner_id=1) is Decision.FORBIDDEN


class TestAuthorize:

    def test_allowed_returns_none(self):
        assert authorize(AuthContext(subject_id=1, role="user"), 1) is None

    def test_forbidden_raises_with_standard_message(self):
        with pytest.raises(ForbiddenError) as exc_info:
            authorize(AuthContext(subject_id=2, role="user"), 1)
        assert exc_info.value.message == "Forbidden: Insufficient permissions"
        assert exc_info.value.context["owner_id"] == 1

    def test_owner_only_rejects_admin_of_other_owner(self):
        with pytest.raises(ForbiddenError) as exc_info:
            authorize_owner_only(9, 1, "Forbidden: You can only delete your own courses")
        assert exc_info.value.message == "Forbidden: You can only delete your own courses"

    def test_owner_only_accepts_owner(self):
        authorize_owner_only(1, 1, "unused")

    def test_unauthorized_decision_raises_401(self):
        with pytest.raises(UnauthorizedError):
            authorize(AuthContext(subject_id=None, role="user"), 1)
