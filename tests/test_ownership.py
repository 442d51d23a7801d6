"""Ownership guard over already-fetched entities."""
import pytest

from app.core.exceptions import FailureKind, ServiceError
from app.models import Activity, Goal, Task, User
from app.services.ownership import OwnershipGuard

guard = OwnershipGuard()


def _raises(call, *args):
    with pytest.raises(ServiceError) as exc_info:
        call(*args)
    return exc_info.value


class TestVerifyGoal:

    def test_owner_passes(self):
        goal = Goal(id=1, user_id=101, title="g")
        assert guard.verify_goal(101, goal, 1) is goal

    def test_missing_goal_is_not_found(self):
        exc = _raises(guard.verify_goal, 101, None, 5)
        assert exc.kind is FailureKind.NOT_FOUND
        assert exc.details == {"entity_type": "Goal", "id": 5}

    def test_other_users_goal_is_unauthorized(self):
        goal = Goal(id=1, user_id=101, title="g")
        exc = _raises(guard.verify_goal, 102, goal, 1)
        assert exc.kind is FailureKind.UNAUTHORIZED


class TestVerifyTask:

    def test_task_under_goal_passes(self):
        goal = Goal(id=1, user_id=7, title="g")
        task = Task(id=3, goal_id=1, user_id=7, title="t")
        assert guard.verify_task(goal, task, 3) is task

    def test_missing_task_is_not_found(self):
        goal = Goal(id=1, user_id=7, title="g")
        assert _raises(guard.verify_task, goal, None, 3).kind is FailureKind.NOT_FOUND

    def test_task_of_sibling_goal_is_mismatch(self):
        goal = Goal(id=2, user_id=7, title="g2")
        task = Task(id=3, goal_id=1, user_id=7, title="t")

        exc = _raises(guard.verify_task, goal, task, 3)

        assert exc.kind is FailureKind.OWNERSHIP_MISMATCH
        assert exc.details["expected_parent"] == 2
        assert exc.details["actual_parent"] == 1

    def test_task_of_other_user_is_unauthorized(self):
        goal = Goal(id=1, user_id=7, title="g")
        task = Task(id=3, goal_id=1, user_id=9, title="t")
        assert _raises(guard.verify_task, goal, task, 3).kind is FailureKind.UNAUTHORIZED


class TestVerifyActivity:

    def test_activity_under_goal_passes(self):
        goal = Goal(id=1, user_id=101, title="g1")
        activity = Activity(id=4, goal_id=1, user_id=101, title="a")
        assert guard.verify_activity(101, goal, activity, 4) is activity

    def test_missing_activity_is_not_found(self):
        goal = Goal(id=1, user_id=101, title="g1")
        assert _raises(guard.verify_activity, 101, goal, None, 4).kind is FailureKind.NOT_FOUND

    def test_other_users_activity_is_unauthorized(self):
        goal = Goal(id=1, user_id=101, title="g1")
        activity = Activity(id=4, goal_id=1, user_id=202, title="a")
        assert _raises(guard.verify_activity, 101, goal, activity, 4).kind is FailureKind.UNAUTHORIZED

    def test_same_user_wrong_goal_is_mismatch_not_unauthorized(self):
        g2 = Goal(id=2, user_id=101, title="g2")
        activity = Activity(id=4, goal_id=1, user_id=101, title="a")

        exc = _raises(guard.verify_activity, 101, g2, activity, 4)

        assert exc.kind is FailureKind.OWNERSHIP_MISMATCH
        assert exc.details["child_type"] == "Activity"


class TestVerifyUser:

    def test_self_passes(self):
        user = User(id=5, first_name="a", last_name="b", email="a@b.io")
        assert guard.verify_user(5, user, 5) is user

    def test_missing_user(self):
        assert _raises(guard.verify_user, 5, None, 6).kind is FailureKind.NOT_FOUND

    def test_other_user(self):
        user = User(id=6, first_name="a", last_name="b", email="a@b.io")
        assert _raises(guard.verify_user, 5, user, 6).kind is FailureKind.UNAUTHORIZED
