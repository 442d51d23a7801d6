"""Field-level null-coalescing merge of update payloads."""
import pytest

from app.models import Activity, Goal
from app.schemas.activity import ActivityUpdate
from app.schemas.goal import GoalUpdate
from app.schemas.user import UserUpdate
from app.services.merge import merge_update


def _activity(**kwargs):
    defaults = dict(title="Run", description="Morning run", type="FITNESS", is_complete=False)
    defaults.update(kwargs)
    return Activity(**defaults)


def test_null_description_keeps_existing():
    activity = _activity()

    merge_update(activity, ActivityUpdate(description=None))

    assert activity.description == "Morning run"


def test_non_null_description_replaces():
    activity = _activity()

    merge_update(activity, ActivityUpdate(description="x"))

    assert activity.description == "x"


def test_omitted_fields_are_untouched():
    activity = _activity()

    merge_update(activity, ActivityUpdate(title="Swim"))

    assert activity.title == "Swim"
    assert activity.description == "Morning run"
    assert activity.type == "FITNESS"


def test_empty_string_clears():
    activity = _activity()

    merge_update(activity, ActivityUpdate(description=""))

    assert activity.description == ""


def test_false_is_a_value_not_a_null():
    goal = Goal(title="Marathon", is_complete=True, progress=40)

    merge_update(goal, GoalUpdate(is_complete=False, progress=0))

    assert goal.is_complete is False
    assert goal.progress == 0


def test_fields_restrict_the_merge():
    goal = Goal(title="Marathon", description="Spring", progress=10)

    merge_update(goal, GoalUpdate(title="Ultra", progress=90), fields=("progress",))

    assert goal.title == "Marathon"
    assert goal.progress == 90


def test_transform_and_rename():
    class Target:
        password_hash = "old"

    target = merge_update(
        Target(),
        UserUpdate(password="NewPassword1"),
        transforms={"password": lambda value: f"hashed:{value}"},
        renames={"password": "password_hash"},
    )

    assert target.password_hash == "hashed:NewPassword1"
    assert not hasattr(target, "password")


def test_failing_transform_leaves_entity_untouched():
    activity = _activity()

    def boom(value):
        raise RuntimeError("transform failed")

    with pytest.raises(RuntimeError):
        merge_update(
            activity,
            ActivityUpdate(title="Swim", type="OTHER"),
            transforms={"type": boom},
        )

    assert activity.title == "Run"
    assert activity.type == "FITNESS"
