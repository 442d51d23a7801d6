"""Activity endpoints, including start/stop over HTTP."""
import pytest

API = "/api/v1"


@pytest.fixture
def owner(make_user):
    return make_user(id=101)


@pytest.fixture
def headers(owner, auth_headers):
    return auth_headers(owner)


def _goal(client, headers, title="Get fit"):
    response = client.post(f"{API}/users/101/goals", json={"title": title}, headers=headers)
    assert response.status_code == 201
    return response.json()


def _activity(client, headers, goal_id, **fields):
    payload = {"title": "Run", "type": "FITNESS", **fields}
    response = client.post(
        f"{API}/users/101/goals/{goal_id}/activities", json=payload, headers=headers
    )
    assert response.status_code == 201
    return response.json()


def test_start_and_stop(client, owner, headers):
    goal = _goal(client, headers)
    activity = _activity(client, headers, goal["id"])
    base = f"{API}/users/101/goals/{goal['id']}/activities/{activity['id']}"
    assert activity["start_time"] is None

    started = client.put(f"{base}/start", headers=headers)
    assert started.status_code == 200
    assert started.json()["start_time"] is not None
    assert started.json()["is_complete"] is False

    stopped = client.put(f"{base}/stop", headers=headers)
    assert stopped.status_code == 200
    body = stopped.json()
    assert body["stop_time"] is not None
    assert body["duration"] >= 0
    assert body["is_complete"] is True


def test_stop_without_start(client, owner, headers):
    goal = _goal(client, headers)
    activity = _activity(client, headers, goal["id"])

    response = client.put(
        f"{API}/users/101/goals/{goal['id']}/activities/{activity['id']}/stop", headers=headers
    )

    assert response.status_code == 422
    assert response.json()["error"] == "validation_failure"
    assert response.json()["field"] == "start_time"


def test_stop_through_other_goal_of_same_user_is_mismatch(client, owner, headers):
    g1 = _goal(client, headers, "Get fit")
    g2 = _goal(client, headers, "Read more")
    activity = _activity(client, headers, g1["id"])
    client.put(f"{API}/users/101/goals/{g1['id']}/activities/{activity['id']}/start", headers=headers)

    response = client.put(
        f"{API}/users/101/goals/{g2['id']}/activities/{activity['id']}/stop", headers=headers
    )

    assert response.status_code == 409
    assert response.json()["error"] == "ownership_mismatch"
    assert response.json()["expected_parent"] == str(g2["id"])
    assert response.json()["actual_parent"] == str(g1["id"])

    still_running = client.get(
        f"{API}/users/101/goals/{g1['id']}/activities/{activity['id']}", headers=headers
    ).json()
    assert still_running["stop_time"] is None


def test_other_user_cannot_touch_activity(client, owner, headers, make_user, auth_headers):
    goal = _goal(client, headers)
    activity = _activity(client, headers, goal["id"])
    intruder = make_user(id=202)
    intruder_headers = auth_headers(intruder)

    for method, suffix in (("put", "/start"), ("put", "/stop"), ("get", ""), ("delete", "")):
        response = getattr(client, method)(
            f"{API}/users/202/goals/{goal['id']}/activities/{activity['id']}{suffix}",
            headers=intruder_headers,
        )
        assert response.status_code == 403, (method, suffix)

    unchanged = client.get(
        f"{API}/users/101/goals/{goal['id']}/activities/{activity['id']}", headers=headers
    ).json()
    assert unchanged["start_time"] is None


def test_update_merges_fields(client, owner, headers):
    goal = _goal(client, headers)
    activity = _activity(client, headers, goal["id"], description="Morning run")
    url = f"{API}/users/101/goals/{goal['id']}/activities/{activity['id']}"

    kept = client.put(url, json={"description": None, "title": "Long run"}, headers=headers)
    assert kept.json()["description"] == "Morning run"
    assert kept.json()["title"] == "Long run"

    replaced = client.put(url, json={"description": "x"}, headers=headers)
    assert replaced.json()["description"] == "x"


def test_timing_fields_are_not_updatable(client, owner, headers):
    goal = _goal(client, headers)
    activity = _activity(client, headers, goal["id"])
    url = f"{API}/users/101/goals/{goal['id']}/activities/{activity['id']}"

    response = client.put(url, json={"duration": 999, "start_time": "2026-01-01T00:00:00Z"}, headers=headers)

    assert response.status_code == 200
    assert response.json()["duration"] is None
    assert response.json()["start_time"] is None


def test_list_and_delete(client, owner, headers):
    g1 = _goal(client, headers, "Get fit")
    g2 = _goal(client, headers, "Read more")
    a1 = _activity(client, headers, g1["id"])
    a2 = _activity(client, headers, g2["id"], title="Read")

    per_goal = client.get(f"{API}/users/101/goals/{g1['id']}/activities", headers=headers).json()
    all_of_user = client.get(f"{API}/users/101/activities", headers=headers).json()

    assert [a["id"] for a in per_goal] == [a1["id"]]
    assert sorted(a["id"] for a in all_of_user) == sorted([a1["id"], a2["id"]])

    deleted = client.delete(f"{API}/users/101/goals/{g1['id']}/activities/{a1['id']}", headers=headers)
    assert deleted.status_code == 200
    assert client.get(
        f"{API}/users/101/goals/{g1['id']}/activities/{a1['id']}", headers=headers
    ).status_code == 404
