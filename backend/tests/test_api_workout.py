from utils import wait_for_sessions


def start(client, kind="Push", **extra):
    return client.post("/workout/start", json={"workout_type": kind, **extra})


def test_idle_state(client):
    body = client.get("/workout").json()
    assert body["is_active"] is False
    assert body["exercises"] == []
    assert body["formatted_time"] == "00:00"


def test_start_log_finish_round_trip(client):
    r = start(client, "Push")
    assert r.status_code == 201, r.text
    body = r.json()
    assert body["is_active"] and body["workout_type"] == "Push"
    assert [e["name"] for e in body["exercises"]] == ["Bench Press", "Incline Dumbbell Press", "Cable Flyes"]
    assert all(len(e["sets"]) == 3 for e in body["exercises"])

    r = client.put("/workout/exercises/0/sets/0", json={"weight": 135, "reps": 8})
    assert r.status_code == 200
    logged = r.json()["exercises"][0]["sets"][0]
    assert logged["is_completed"] and logged["weight"] == 135 and logged["reps"] == 8

    r = client.post("/workout/finish")
    assert r.status_code == 202
    done = r.json()
    assert done["completed_sets"] == 1
    assert done["exercise_count"] == 3
    assert client.get("/workout").json()["is_active"] is False

    sessions = wait_for_sessions(client, 1)
    assert len(sessions) == 1
    assert sessions[0]["id"] == done["session_id"]
    assert sessions[0]["duration_seconds"] == done["duration_seconds"]
    assert sessions[0]["workout_type"] == "Push"
    assert sessions[0]["exercise_count"] == 1

    detail = client.get(f"/history/sessions/{done['session_id']}").json()
    assert len(detail["sets"]) == 1
    only = detail["sets"][0]
    assert (only["exercise_name"], only["weight"], only["reps"]) == ("Bench Press", 135, 8)
    assert only["formatted_weight"] == "135 lbs"


def test_conflicting_start_needs_resolution(client):
    start(client, "Push")
    client.put("/workout/exercises/0/sets/0", json={"weight": 95, "reps": 10})

    r = start(client, "Legs")
    assert r.status_code == 409
    detail = r.json()["detail"]
    assert detail["active_type"] == "Push"
    assert detail["requested_type"] == "Legs"
    assert client.get("/workout").json()["workout_type"] == "Push"

    r = start(client, "Legs", resolution="resume")
    assert r.status_code == 201
    assert r.json()["workout_type"] == "Push"
    assert r.json()["exercises"][0]["sets"][0]["is_completed"]

    r = start(client, "Legs", resolution="discard")
    assert r.status_code == 201
    assert r.json()["workout_type"] == "Legs"
    assert not any(s["is_completed"] for e in r.json()["exercises"] for s in e["sets"])


def test_same_type_start_resumes(client):
    start(client, "Pull")
    client.post("/workout/exercises", json={"name": "Chin-Ups"})
    r = start(client, "Pull")
    assert r.status_code == 201
    assert len(r.json()["exercises"]) == 4


def test_add_exercise_and_sets(client):
    start(client, "Shoulders")
    r = client.post("/workout/exercises", json={"name": "  Arnold Press "})
    assert r.status_code == 201
    assert r.json()["exercises"][-1]["name"] == "Arnold Press"

    r = client.post("/workout/exercises/3/sets")
    assert [s["set_number"] for s in r.json()["exercises"][3]["sets"]] == [1, 2, 3, 4]

    # out of range is ignored
    r = client.post("/workout/exercises/9/sets")
    assert r.status_code == 200
    assert [len(e["sets"]) for e in r.json()["exercises"]] == [3, 3, 3, 4]
    r = client.put("/workout/exercises/0/sets/7", json={"weight": 20, "reps": 12})
    assert r.status_code == 200
    assert not any(s["is_completed"] for s in r.json()["exercises"][0]["sets"])


def test_pause_and_resume(client):
    start(client, "Legs")
    r = client.post("/workout/pause")
    assert r.json()["timer_running"] is False
    r = client.post("/workout/resume")
    assert r.json()["timer_running"] is True


def test_editing_without_workout_is_409(client):
    assert client.post("/workout/exercises", json={"name": "Squat"}).status_code == 409
    assert client.post("/workout/exercises/0/sets").status_code == 409
    assert client.put("/workout/exercises/0/sets/0", json={"weight": 1, "reps": 1}).status_code == 409
    assert client.post("/workout/finish").status_code == 409
    assert client.post("/workout/pause").status_code == 409
    assert client.post("/workout/resume").status_code == 409


def test_cancel_is_idempotent_and_writes_nothing(client):
    assert client.post("/workout/cancel").status_code == 204
    start(client, "Pull")
    client.put("/workout/exercises/0/sets/0", json={"weight": 315, "reps": 3})
    assert client.post("/workout/cancel").status_code == 204
    assert client.post("/workout/cancel").status_code == 204
    assert client.get("/workout").json()["is_active"] is False
    assert client.get("/history/sessions").json() == []


def test_validation_errors(client):
    assert start(client, "Cardio").status_code == 422
    assert start(client, "Push", resolution="merge").status_code == 422
    start(client, "Push")
    assert client.put("/workout/exercises/0/sets/0", json={"weight": -5, "reps": 8}).status_code == 422
    assert client.put("/workout/exercises/0/sets/0", json={"weight": 5, "reps": -8}).status_code == 422
    assert client.post("/workout/exercises", json={"name": "   "}).status_code == 422
