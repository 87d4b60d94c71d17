"""
API tests.

Run the FastAPI application against an in-memory SQLite database and
exercise the auth, workout and recovery endpoints end to end.
"""

import datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine, select

import liftlog.db.base  # noqa: F401  (registers all tables)
from liftlog.db.session import get_db
from liftlog.main import app
from liftlog.models.user import User

PASSWORD = "squat-bench-dead"


# ======================================================================
# Fixtures
# ======================================================================


@pytest.fixture()
def engine():
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture()
def client(engine):
    def _get_test_db():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_db] = _get_test_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def _register(client: TestClient, username: str = "lifter", email: str = "lifter@liftlog.io") -> dict:
    response = client.post("/api/v1/auth/register",
                           json={"username": username, "email": email, "password": PASSWORD})
    assert response.status_code == 201, response.text
    token = client.post("/api/v1/auth/token", json={"email": email, "password": PASSWORD})
    assert token.status_code == 200, token.text
    return {"Authorization": f"Bearer {token.json()['access_token']}"}


def _parse_ts(value: str) -> datetime.datetime:
    return datetime.datetime.fromisoformat(value.replace("Z", "+00:00"))


def _workout_payload(**overrides) -> dict:
    payload = {
        "name": "Push day",
        "duration": 60,
        "tags": ["strength"],
        "exercises": [
            {"name": "Bench Press", "category": "chest",
             "sets": [{"reps": 10, "weight": 60, "rpe": 7}, {"reps": 8, "weight": 70, "rpe": 8},
                      {"reps": 6, "weight": 80, "rpe": 9}]},
            {"name": "Overhead Press", "category": "shoulders",
             "sets": [{"reps": 8, "weight": 40}]},
        ],
    }
    payload.update(overrides)
    return payload


def _create_workout(client: TestClient, headers: dict, **overrides) -> dict:
    response = client.post("/api/v1/workouts", json=_workout_payload(**overrides), headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


FULL_FACTORS = {
    "sleep": {"hours": 7, "quality": 8},
    "nutrition": {"quality": 7, "hydration": 6},
    "stress": {"level": 4},
    "activity": {"step_count": 9000, "cardio_minutes": 20},
}


# ======================================================================
# Service endpoints
# ======================================================================


class TestServiceEndpoints:

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_info(self, client):
        assert client.get("/info").json()["project name"] == "LiftLog"


# ======================================================================
# Auth and profile
# ======================================================================


class TestAuth:

    def test_register_and_me(self, client):
        headers = _register(client)
        me = client.get("/api/v1/auth/me", headers=headers)
        assert me.status_code == 200
        body = me.json()
        assert body["username"] == "lifter"
        assert body["profile"]["fitness_level"] == "beginner"
        assert body["preferences"]["units"] == "metric"
        assert "hashed_password" not in body

    def test_duplicate_email_rejected(self, client):
        _register(client)
        response = client.post("/api/v1/auth/register",
                               json={"username": "other", "email": "lifter@liftlog.io", "password": PASSWORD})
        assert response.status_code == 400

    def test_wrong_password(self, client):
        _register(client)
        response = client.post("/api/v1/auth/token", json={"email": "lifter@liftlog.io", "password": "nope-nope"})
        assert response.status_code == 401

    def test_form_login(self, client):
        _register(client)
        response = client.post("/api/v1/auth/login", data={"username": "lifter@liftlog.io", "password": PASSWORD})
        assert response.status_code == 200
        assert response.json()["token_type"] == "bearer"

    def test_requires_token(self, client):
        assert client.get("/api/v1/workouts").status_code == 401

    def test_invalid_token(self, client):
        response = client.get("/api/v1/workouts", headers={"Authorization": "Bearer garbage"})
        assert response.status_code == 401

    def test_update_profile(self, client):
        headers = _register(client)
        response = client.put("/api/v1/users/profile", headers=headers, json={
            "profile": {"age": 30, "weight": 82.5, "height": 180, "fitness_level": "intermediate",
                        "goals": ["strength"]},
            "preferences": {"units": "imperial"},
        })
        assert response.status_code == 200, response.text
        body = response.json()
        assert body["profile"]["weight"] == 82.5
        assert body["profile"]["fitness_level"] == "intermediate"
        assert body["preferences"]["units"] == "imperial"
        assert client.get("/api/v1/users/profile", headers=headers).json()["profile"]["age"] == 30

    def test_inactive_user_forbidden(self, client, engine):
        headers = _register(client)
        with Session(engine) as session:
            user = session.exec(select(User).where(User.email == "lifter@liftlog.io")).one()
            user.is_active = False
            session.add(user)
            session.commit()

        assert client.get("/api/v1/auth/me", headers=headers).status_code == 403
        assert client.get("/api/v1/workouts", headers=headers).status_code == 403
        response = client.post("/api/v1/auth/token", json={"email": "lifter@liftlog.io", "password": PASSWORD})
        assert response.status_code == 403


# ======================================================================
# Workouts
# ======================================================================


class TestWorkouts:

    def test_create_computes_metrics(self, client):
        headers = _register(client)
        workout = _create_workout(client, headers)

        metrics = workout["metrics"]
        assert metrics["total_volume"] == 1960.0
        assert metrics["total_sets"] == 4
        assert metrics["total_reps"] == 32
        assert metrics["average_rpe"] == 8.0
        assert metrics["max_weight"] == 80.0

        bench = workout["exercises"][0]
        assert bench["total_volume"] == 1640.0
        assert bench["max_weight"] == 80.0
        assert bench["average_rpe"] == 8.0
        assert workout["exercises"][1]["average_rpe"] is None

    def test_client_metrics_ignored(self, client):
        headers = _register(client)
        workout = _create_workout(client, headers, metrics={"total_volume": 1})
        assert workout["metrics"]["total_volume"] == 1960.0

    def test_empty_workout(self, client):
        headers = _register(client)
        workout = _create_workout(client, headers, exercises=[])
        assert workout["metrics"] == {"total_volume": 0.0, "total_sets": 0, "total_reps": 0,
                                      "average_rpe": None, "max_weight": 0.0}

    def test_update_recomputes_metrics(self, client):
        headers = _register(client)
        workout = _create_workout(client, headers)
        response = client.put(f"/api/v1/workouts/{workout['id']}", headers=headers, json={
            "exercises": [{"name": "Squat", "category": "legs", "sets": [{"reps": 5, "weight": 100}]}],
        })
        assert response.status_code == 200, response.text
        body = response.json()
        assert body["metrics"]["total_volume"] == 500.0
        assert body["metrics"]["total_sets"] == 1
        assert body["name"] == "Push day"

    def test_list_pagination(self, client):
        headers = _register(client)
        for i in range(3):
            _create_workout(client, headers, name=f"Session {i}")
        body = client.get("/api/v1/workouts?page=1&limit=2&sort_by=name&sort_order=asc", headers=headers).json()
        assert [w["name"] for w in body["workouts"]] == ["Session 0", "Session 1"]
        assert body["pagination"] == {"current_page": 1, "total_pages": 2, "total": 3,
                                      "has_next": True, "has_prev": False}

    def test_other_users_workout_not_found(self, client):
        owner = _register(client)
        workout = _create_workout(client, owner)
        intruder = _register(client, username="intruder", email="intruder@liftlog.io")
        assert client.get(f"/api/v1/workouts/{workout['id']}", headers=intruder).status_code == 404
        assert client.delete(f"/api/v1/workouts/{workout['id']}", headers=intruder).status_code == 404

    def test_stats_overview(self, client):
        headers = _register(client)
        _create_workout(client, headers)
        _create_workout(client, headers, duration=30)
        stats = client.get("/api/v1/workouts/stats/overview?period=7d", headers=headers).json()
        assert stats["period_days"] == 7
        assert stats["total_workouts"] == 2
        assert stats["total_volume"] == 3920.0
        assert stats["total_sets"] == 8
        assert stats["avg_duration"] == 45.0
        assert stats["max_weight"] == 80.0

    def test_stats_without_workouts(self, client):
        headers = _register(client)
        stats = client.get("/api/v1/workouts/stats/overview", headers=headers).json()
        assert stats["period_days"] == 30
        assert stats["total_workouts"] == 0
        assert stats["total_volume"] == 0.0

    def test_exercise_progress(self, client):
        headers = _register(client)
        _create_workout(client, headers)
        points = client.get("/api/v1/workouts/progress/bench", headers=headers).json()
        assert len(points) == 1
        assert points[0]["exercise"]["name"] == "Bench Press"
        assert points[0]["volume"] == 1640.0
        assert points[0]["max_weight"] == 80.0

    def test_delete(self, client):
        headers = _register(client)
        workout = _create_workout(client, headers)
        assert client.delete(f"/api/v1/workouts/{workout['id']}", headers=headers).status_code == 204
        assert client.get(f"/api/v1/workouts/{workout['id']}", headers=headers).status_code == 404

    def test_unknown_period_means_90_days(self, client):
        headers = _register(client)
        _create_workout(client, headers)
        response = client.get("/api/v1/workouts/stats/overview?period=1y", headers=headers)
        assert response.status_code == 200, response.text
        assert response.json()["period_days"] == 90
        assert response.json()["total_workouts"] == 1
        assert client.get("/api/v1/workouts/progress/bench?period=1y", headers=headers).status_code == 200

    def test_explicit_null_clears_nullable_fields(self, client):
        headers = _register(client)
        workout = _create_workout(client, headers, notes="heavy")
        response = client.put(f"/api/v1/workouts/{workout['id']}", headers=headers,
                              json={"notes": None, "duration": None})
        assert response.status_code == 200, response.text
        body = response.json()
        assert body["notes"] is None
        assert body["duration"] is None

    def test_omitted_fields_are_kept(self, client):
        headers = _register(client)
        workout = _create_workout(client, headers, notes="heavy")
        body = client.put(f"/api/v1/workouts/{workout['id']}", headers=headers, json={"name": "Renamed"}).json()
        assert body["name"] == "Renamed"
        assert body["notes"] == "heavy"
        assert body["duration"] == 60.0


# ======================================================================
# Timestamps
# ======================================================================


class TestTimestamps:
    """Dates are stored and returned in UTC whatever offset the client sends."""

    def test_offset_date_converted_to_utc(self, client):
        headers = _register(client)
        workout = _create_workout(client, headers, date="2026-10-19T23:30:00-05:00")
        expected = datetime.datetime(2026, 10, 20, 4, 30, tzinfo=datetime.timezone.utc)
        assert _parse_ts(workout["date"]) == expected

        stored = client.get(f"/api/v1/workouts/{workout['id']}", headers=headers).json()
        assert _parse_ts(stored["date"]) == expected

    def test_naive_date_taken_as_utc(self, client):
        headers = _register(client)
        workout = _create_workout(client, headers, date="2026-10-19T08:00:00")
        assert _parse_ts(workout["date"]) == datetime.datetime(2026, 10, 19, 8, 0, tzinfo=datetime.timezone.utc)

    def test_recovery_order_uses_utc(self, client):
        headers = _register(client)
        workout = _create_workout(client, headers)
        # 23:00 at -05:00 is 04:00 UTC the next day, later than 02:00 UTC.
        late = client.post("/api/v1/recovery", headers=headers,
                           json={"workout_id": workout["id"], "date": "2026-03-01T23:00:00-05:00"}).json()
        early = client.post("/api/v1/recovery", headers=headers,
                            json={"workout_id": workout["id"], "date": "2026-03-02T02:00:00Z"}).json()

        body = client.get("/api/v1/recovery", headers=headers).json()
        assert [r["id"] for r in body["recoveries"]] == [late["id"], early["id"]]


# ======================================================================
# Recovery
# ======================================================================


class TestRecovery:

    def test_create_scores(self, client):
        headers = _register(client)
        workout = _create_workout(client, headers)
        response = client.post("/api/v1/recovery", headers=headers,
                               json={"workout_id": workout["id"], "factors": FULL_FACTORS})
        assert response.status_code == 201, response.text
        body = response.json()
        assert body["recovery_score"] == 7
        assert body["readiness_score"] == 7
        assert body["factors"]["sleep"]["hours"] == 7.0
        assert body["feedback"] is None

    def test_no_factors_is_neutral(self, client):
        headers = _register(client)
        workout = _create_workout(client, headers)
        body = client.post("/api/v1/recovery", headers=headers, json={"workout_id": workout["id"]}).json()
        assert body["recovery_score"] == 50

    def test_unknown_workout(self, client):
        headers = _register(client)
        response = client.post("/api/v1/recovery", headers=headers, json={"workout_id": 999})
        assert response.status_code == 404

    def test_out_of_range_factor_rejected(self, client):
        headers = _register(client)
        workout = _create_workout(client, headers)
        response = client.post("/api/v1/recovery", headers=headers,
                               json={"workout_id": workout["id"], "factors": {"sleep": {"quality": 11}}})
        assert response.status_code == 422

    def test_update_recomputes_scores(self, client):
        headers = _register(client)
        workout = _create_workout(client, headers)
        record = client.post("/api/v1/recovery", headers=headers,
                             json={"workout_id": workout["id"], "factors": FULL_FACTORS}).json()
        response = client.put(f"/api/v1/recovery/{record['id']}", headers=headers, json={
            "factors": {"sleep": {"quality": 10}, "stress": {"level": 1}},
        })
        assert response.status_code == 200, response.text
        assert response.json()["recovery_score"] == 10

    def test_update_without_factors_keeps_factors(self, client):
        headers = _register(client)
        workout = _create_workout(client, headers)
        record = client.post("/api/v1/recovery", headers=headers,
                             json={"workout_id": workout["id"], "factors": FULL_FACTORS}).json()
        response = client.put(f"/api/v1/recovery/{record['id']}", headers=headers,
                              json={"date": "2026-05-01T07:00:00Z"})
        assert response.status_code == 200, response.text
        body = response.json()
        assert body["recovery_score"] == 7
        assert body["factors"] == record["factors"]
        assert _parse_ts(body["date"]) == datetime.datetime(2026, 5, 1, 7, 0, tzinfo=datetime.timezone.utc)

    def test_other_users_record_not_found(self, client):
        owner = _register(client)
        workout = _create_workout(client, owner)
        record = client.post("/api/v1/recovery", headers=owner,
                             json={"workout_id": workout["id"], "factors": FULL_FACTORS}).json()
        intruder = _register(client, username="intruder", email="intruder@liftlog.io")

        update = client.put(f"/api/v1/recovery/{record['id']}", headers=intruder,
                            json={"factors": {"sleep": {"quality": 1}}})
        assert update.status_code == 404
        feedback = client.post(f"/api/v1/recovery/{record['id']}/feedback", headers=intruder,
                               json={"accuracy": 1, "helpfulness": 1})
        assert feedback.status_code == 404
        assert client.post("/api/v1/recovery", headers=intruder,
                           json={"workout_id": workout["id"]}).status_code == 404

        unchanged = client.get("/api/v1/recovery", headers=owner).json()["recoveries"][0]
        assert unchanged["recovery_score"] == 7
        assert unchanged["feedback"] is None

    def test_feedback(self, client):
        headers = _register(client)
        workout = _create_workout(client, headers)
        record = client.post("/api/v1/recovery", headers=headers,
                             json={"workout_id": workout["id"], "factors": FULL_FACTORS}).json()
        response = client.post(f"/api/v1/recovery/{record['id']}/feedback", headers=headers,
                               json={"accuracy": 4, "helpfulness": 5, "comments": "Spot on"})
        assert response.status_code == 200, response.text
        body = response.json()
        assert body["message"] == "Feedback submitted successfully"
        assert body["recovery"]["feedback"] == {"accuracy": 4, "helpfulness": 5, "comments": "Spot on"}
        assert body["recovery"]["recovery_score"] == record["recovery_score"]

    def test_list(self, client):
        headers = _register(client)
        workout = _create_workout(client, headers)
        for _ in range(2):
            client.post("/api/v1/recovery", headers=headers, json={"workout_id": workout["id"]})
        body = client.get("/api/v1/recovery", headers=headers).json()
        assert len(body["recoveries"]) == 2
        assert body["pagination"]["total"] == 2

    def test_list_date_range(self, client):
        headers = _register(client)
        workout = _create_workout(client, headers)
        for day in ("2026-01-01", "2026-02-01", "2026-03-01"):
            client.post("/api/v1/recovery", headers=headers,
                        json={"workout_id": workout["id"], "date": f"{day}T00:00:00Z"})

        body = client.get("/api/v1/recovery", headers=headers, params={
            "start_date": "2026-01-15T00:00:00Z", "end_date": "2026-02-15T00:00:00Z",
        }).json()
        assert body["pagination"]["total"] == 1
        assert [_parse_ts(r["date"]) for r in body["recoveries"]] == [
            datetime.datetime(2026, 2, 1, tzinfo=datetime.timezone.utc),
        ]

    def test_list_range_bounds_inclusive(self, client):
        headers = _register(client)
        workout = _create_workout(client, headers)
        client.post("/api/v1/recovery", headers=headers,
                    json={"workout_id": workout["id"], "date": "2026-02-01T00:00:00Z"})
        body = client.get("/api/v1/recovery", headers=headers, params={
            "start_date": "2026-02-01T00:00:00Z", "end_date": "2026-02-01T00:00:00Z",
        }).json()
        assert body["pagination"]["total"] == 1

    def test_recommendations_without_history(self, client):
        headers = _register(client)
        body = client.get("/api/v1/recovery/recommendations", headers=headers).json()
        assert body["recommendations"]["suggested_recovery_time"] == 60.0
        assert body["recommendations"]["focus_areas"] == [
            "sleep", "sleep_quality", "nutrition", "hydration", "activity",
        ]
        assert body["recent_recoveries"] == 0
        assert body["recent_workouts"] == 0

    def test_recommendations_from_history(self, client):
        headers = _register(client)
        workout = _create_workout(client, headers)
        factors = {
            "sleep": {"hours": 8, "quality": 8},
            "nutrition": {"quality": 8, "hydration": 8},
            "stress": {"level": 9},
            "activity": {"step_count": 10000},
        }
        client.post("/api/v1/recovery", headers=headers, json={"workout_id": workout["id"], "factors": factors})
        body = client.get("/api/v1/recovery/recommendations", headers=headers).json()
        assert body["recommendations"]["focus_areas"] == ["stress"]
        assert body["recommendations"]["intensity_modifier"] == pytest.approx(0.8)
        assert body["average_factors"]["stress"]["level"] == 9.0
        assert body["recent_recoveries"] == 1
        assert body["recent_workouts"] == 1

    def test_deleting_workout_removes_recoveries(self, client):
        headers = _register(client)
        workout = _create_workout(client, headers)
        client.post("/api/v1/recovery", headers=headers, json={"workout_id": workout["id"]})
        client.delete(f"/api/v1/workouts/{workout['id']}", headers=headers)
        assert client.get("/api/v1/recovery", headers=headers).json()["pagination"]["total"] == 0
