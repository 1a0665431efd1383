"""Trailing-window queries on real-time samples."""
from datetime import datetime, timedelta

import pytest

from robot_analytics.database import utcnow
from robot_analytics.models import RealTimeSample
from robot_analytics.seed.seed_data import seed_database


def _sample(status: str) -> RealTimeSample:
    return RealTimeSample(trash_collected=1, robot_status=status, latitude=10.0, longitude=20.0)


def test_only_old_seed_row_gives_empty_history(client, session):
    seed_database(session, timestamp=utcnow() - timedelta(hours=2))

    resp = client.get("/api/real-time/history", params={"hours": 1})

    assert resp.status_code == 200
    assert resp.json() == []


def test_empty_table_is_not_an_error(client):
    resp = client.get("/api/real-time/history")

    assert resp.status_code == 200
    assert resp.json() == []


def test_default_window_is_24_hours(client, add_rows):
    add_rows(
        (_sample("yesterday"), timedelta(hours=25)),
        (_sample("morning"), timedelta(hours=5)),
        (_sample("now"), timedelta(minutes=1)),
    )

    rows = client.get("/api/real-time/history").json()

    assert [r["robot_status"] for r in rows] == ["morning", "now"]


def test_rows_are_ascending_and_inside_window(client, add_rows):
    add_rows(
        (_sample("c"), timedelta(minutes=5)),
        (_sample("a"), timedelta(hours=2, minutes=30)),
        (_sample("b"), timedelta(hours=1)),
        (_sample("outside"), timedelta(hours=4)),
    )
    before = utcnow()

    rows = client.get("/api/real-time/history", params={"hours": 3}).json()

    assert [r["robot_status"] for r in rows] == ["a", "b", "c"]
    stamps = [datetime.fromisoformat(r["timestamp"]) for r in rows]
    assert stamps == sorted(stamps)
    assert all(ts >= before - timedelta(hours=3) for ts in stamps)


@pytest.mark.parametrize("hours", [0, -5])
def test_non_positive_window_clamped_to_one_hour(client, add_rows, hours):
    add_rows(
        (_sample("recent"), timedelta(minutes=30)),
        (_sample("older"), timedelta(hours=2)),
    )

    rows = client.get("/api/real-time/history", params={"hours": hours}).json()

    assert [r["robot_status"] for r in rows] == ["recent"]


def test_oversized_window_clamped(client, add_rows):
    # max is 72 hours in the test settings
    add_rows(
        (_sample("ancient"), timedelta(days=10)),
        (_sample("recent"), timedelta(days=2)),
    )

    rows = client.get("/api/real-time/history", params={"hours": 10**9}).json()

    assert [r["robot_status"] for r in rows] == ["recent"]


@pytest.mark.parametrize("hours", ["abc", "1.5", "24 hours"])
def test_non_integer_window_rejected(client, hours):
    resp = client.get("/api/real-time/history", params={"hours": hours})

    assert resp.status_code == 400
    assert resp.json()["detail"] == "Invalid field values"
