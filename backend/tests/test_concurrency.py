"""Parallel inserts and reads against a file-backed store."""
from concurrent.futures import ThreadPoolExecutor

import pytest
from fastapi.testclient import TestClient

from robot_analytics.database import Database
from robot_analytics.main import create_app
from robot_analytics.models import RealTimeSample

WRITERS = 24


@pytest.fixture
def file_database(tmp_path):
    db = Database(f"sqlite:///{tmp_path / 'robot_analytics.db'}")
    db.create_schema()
    yield db
    db.dispose()


def _payload(i: int) -> dict:
    return {
        "trash_collected": i,
        "robot_status": f"unit-{i}",
        "latitude": 10.0 + i / 100,
        "longitude": -20.0 - i / 100,
    }


def test_parallel_inserts_and_reads(settings, file_database):
    payloads = {f"unit-{i}": _payload(i) for i in range(WRITERS)}

    with TestClient(create_app(settings, file_database)) as c:
        with ThreadPoolExecutor(max_workers=8) as pool:
            posts = [pool.submit(c.post, "/api/real-time", json=p) for p in payloads.values()]
            gets = [pool.submit(c.get, "/api/real-time") for _ in range(WRITERS)]
            created = [f.result() for f in posts]
            reads = [f.result() for f in gets]

        final = c.get("/api/real-time")

    assert all(r.status_code == 201 for r in created)
    ids = {r.json()["id"] for r in created}
    assert len(ids) == WRITERS

    # a read sees either nothing yet or one whole row as it was posted
    for r in reads:
        assert r.status_code in (200, 404)
        if r.status_code == 200:
            row = r.json()
            assert row["id"] in ids
            sent = payloads[row["robot_status"]]
            assert {k: row[k] for k in sent} == sent

    session = file_database.SessionLocal()
    try:
        stored = session.query(RealTimeSample).all()
    finally:
        session.close()
    assert {row.id for row in stored} == ids

    newest = max(stored, key=lambda row: (row.timestamp, row.id))
    assert final.status_code == 200
    assert final.json()["id"] == newest.id
