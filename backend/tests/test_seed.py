from sqlalchemy import inspect

from robot_analytics.database import Database
from robot_analytics.models import (
    CumulativeTotals,
    EnvironmentalImpact,
    PerformanceSnapshot,
    RealTimeSample,
)
from robot_analytics.seed.seed_data import init_database, main

TABLES = {"real_time_data", "cumulative_data", "performance_metrics", "environmental_impact"}


def test_create_schema_is_idempotent():
    database = Database("sqlite://")
    database.create_schema()
    database.create_schema()

    assert TABLES <= set(inspect(database.engine).get_table_names())
    database.dispose()


def test_init_without_seed_leaves_tables_empty(database, session):
    assert init_database(database) == 0
    assert session.query(RealTimeSample).count() == 0


def test_seed_inserts_one_row_per_table(database, session):
    assert init_database(database, seed=True) == 4

    for model in (RealTimeSample, CumulativeTotals, PerformanceSnapshot, EnvironmentalImpact):
        assert session.query(model).count() == 1
    perf = session.query(PerformanceSnapshot).one()
    assert (perf.efficiency, perf.operational_time) == (12.5, 480)


def test_seeded_rows_served_by_api(client, database):
    init_database(database, seed=True)

    row = client.get("/api/real-time").json()

    assert row["robot_status"] == "Active"
    assert row["latitude"] == 37.7749
    assert client.get("/api/environmental-impact").json()["carbon_offset"] == 250.5


def test_cli_creates_file_database(tmp_path):
    db_file = tmp_path / "robot_analytics.db"
    url = f"sqlite:///{db_file}"

    assert main(["--database-url", url, "--seed"]) == 0
    # re-running leaves existing tables and rows alone
    assert main(["--database-url", url]) == 0

    database = Database(url)
    assert TABLES <= set(inspect(database.engine).get_table_names())
    session = database.SessionLocal()
    assert session.query(CumulativeTotals).count() == 1
    session.close()
    database.dispose()
