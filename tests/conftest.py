"""Shared fixtures for runlog tests."""

import sys
from datetime import datetime
from pathlib import Path

import pytest

# Make ``import runlog`` work without installing the package first.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture
def now():
    return datetime(2024, 6, 1, 8, 0, 0)


@pytest.fixture
def two_runs():
    """A race and an untyped easy run in the same month."""
    return [
        {"distance": 5, "moving_time": 3000, "average_heartrate": 150,
         "workout_type": 1, "start_date": "2024-03-10"},
        {"distance": 3, "moving_time": 1500, "average_heartrate": 0,
         "workout_type": None, "start_date": "2024-03-15"},
    ]


@pytest.fixture
def csv_table(tmp_path):
    path = tmp_path / "activities.csv"
    path.write_text(
        "id,name,type,start_date,distance,moving_time,total_elevation_gain,"
        "average_heartrate,max_heartrate,kudos_count,workout_type\n"
        "101,Morning Run,Run,2024-01-05T07:00:00Z,6.2,3100,40,148.5,171,3,0\n"
        "102,Turkey Trot,Run,2023-11-23T09:00:00Z,3.1,1200,12,172,188,12,1\n"
        "\n"
        "103,Long Sunday,Run,2024-01-14T08:00:00Z,13.1,6600,110,,,,2\n"
        "104,Track,Run,not a date,4,2400,0,160,182,1,3\n"
    )
    return path
