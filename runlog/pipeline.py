"""Normalize a raw activity table and derive everything the dashboard shows."""

from datetime import datetime

from runlog.analysis.categories import category_rollup
from runlog.analysis.monthly import monthly_rollup
from runlog.analysis.summary import summarize
from runlog.config import DEFAULT_PACE_MAX, DEFAULT_PACE_MIN, get_activities_path, get_pace_band
from runlog.errors import EmptyTableError, TableLoadError
from runlog.ingest.normalize import normalize_rows
from runlog.ingest.table_reader import read_table
from runlog.models import Dashboard


def build_dashboard(rows: list[dict], now: datetime | None = None,
                    pace_band: tuple[float, float] = (DEFAULT_PACE_MIN, DEFAULT_PACE_MAX),
                    verbose: bool = False) -> Dashboard:
    """Normalize rows, then run the monthly, category and summary rollups.

    The three rollups only read the canonical activity list and don't
    depend on each other.
    """
    if not rows:
        raise EmptyTableError("No activities to aggregate")

    activities = normalize_rows(rows, now=now)
    if verbose:
        undated = sum(1 for a in activities if not a.has_valid_date)
        print(f"Normalized {len(activities)} activities ({undated} with invalid dates)")

    return Dashboard(
        activities=activities,
        monthly=monthly_rollup(activities),
        categories=category_rollup(activities),
        summary=summarize(activities, pace_band=pace_band),
    )


def load_dashboard(config: dict | None = None, path=None, verbose: bool = False) -> Dashboard:
    """Read the configured (or given) activity table and build the dashboard."""
    path = path or get_activities_path(config)
    if path is None:
        raise TableLoadError("Failed to load the data: no activity table configured")

    rows = read_table(path, verbose=verbose)
    return build_dashboard(rows, pace_band=get_pace_band(config), verbose=verbose)
