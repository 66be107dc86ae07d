"""Per-month rollups of distance, elevation and moving time."""

from runlog.formatting import month_label
from runlog.models import Activity, MonthlyBucket


def monthly_rollup(activities: list[Activity]) -> list[MonthlyBucket]:
    """Group activities by calendar month, sorted by (year, month).

    Activities without a valid date are left out here; they still count
    toward the global summary.
    """
    months: dict[tuple[int, int], MonthlyBucket] = {}

    for activity in activities:
        if not activity.has_valid_date:
            continue
        key = (activity.date.year, activity.date.month)
        bucket = months.get(key)
        if bucket is None:
            bucket = MonthlyBucket(year=key[0], month=key[1], label=month_label(*key))
            months[key] = bucket

        bucket.count += 1
        bucket.distance_mi += activity.distance_mi
        bucket.elevation_m += activity.elevation_m
        bucket.duration_min += activity.duration_min

    # Dict order follows first appearance, not the calendar
    return [months[key] for key in sorted(months)]
