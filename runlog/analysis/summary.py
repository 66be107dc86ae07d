"""Global totals and filtered averages across all activities."""

from runlog.config import DEFAULT_PACE_MAX, DEFAULT_PACE_MIN
from runlog.formatting import NOT_AVAILABLE, format_pace
from runlog.models import Activity, SummaryStats


def summarize(activities: list[Activity],
              pace_band: tuple[float, float] = (DEFAULT_PACE_MIN, DEFAULT_PACE_MAX)) -> SummaryStats:
    """Compute totals plus heart-rate and pace means.

    Totals are left unrounded. The heart-rate mean skips the 0 "no reading"
    sentinel; the pace mean only uses paces strictly inside pace_band, which
    drops undefined paces and misrecorded activities like walking breaks.
    """
    low, high = pace_band

    hr_values = [a.avg_hr for a in activities if a.avg_hr > 0]
    paces = [a.pace_min_per_mi for a in activities if low < a.pace_min_per_mi < high]

    avg_hr = sum(hr_values) / len(hr_values) if hr_values else None
    avg_pace = sum(paces) / len(paces) if paces else None

    return SummaryStats(
        activity_count=len(activities),
        total_distance_mi=sum(a.distance_mi for a in activities),
        total_elevation_m=sum(a.elevation_m for a in activities),
        total_duration_hr=sum(a.duration_min for a in activities) / 60,
        avg_hr=avg_hr,
        avg_pace_min_per_mi=avg_pace,
        avg_pace_display=format_pace(avg_pace) if avg_pace is not None else NOT_AVAILABLE,
    )
