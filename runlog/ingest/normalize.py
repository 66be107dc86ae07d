"""Turn raw table rows into canonical Activity records.

Rows come from a generic delimited-text or spreadsheet reader, so every
field may be missing, blank, or of the wrong type. Each problem resolves to
a default instead of an error: a row always produces exactly one Activity.

Pace and speed are recomputed from distance and moving time. The speed
columns in exported logs don't agree with distance/time, so they are
ignored rather than passed through.
"""

import math
import uuid
from datetime import date, datetime, time, timezone

from runlog.models import Activity

DEFAULT_NAME = "Unnamed Activity"
DEFAULT_CATEGORY = "Run"

# Tried in order after ISO-8601. The %z forms cover offsets like +0000 and
# short fractional seconds that older fromisoformat rejects.
_DATE_FORMATS = (
    "%Y-%m-%dT%H:%M:%S.%f%z",
    "%Y-%m-%dT%H:%M:%S%z",
    "%Y-%m-%d %H:%M:%S.%f%z",
    "%Y-%m-%d %H:%M:%S%z",
    "%Y-%m-%dT%H:%M:%S.%f",
    "%Y-%m-%d %H:%M:%S.%f",
    "%m/%d/%Y %H:%M:%S",
    "%m/%d/%Y %H:%M",
    "%m/%d/%Y",
    "%Y/%m/%d %H:%M:%S",
    "%Y/%m/%d",
)


def normalize_rows(rows, now: datetime | None = None) -> list[Activity]:
    """Normalize every row and return activities in canonical (date) order.

    Undated activities keep their relative order and sort after all dated
    ones.
    """
    now = now or datetime.now()
    activities = [normalize_row(row, now=now) for row in rows]
    return sort_activities(activities)


def sort_activities(activities: list[Activity]) -> list[Activity]:
    dated = [a for a in activities if a.has_valid_date]
    undated = [a for a in activities if not a.has_valid_date]
    dated.sort(key=lambda a: _sort_key(a.date))
    return dated + undated


def normalize_row(row: dict, now: datetime | None = None) -> Activity:
    """Build one Activity from a raw row, filling defaults for bad fields."""
    row = row if isinstance(row, dict) else {}

    distance_mi = _to_float(row.get("distance"))
    moving_time_s = _to_float(row.get("moving_time"))
    duration_min = moving_time_s / 60

    pace = duration_min / distance_mi if distance_mi > 0 else 0.0
    speed = 0.0
    if distance_mi > 0 and moving_time_s > 0:
        speed = distance_mi / (moving_time_s / 3600)

    return Activity(
        id=_to_text(row.get("id")) or _generate_id(),
        name=_to_text(row.get("name")) or DEFAULT_NAME,
        category=_to_text(row.get("type")) or DEFAULT_CATEGORY,
        date=_parse_date(row.get("start_date"), now),
        distance_mi=distance_mi,
        duration_min=duration_min,
        elevation_m=_to_float(row.get("total_elevation_gain")),
        pace_min_per_mi=pace,
        speed_mph=speed,
        avg_hr=_to_float(row.get("average_heartrate")),
        max_hr=_to_float(row.get("max_heartrate")),
        kudos=int(_to_float(row.get("kudos_count"))),
        workout_type_code=_to_code(row.get("workout_type")),
    )


def _generate_id() -> str:
    return uuid.uuid4().hex[:9]


def _to_text(value) -> str:
    if value is None or isinstance(value, bool):
        return ""
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value).strip()


def _to_float(value) -> float:
    """Coerce to a non-negative finite float; anything else is 0."""
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return 0.0
    try:
        result = float(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(result) or math.isinf(result) or result < 0:
        return 0.0
    return result


def _to_code(value) -> int | None:
    """Workout type codes are integers; everything else has no code."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not number.is_integer():
        return None
    return int(number)


def _parse_date(value, now: datetime | None) -> datetime | None:
    """Parse a start date.

    Missing → processing time. Unparsable → None, which marks the date
    invalid for downstream consumers.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return now or datetime.now()
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time())
    if not isinstance(value, str):
        return None

    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        pass
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return None


def _sort_key(dt: datetime) -> datetime:
    # Naive and aware datetimes don't compare; aware ones are ordered by UTC.
    if dt.tzinfo is None:
        return dt
    return dt.astimezone(timezone.utc).replace(tzinfo=None)
