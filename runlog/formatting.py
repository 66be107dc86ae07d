"""Display helpers shared by the aggregators, the CLI and the review app."""

import math
from datetime import date
from decimal import ROUND_HALF_UP, Decimal

MONTH_ABBRS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun",
               "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]

NOT_AVAILABLE = "N/A"
NO_PACE = "-"
INVALID_DATE = "Invalid Date"

MAX_DISPLAY_PACE_MIN = 60


def format_pace(minutes_per_mile) -> str:
    """Format pace in decimal minutes as M:SS (e.g. 9.1667 -> '9:10').

    Anything that is not a pace worth showing (missing, zero, negative or
    slower than an hour per mile) renders as '-'.
    """
    if minutes_per_mile is None or isinstance(minutes_per_mile, bool):
        return NO_PACE
    try:
        value = float(minutes_per_mile)
    except (TypeError, ValueError):
        return NO_PACE
    if math.isnan(value) or value <= 0 or value > MAX_DISPLAY_PACE_MIN:
        return NO_PACE
    minutes = math.floor(value)
    seconds = math.floor((value - minutes) * 60)
    return f"{minutes}:{seconds:02d}"


def format_date(dt) -> str:
    """Format as M/D/YYYY, or 'Invalid Date' when there is no usable date."""
    if not isinstance(dt, date):
        return INVALID_DATE
    return f"{dt.month}/{dt.day}/{dt.year}"


def format_duration(minutes) -> str:
    if not minutes or minutes <= 0:
        return ""
    total = int(minutes * 60)
    if total >= 3600:
        h, rem = divmod(total, 3600)
        m, s = divmod(rem, 60)
        return f"{h}:{m:02d}:{s:02d}"
    m, s = divmod(total, 60)
    return f"{m}:{s:02d}"


def to_fixed(value: float, places: int) -> str:
    """Round half away from zero to a fixed number of decimals (30.5 -> '31').

    Works on the exact binary value, so 2.675 still shows as '2.67'.
    """
    exponent = Decimal(1).scaleb(-places)
    return str(Decimal(value).quantize(exponent, rounding=ROUND_HALF_UP))


def month_label(year: int, month: int) -> str:
    return f"{MONTH_ABBRS[month - 1]} {year}"
