from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from runlog.formatting import NOT_AVAILABLE, format_date, format_duration, format_pace, to_fixed


@dataclass(frozen=True)
class Activity:
    id: str
    name: str = "Unnamed Activity"
    category: str = "Run"
    date: Optional[datetime] = None
    distance_mi: float = 0.0
    duration_min: float = 0.0
    elevation_m: float = 0.0
    pace_min_per_mi: float = 0.0
    speed_mph: float = 0.0
    avg_hr: float = 0.0
    max_hr: float = 0.0
    kudos: int = 0
    workout_type_code: Optional[int] = None

    @property
    def has_valid_date(self) -> bool:
        return self.date is not None

    @property
    def has_heart_rate(self) -> bool:
        # 0 stands in for "no reading"
        return self.avg_hr > 0

    @property
    def has_pace(self) -> bool:
        return self.pace_min_per_mi > 0

    @property
    def duration_s(self) -> float:
        return self.duration_min * 60

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "date": self.date.isoformat() if self.date else None,
            "date_display": format_date(self.date),
            "distance_mi": self.distance_mi,
            "duration_min": self.duration_min,
            "duration_display": format_duration(self.duration_min),
            "elevation_m": self.elevation_m,
            "pace_min_per_mi": self.pace_min_per_mi,
            "pace_display": format_pace(self.pace_min_per_mi),
            "speed_mph": self.speed_mph,
            "avg_hr": self.avg_hr,
            "max_hr": self.max_hr,
            "kudos": self.kudos,
            "workout_type_code": self.workout_type_code,
        }


@dataclass
class MonthlyBucket:
    year: int
    month: int
    label: str
    count: int = 0
    distance_mi: float = 0.0
    elevation_m: float = 0.0
    duration_min: float = 0.0

    def to_dict(self) -> dict:
        return {
            "month": self.label,
            "year": self.year,
            "month_num": self.month,
            "count": self.count,
            "distance": self.distance_mi,
            "elevation": self.elevation_m,
            "duration": self.duration_min,
        }


@dataclass
class CategoryBucket:
    name: str
    count: int = 0
    distance_mi: float = 0.0

    def to_dict(self) -> dict:
        return {"name": self.name, "count": self.count, "distance": self.distance_mi}


@dataclass
class SummaryStats:
    activity_count: int = 0
    total_distance_mi: float = 0.0
    total_elevation_m: float = 0.0
    total_duration_hr: float = 0.0
    avg_hr: Optional[float] = None
    avg_pace_min_per_mi: Optional[float] = None
    avg_pace_display: str = NOT_AVAILABLE

    def to_display(self) -> dict:
        """Presentation values, rounded the way the dashboard shows them."""
        return {
            "activities": self.activity_count,
            "distance": to_fixed(self.total_distance_mi, 2),
            "elevation": to_fixed(self.total_elevation_m, 0),
            "duration": to_fixed(self.total_duration_hr, 1),
            "avg_heart_rate": to_fixed(self.avg_hr, 1) if self.avg_hr is not None else NOT_AVAILABLE,
            "avg_pace": self.avg_pace_display,
        }


@dataclass
class Dashboard:
    activities: list[Activity] = field(default_factory=list)
    monthly: list[MonthlyBucket] = field(default_factory=list)
    categories: list[CategoryBucket] = field(default_factory=list)
    summary: SummaryStats = field(default_factory=SummaryStats)

    def recent(self, n: int = 10) -> list[Activity]:
        """Last n activities in canonical order, newest first."""
        if n <= 0:
            return []
        return list(reversed(self.activities[-n:]))

    def hr_vs_pace(self) -> list[tuple[float, float]]:
        """(pace, avg_hr) points for activities carrying both readings."""
        return [
            (a.pace_min_per_mi, a.avg_hr)
            for a in self.activities
            if a.has_heart_rate and a.has_pace
        ]

    def category_shares(self) -> dict[str, float]:
        """Percentage of total distance covered by each category."""
        total = self.summary.total_distance_mi or 1
        return {c.name: c.distance_mi / total * 100 for c in self.categories}
