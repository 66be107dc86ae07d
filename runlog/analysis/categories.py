"""Workout-type rollups keyed by display label."""

from runlog.models import Activity, CategoryBucket

# Strava workout_type codes for runs.
WORKOUT_LABELS = {
    0: "Easy Run",
    1: "Race",
    2: "Long Run",
    3: "Workout",
}
OTHER_LABEL = "Other"
NO_DATA_LABEL = "No Data"


def workout_label(code) -> str:
    """Map a raw workout_type code to its label; unknown codes are 'Other'."""
    if code is None or isinstance(code, bool):
        return OTHER_LABEL
    return WORKOUT_LABELS.get(code, OTHER_LABEL)


def category_rollup(activities: list[Activity]) -> list[CategoryBucket]:
    """Count and total distance per workout label, in first-seen order.

    An empty input yields a single 'No Data' placeholder so charts always
    have something to draw.
    """
    types: dict[str, CategoryBucket] = {}
    for activity in activities:
        label = workout_label(activity.workout_type_code)
        if label not in types:
            types[label] = CategoryBucket(name=label)
        types[label].count += 1
        types[label].distance_mi += activity.distance_mi

    if not types:
        return [CategoryBucket(name=NO_DATA_LABEL, count=1, distance_mi=0.0)]
    return list(types.values())
