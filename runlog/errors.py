"""Whole-pipeline failures. Per-record problems never raise."""


class RunlogError(Exception):
    """Base class for errors surfaced to the caller."""


class TableLoadError(RunlogError):
    """The activity table could not be read or parsed."""


class EmptyTableError(TableLoadError):
    """The activity table was read but holds no rows."""
