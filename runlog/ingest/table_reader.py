"""Read an exported activity table (.csv or .xlsx) into raw row dicts."""

from pathlib import Path

import openpyxl
import pandas as pd

from runlog.errors import EmptyTableError, TableLoadError


def read_table(path, verbose: bool = False) -> list[dict]:
    """Read every non-empty data row of a CSV or XLSX activity table.

    Raises TableLoadError if the file can't be read or parsed, and
    EmptyTableError if it holds a header but no rows.
    """
    path = Path(path).expanduser()
    if not path.exists():
        raise TableLoadError(f"Failed to load the data: file not found: {path}")

    suffix = path.suffix.lower()
    try:
        if suffix == ".xlsx":
            rows = _read_xlsx(path)
        else:
            rows = _read_csv(path)
    except Exception as e:
        # pandas and openpyxl raise assorted parser/zipfile/xml errors
        raise TableLoadError(f"Failed to load the data: {e}") from e

    if not rows:
        raise EmptyTableError(f"No data found in {path}")

    if verbose:
        print(f"Read {len(rows)} data rows from {path}")
    return rows


def _read_csv(path: Path) -> list[dict]:
    """Read a CSV, letting pandas type the columns; empty cells become None."""
    try:
        df = pd.read_csv(path, skip_blank_lines=True, encoding="utf-8-sig")
    except pd.errors.EmptyDataError:
        return []

    # Rows of bare delimiters carry no data
    df = df.dropna(how="all")
    return df.astype(object).where(df.notna(), None).to_dict("records")


def _read_xlsx(path: Path) -> list[dict]:
    wb = openpyxl.load_workbook(path, read_only=True, data_only=True)
    try:
        ws = wb.active
        rows_iter = ws.iter_rows(values_only=True)
        header = next(rows_iter, None)
        if not header:
            return []
        columns = [str(h).strip() if h is not None else None for h in header]

        rows = []
        for row in rows_iter:
            if not row or all(v is None or (isinstance(v, str) and not v.strip()) for v in row):
                continue
            rows.append({col: value for col, value in zip(columns, row) if col is not None})
    finally:
        wb.close()
    return rows
