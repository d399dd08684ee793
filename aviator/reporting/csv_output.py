"""CSV output for prediction rows."""

from typing import Dict, Iterable, List, Optional
from pathlib import Path
import csv


def _column_order(rows: List[Dict], leading: Optional[Iterable[str]]) -> List[str]:
    columns = list(leading or [])
    for row in rows:
        columns.extend(key for key in row.keys() if key not in columns)
    return columns


def write_predictions_csv(
    rows: List[Dict],
    output_path: str,
    leading_columns: Optional[Iterable[str]] = None,
) -> str:
    """Write prediction rows to ``output_path`` and return the path.

    Columns follow ``leading_columns`` first, then first-seen order. Missing
    values are written as empty cells.
    """
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    if not rows:
        path.write_text("", encoding="utf-8")
        return str(path)

    fieldnames = _column_order(rows, leading_columns)
    with path.open("w", encoding="utf-8", newline="") as handle:
        writer = csv.DictWriter(handle, fieldnames=fieldnames, restval="")
        writer.writeheader()
        for row in rows:
            writer.writerow({key: ("" if value is None else value) for key, value in row.items()})
    return str(path)
