"""Classify many histories at once from a CSV or DataFrame."""

from pathlib import Path
from typing import Dict, Optional
import logging

import pandas as pd

from aviator.config import Config
from aviator.service import predict, resolve_length

logger = logging.getLogger(__name__)

RESULT_COLUMNS = ["valid", "error", "message", "category", "range_label", "label", "reason"]
INVALID_LABEL = "INVALID"


def load_histories(path: str, column: str = "history") -> pd.DataFrame:
    """Read a CSV whose ``column`` holds comma-separated multipliers."""
    csv_path = Path(path)
    if not csv_path.exists():
        raise FileNotFoundError(f"History file not found: {csv_path}")
    frame = pd.read_csv(csv_path, dtype={column: str}, keep_default_na=False)
    if column not in frame.columns:
        raise KeyError(f"Column '{column}' not found in {csv_path} (have: {list(frame.columns)})")
    return frame


def classify_frame(
    frame: pd.DataFrame,
    column: str = "history",
    required_length: Optional[int] = None,
    config: Optional[Config] = None,
) -> pd.DataFrame:
    """Return a copy of ``frame`` with prediction columns appended."""
    config = config or Config.from_env()
    length = resolve_length(config, required_length)
    if column not in frame.columns:
        raise KeyError(f"Column '{column}' not found (have: {list(frame.columns)})")

    rows = []
    for raw in frame[column].fillna("").astype(str):
        outcome = predict(raw, required_length=length, config=config, simulate_delay=False)
        result = outcome.result
        rows.append({
            "valid": outcome.ok,
            "error": outcome.error.value if outcome.error else None,
            "message": outcome.message,
            "category": result.category.value if result else None,
            "range_label": result.range_label if result else None,
            "label": result.label if result else None,
            "reason": result.reason if result else None,
        })

    predictions = pd.DataFrame(rows, index=frame.index, columns=RESULT_COLUMNS)
    output = frame.drop(columns=[c for c in RESULT_COLUMNS if c in frame.columns]).copy()
    logger.info("Classified %d rows (%d invalid)", len(predictions), int((~predictions["valid"].astype(bool)).sum()))
    return pd.concat([output, predictions], axis=1)


def summarize(frame: pd.DataFrame) -> Dict[str, int]:
    """Count rows per category; rejected rows are counted as INVALID."""
    if frame.empty or "category" not in frame.columns:
        return {}
    counts = frame["category"].fillna(INVALID_LABEL).value_counts()
    return {str(key): int(value) for key, value in counts.items()}
