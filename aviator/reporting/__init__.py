"""Output writers."""

from aviator.reporting.csv_output import write_predictions_csv

__all__ = ["write_predictions_csv"]
