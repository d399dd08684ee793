"""CLI entry points for the predictor."""

from datetime import datetime
from pathlib import Path
from typing import Optional, Sequence
import argparse
import json
import logging
import uuid

from aviator.batch import RESULT_COLUMNS, classify_frame, load_histories, summarize
from aviator.config import Config
from aviator.exceptions import ConfigurationError
from aviator.models.profiles import CATEGORY_PROFILES
from aviator.ops.logging import configure_logging
from aviator.ops.metrics import get_metrics_recorder
from aviator.reporting.csv_output import write_predictions_csv
from aviator.service import predict

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID_INPUT = 1
EXIT_USAGE = 2


def _load_config(config_path: Optional[str]) -> Config:
    config = Config.load(config_path)
    configure_logging(level=config.log_level)
    return config


def run_predict(
    history: str,
    length: Optional[int] = None,
    config_path: Optional[str] = None,
    as_json: bool = False,
) -> int:
    try:
        config = _load_config(config_path)
        outcome = predict(history, required_length=length, config=config)
    except (ConfigurationError, FileNotFoundError) as exc:
        logger.error("%s", exc)
        return EXIT_USAGE

    if as_json:
        print(json.dumps(outcome.to_dict(), indent=2))
    elif outcome.ok:
        print(f"Prediction: {outcome.result.range_label} ({outcome.result.label})")
    else:
        print(f"Error: {outcome.message}")
    return EXIT_OK if outcome.ok else EXIT_INVALID_INPUT


def run_batch(
    input_path: str,
    column: str = "history",
    length: Optional[int] = None,
    output_path: Optional[str] = None,
    config_path: Optional[str] = None,
) -> int:
    run_id = uuid.uuid4().hex
    try:
        config = Config.load(config_path)
    except (ConfigurationError, FileNotFoundError) as exc:
        configure_logging(run_id=run_id)
        logger.error("%s", exc)
        return EXIT_USAGE
    configure_logging(run_id=run_id, level=config.log_level)

    try:
        frame = load_histories(input_path, column=column)
        predictions = classify_frame(frame, column=column, required_length=length, config=config)
    except (ConfigurationError, FileNotFoundError, KeyError) as exc:
        logger.error("%s", exc)
        return EXIT_USAGE

    if not output_path:
        stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        output_path = str(Path(config.output_dir) / f"predictions_{stamp}.csv")
    cleaned = predictions.astype(object).where(predictions.notna(), None)
    leading = [c for c in cleaned.columns if c not in RESULT_COLUMNS]
    written = write_predictions_csv(
        cleaned.to_dict(orient="records"),
        output_path,
        leading_columns=leading + RESULT_COLUMNS,
    )

    counts = summarize(predictions)
    logger.info("Wrote %d predictions to %s", len(predictions), written)
    for category, count in sorted(counts.items()):
        print(f"  {category}: {count}")
    logger.info("Prediction metrics: %s", get_metrics_recorder().snapshot()["predictions"])
    return EXIT_OK


def run_profiles(as_json: bool = False) -> int:
    if as_json:
        payload = {
            category.value: {"range_label": profile.range_label, "label": profile.label}
            for category, profile in CATEGORY_PROFILES.items()
        }
        print(json.dumps(payload, indent=2))
        return EXIT_OK
    for category, profile in CATEGORY_PROFILES.items():
        print(f"{category.value:<9} {profile.range_label:<15} {profile.label}")
    return EXIT_OK


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="aviator", description="Aviator multiplier predictor")
    subparsers = parser.add_subparsers(dest="command", required=True)

    pred = subparsers.add_parser("predict", help="Classify one comma-separated history")
    pred.add_argument("history", help="Multipliers, oldest first (e.g. '1.03, 1.45, 2.10')")
    pred.add_argument("--length", dest="length", type=int, help="Required number of results")
    pred.add_argument("--config", dest="config_path", help="Path to config file")
    pred.add_argument("--json", dest="as_json", action="store_true", help="Print the outcome as JSON")

    batch = subparsers.add_parser("batch", help="Classify every row of a CSV file")
    batch.add_argument("--input", dest="input_path", required=True, help="CSV with a history column")
    batch.add_argument("--column", dest="column", default="history", help="History column name")
    batch.add_argument("--length", dest="length", type=int, help="Required number of results")
    batch.add_argument("--output", dest="output_path", help="Output CSV path")
    batch.add_argument("--config", dest="config_path", help="Path to config file")

    profiles = subparsers.add_parser("profiles", help="Show the category profile table")
    profiles.add_argument("--json", dest="as_json", action="store_true", help="Print as JSON")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command == "predict":
        return run_predict(
            history=args.history,
            length=getattr(args, "length", None),
            config_path=getattr(args, "config_path", None),
            as_json=getattr(args, "as_json", False),
        )
    if args.command == "batch":
        return run_batch(
            input_path=args.input_path,
            column=getattr(args, "column", "history"),
            length=getattr(args, "length", None),
            output_path=getattr(args, "output_path", None),
            config_path=getattr(args, "config_path", None),
        )
    if args.command == "profiles":
        return run_profiles(as_json=getattr(args, "as_json", False))

    parser.error("Unknown command")
    return EXIT_USAGE


if __name__ == "__main__":
    raise SystemExit(main())
