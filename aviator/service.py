"""Form-submission flow: validate raw input, then classify."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional
import logging
import time

from aviator.config import Config
from aviator.exceptions import ConfigurationError
from aviator.models.classifier import classify
from aviator.models.results import PredictionResult
from aviator.ops.metrics import get_metrics_recorder
from aviator.validation import ValidationError, validate

logger = logging.getLogger(__name__)


@dataclass
class PredictionOutcome:
    raw_input: str
    required_length: int
    history: List[float] = field(default_factory=list)
    result: Optional[PredictionResult] = None
    error: Optional[ValidationError] = None
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.result is not None

    def to_dict(self) -> Dict:
        payload = {
            "raw_input": self.raw_input,
            "required_length": self.required_length,
            "valid": self.ok,
            "history": list(self.history),
            "error": self.error.value if self.error else None,
            "message": self.message,
        }
        payload["prediction"] = self.result.to_dict() if self.result else None
        return payload


def resolve_length(config: Config, required_length: Optional[int]) -> int:
    length = config.history_length if required_length is None else int(required_length)
    if not config.is_allowed_length(length):
        raise ConfigurationError(
            "history_length",
            f"{length} is not one of {config.allowed_history_lengths}",
        )
    return length


def predict(
    raw_input: Optional[str],
    required_length: Optional[int] = None,
    config: Optional[Config] = None,
    simulate_delay: bool = True,
) -> PredictionOutcome:
    """Run one prediction request end to end.

    ``simulate_delay=False`` skips ``config.analysis_delay``; batch runs use
    it so the delay is not paid once per row.
    """
    config = config or Config.from_env()
    length = resolve_length(config, required_length)
    metrics = get_metrics_recorder()
    metrics.increment("predictions.requested")
    started = time.perf_counter()

    if simulate_delay and config.analysis_delay > 0:
        time.sleep(config.analysis_delay)

    raw_text = raw_input or ""
    validation = validate(raw_text, length)
    if not validation.ok:
        metrics.increment(f"predictions.invalid.{validation.error.value.lower()}")
        metrics.timing("predictions.latency", (time.perf_counter() - started) * 1000)
        logger.info("Rejected input %r: %s", raw_text, validation.error.value)
        return PredictionOutcome(
            raw_input=raw_text,
            required_length=length,
            error=validation.error,
            message=validation.message,
        )

    result = classify(validation.values)
    metrics.increment(f"predictions.category.{result.category.value.lower()}")
    metrics.timing("predictions.latency", (time.perf_counter() - started) * 1000)
    logger.info("Predicted %s for %s", result.category.value, list(validation.values))
    return PredictionOutcome(
        raw_input=raw_text,
        required_length=length,
        history=list(validation.values),
        result=result,
    )
