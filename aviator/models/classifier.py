"""Rule-based multiplier classifier.

Rules are evaluated in priority order and the first match wins; lower
priority rules are never consulted once one fires. The cascade always ends
in the LOW fallback, so any history long enough to classify gets a
category other than NONE.
"""

from typing import Callable, NamedTuple, Sequence, Tuple
import logging

from aviator.constants import (
    BREAKOUT_LOW_CEILING,
    BREAKOUT_MIN_LENGTH,
    BREAKOUT_MIN_LOW_COUNT,
    BREAKOUT_MIN_VERY_LOW_COUNT,
    BREAKOUT_VERY_LOW_CEILING,
    COOLDOWN_LAST_ABOVE,
    MIN_CLASSIFIABLE_LENGTH,
    STABLE_BAND_MAX,
    STABLE_BAND_MIN,
    STABLE_WINDOW,
)
from aviator.exceptions import InsufficientHistoryError
from aviator.models.profiles import get_profile
from aviator.models.results import Category, PredictionResult

logger = logging.getLogger(__name__)


class Rule(NamedTuple):
    category: Category
    reason: str
    predicate: Callable[[Sequence[float]], bool]


def _is_cooldown(history: Sequence[float]) -> bool:
    return history[-1] > COOLDOWN_LAST_ABOVE


def _is_breakout(history: Sequence[float]) -> bool:
    # Counts span the whole history, not a trailing window.
    if len(history) < BREAKOUT_MIN_LENGTH:
        return False
    low = sum(1 for value in history if value < BREAKOUT_LOW_CEILING)
    very_low = sum(1 for value in history if value <= BREAKOUT_VERY_LOW_CEILING)
    return low >= BREAKOUT_MIN_LOW_COUNT and very_low >= BREAKOUT_MIN_VERY_LOW_COUNT


def _is_stable(history: Sequence[float]) -> bool:
    if len(history) < STABLE_WINDOW:
        return False
    return all(STABLE_BAND_MIN <= value <= STABLE_BAND_MAX for value in history[-STABLE_WINDOW:])


def _always(history: Sequence[float]) -> bool:
    return True


RULES: Tuple[Rule, ...] = (
    Rule(Category.COOLDOWN, "LAST_ABOVE_COOLDOWN", _is_cooldown),
    Rule(Category.BREAKOUT, "LOW_RUN_BREAKOUT", _is_breakout),
    Rule(Category.STABLE, "STABLE_BAND", _is_stable),
    Rule(Category.LOW, "FALLBACK_LOW", _always),
)


def classify(history: Sequence[float]) -> PredictionResult:
    """Classify a validated history (oldest first, most recent last).

    Raises:
        InsufficientHistoryError: fewer than two entries were given.
    """
    values = [float(value) for value in history]
    if len(values) < MIN_CLASSIFIABLE_LENGTH:
        raise InsufficientHistoryError(len(values), MIN_CLASSIFIABLE_LENGTH)

    # The last rule always matches.
    rule = next(rule for rule in RULES if rule.predicate(values))
    logger.debug("History %s matched %s (%s)", values, rule.category.value, rule.reason)
    return PredictionResult(
        category=rule.category,
        profile=get_profile(rule.category),
        reason=rule.reason,
    )
