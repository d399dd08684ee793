"""
Constants for the aviator predictor.

Rule thresholds for the classifier cascade and the history lengths a
caller may ask for.
"""

from typing import Tuple


# =============================================================================
# HISTORY LENGTHS
# =============================================================================

ALLOWED_HISTORY_LENGTHS: Tuple[int, ...] = (2, 3, 6)
DEFAULT_HISTORY_LENGTH = 6
MIN_CLASSIFIABLE_LENGTH = 2


# =============================================================================
# RULE THRESHOLDS
# =============================================================================

# Cooldown: last round above this multiplier
COOLDOWN_LAST_ABOVE = 5.0

# Breakout: a long run of low rounds over the whole history
BREAKOUT_MIN_LENGTH = 5
BREAKOUT_LOW_CEILING = 2.0        # strict: value < 2.0
BREAKOUT_MIN_LOW_COUNT = 5
BREAKOUT_VERY_LOW_CEILING = 1.20  # inclusive: value <= 1.20
BREAKOUT_MIN_VERY_LOW_COUNT = 2

# Stable: the last few rounds all inside a band (inclusive)
STABLE_WINDOW = 3
STABLE_BAND_MIN = 2.0
STABLE_BAND_MAX = 4.0
