"""
Custom exceptions for the aviator predictor.

Validation failures for user input are returned as values by
``aviator.validation.validate``; the exceptions here cover broken
preconditions and bad configuration.

Usage:
    from aviator.exceptions import AviatorError, InsufficientHistoryError

    try:
        result = classify(history)
    except InsufficientHistoryError as e:
        print(f"Cannot classify: {e}")
"""


class AviatorError(Exception):
    """
    Base exception for all aviator predictor errors.

    All custom exceptions inherit from this, allowing:
        except AviatorError:
            # Catch any system error
    """
    pass


# =============================================================================
# INPUT ERRORS
# =============================================================================

class HistoryValidationError(AviatorError):
    """
    Raised by ``ValidationResult.unwrap()`` when the raw history was rejected.

    Carries the ``ValidationError`` code and the user-facing message.
    """

    def __init__(self, code, message: str):
        self.code = code
        self.message = message
        super().__init__(f"{getattr(code, 'value', code)}: {message}")


class InsufficientHistoryError(AviatorError):
    """
    History too short to classify.

    Raised when:
    - ``classify`` receives fewer entries than it needs to run the cascade
    """

    def __init__(self, found: int, required: int):
        self.found = found
        self.required = required
        super().__init__(
            f"Insufficient history: found {found} entries, need at least {required}"
        )


# =============================================================================
# CONFIGURATION ERRORS
# =============================================================================

class ConfigurationError(AviatorError):
    """
    Configuration or setup error.

    Raised when:
    - History length is not one of the allowed lengths
    - A numeric setting is out of range
    - Config file is unreadable
    """

    def __init__(self, setting: str, message: str):
        self.setting = setting
        super().__init__(f"Configuration error ({setting}): {message}")
