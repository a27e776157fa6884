"""Exception hierarchy for instant coercion."""


class CoercionError(Exception):
    """Base exception for coercion errors.

    Provides dual messaging: a sanitized user-facing message and
    internal details for logging.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped

    def internal(self) -> str:
        return self.internal_details


class UnsupportedTypeError(CoercionError):
    """Raised when a value's type has no coercion registered for it."""


class InstantOutOfRangeError(CoercionError):
    """Raised when an epoch value cannot be represented as a date-time."""


class InvalidPatternError(CoercionError):
    """Raised when a formatter pattern cannot be compiled."""


class ParseError(CoercionError):
    """Raised when a formatter does not match the given text."""


# Sanitized user-facing error message constants
ERR_MSG_UNSUPPORTED_TYPE = "unsupported type"
ERR_MSG_OUT_OF_RANGE = "instant out of range"
ERR_MSG_INVALID_PATTERN = "invalid pattern"
ERR_MSG_PARSE_FAILED = "text does not match format"
