"""Exception hierarchy for the User-Agent classifier.

Exception tree:
    UserAgentError
    +-- InvalidUserAgentString  (input is neither str nor None)

Unrecognized, empty or malformed User-Agent strings are NOT errors -- they
classify to a result with null/default fields.
"""

from typing import Optional


class UserAgentError(Exception):
    """Base exception for all uaclassify errors."""

    def __init__(
        self,
        message: str,
        *,
        value_type: Optional[str] = None,
    ):
        self.value_type = value_type
        super().__init__(message)


class InvalidUserAgentString(UserAgentError, TypeError):
    """The value handed in as a User-Agent string is not a string.

    Raised at the boundary (wrapper construction or ``Classifier.classify``)
    so that the matching code can assume it always holds a ``str``.
    """

    @classmethod
    def for_value(cls, value: object) -> "InvalidUserAgentString":
        type_name = type(value).__name__
        return cls(
            f"User-Agent must be a str or None, got {type_name}",
            value_type=type_name,
        )
