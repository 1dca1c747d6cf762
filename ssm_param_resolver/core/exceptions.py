"""
Parameter resolution exceptions.

Every error raised while resolving {{ ssm:name }} references carries the
original, unmodified input so callers can fall back to the pre-resolution
text.
"""

from typing import Any, List, Optional


class ParameterResolutionError(Exception):
    """Base exception for parameter resolution errors."""

    def __init__(self, message: str, original_input: Any = None):
        self.message = message
        self.original_input = original_input
        super().__init__(self.message)


class PatternCompileError(ParameterResolutionError):
    """The reference pattern could not be built for a parameter name."""

    def __init__(self, message: str, name: Optional[str] = None, original_input: Any = None):
        self.name = name
        super().__init__(message, original_input)


class LookupServiceError(ParameterResolutionError):
    """The call to the parameter store failed (network, auth, throttling, bad payload)."""

    pass


class InvalidParametersError(ParameterResolutionError):
    """Requested parameter names could not all be resolved by the store."""

    def __init__(self, invalid_names: Optional[List[str]] = None, message: str = None, original_input: Any = None):
        self.invalid_names = list(invalid_names or [])
        names_str = ", ".join(self.invalid_names) if self.invalid_names else "(none reported)"
        super().__init__(message or f"Input contains invalid ssm parameters: {names_str}", original_input)


class MissingParametersError(InvalidParametersError):
    """
    The store silently dropped requested names.

    Raised when a name is neither returned as a parameter nor reported as
    invalid, so the response does not account for every requested name.
    """

    def __init__(
        self,
        missing_names: List[str],
        invalid_names: Optional[List[str]] = None,
        original_input: Any = None,
    ):
        self.missing_names = list(missing_names)
        message = (
            f"Parameter store response did not account for {len(self.missing_names)} requested "
            f"parameter(s): {', '.join(self.missing_names)}"
        )
        super().__init__(invalid_names, message=message, original_input=original_input)


class ReshapeError(ParameterResolutionError):
    """A resolved value cannot be returned in the shape the caller declared."""

    def __init__(self, expected: str, actual: str, original_input: Any = None):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Cannot convert resolved value of type '{actual}' to '{expected}'", original_input)
