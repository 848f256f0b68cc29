"""Custom exceptions for the targeting context."""

from typing import Any, Optional


class CandidateProfileError(ValueError):
    """
    Exception raised when a candidate profile cannot be normalized.

    Attributes:
        message: Error description
        field_path: Dotted path of the offending field (e.g., 'experience.seo.years')
        value: The value that failed to normalize
    """

    def __init__(self, message: str, field_path: Optional[str] = None, value: Any = None):
        self.message = message
        self.field_path = field_path
        self.value = value

        parts = [message]
        if field_path:
            parts.append(f"Field: {field_path}")
        if value is not None:
            shown = repr(value)
            parts.append(f"Value: {shown[:200] + '...' if len(shown) > 200 else shown}")

        super().__init__("\n".join(parts))


class SchemaMismatchError(TypeError):
    """
    Exception raised when a pipeline stage receives data of the wrong shape.

    Scoring a document against a profile from another schema version would
    produce meaningless numbers, so this is a contract violation, not a
    degraded case.

    Attributes:
        message: Error description
        expected: Expected type name or schema version
        actual: Received type name or schema version
    """

    def __init__(self, message: str, expected: Any = None, actual: Any = None):
        self.message = message
        self.expected = expected
        self.actual = actual

        parts = [message]
        if expected is not None or actual is not None:
            parts.append(f"Expected: {expected}, got: {actual}")

        super().__init__("\n".join(parts))
