"""
Exceptions raised while reading operations from the input stream.

Rule violations are not errors: they are reported on the Decision. These
exceptions only cover lines that cannot be turned into an operation record.
"""

from typing import Any, Dict, Optional


class AuthorizerError(Exception):
    """Base exception for all authorizer errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class OperationParseError(AuthorizerError):
    """
    Raised when a line cannot be parsed into an operation.

    Examples:
    - Line is not valid JSON
    - Line holds something other than a single JSON object
    - Field missing or of the wrong type
    """

    pass


class UnknownOperationError(OperationParseError):
    """Raised when a JSON object is neither an account nor a transaction."""

    pass


class TimestampParseError(OperationParseError):
    """Raised when a transaction time is unparseable or carries no UTC offset."""

    pass
