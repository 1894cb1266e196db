"""Exceptions raised by the statement builders.

The builders only fail on precondition violations. Each error carries the
statement kind and, where relevant, the offending argument so callers can log
it as structured context.
"""

from typing import Any, Dict, Optional


class SQLBuildError(Exception):
    """Base error for statement assembly failures."""

    def __init__(self, statement: str, message: str):
        self.statement = statement
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return f"Cannot build {self.statement} statement: {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to structured dict for logging."""
        return {
            "error_type": type(self).__name__,
            "statement": self.statement,
            "message": self.message,
        }


class InvalidArgumentError(SQLBuildError):
    """Raised when an argument violates a builder precondition."""

    def __init__(
        self,
        statement: str,
        argument: str,
        message: str,
        value: Optional[Any] = None,
    ):
        super().__init__(statement, message)
        self.argument = argument
        self.value = value

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["argument"] = self.argument
        return data
