"""Exception classes for yamlenv.

Every error carries structured information:
- code: Machine-readable error identifier
- message: Human-readable error description
- details: Additional context for diagnosing the failure
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence, Tuple


class YamlEnvError(Exception):
    """Base exception for all yamlenv errors.

    Attributes:
        code: Machine-readable error code (e.g., "CONFIG_NOT_FOUND")
        message: Human-readable error message
        details: Optional additional context
    """

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.code}: {self.message} (details: {self.details})"
        return f"{self.code}: {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON serialization.

        Returns:
            Dictionary with code, message, and details keys.
        """
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class ConfigNotFoundError(YamlEnvError):
    """Raised when the config path is empty or names no readable file."""

    def __init__(
        self, message: str, code: str = "CONFIG_NOT_FOUND", details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(code=code, message=message, details=details)


class ParseError(YamlEnvError):
    """Raised when the config file is not well-formed YAML."""

    def __init__(
        self, message: str, code: str = "PARSE_ERROR", details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(code=code, message=message, details=details)


class EnvironmentUnavailableError(YamlEnvError):
    """Raised when the process environment cannot be read."""

    def __init__(
        self,
        message: str = "Cannot access environment variables",
        code: str = "ENVIRONMENT_UNAVAILABLE",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(code=code, message=message, details=details)


@dataclass(frozen=True)
class ValidationIssue:
    """A single schema complaint.

    Attributes:
        path: Dotted field path (empty string for the document root)
        message: Reason reported by the schema
        type: Optional machine-readable error type from the schema
    """

    path: str
    message: str
    type: Optional[str] = None

    def __str__(self) -> str:
        return f"{self.path or '<root>'}: {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        return {"path": self.path, "message": self.message, "type": self.type}


class ConfigValidationError(YamlEnvError):
    """Raised when the merged config is rejected by the schema.

    The individual field failures are available as ``issues`` and are
    repeated in ``details["issues"]``.
    """

    def __init__(
        self,
        issues: Sequence[ValidationIssue],
        code: str = "CONFIG_VALIDATION_FAILED",
        details: Optional[Dict[str, Any]] = None,
    ):
        self.issues: Tuple[ValidationIssue, ...] = tuple(issues)
        if self.issues:
            message = "Invalid config: " + "; ".join(str(issue) for issue in self.issues)
        else:
            message = "Invalid config: unknown validation failure"
        merged = {"issues": [issue.to_dict() for issue in self.issues]}
        merged.update(details or {})
        super().__init__(code=code, message=message, details=merged)

    @property
    def paths(self) -> Tuple[str, ...]:
        """Field paths of every issue, in reported order."""
        return tuple(issue.path for issue in self.issues)


class KeyCollisionError(YamlEnvError):
    """Raised when two mapping keys camelize to the same key."""

    def __init__(
        self, message: str, code: str = "KEY_COLLISION", details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(code=code, message=message, details=details)
