"""Exceptions raised by yamlenv.

All exceptions include structured error information:
- code: Machine-readable error identifier
- message: Human-readable error description
- details: Additional context for debugging

Usage:
    from yamlenv.exceptions import YamlEnvError, ConfigValidationError

    try:
        config = factory.raw("config.yaml")
    except ConfigValidationError as e:
        for issue in e.issues:
            print(issue.path, issue.message)
    except YamlEnvError as e:
        print(e.to_dict())
"""

from yamlenv.exceptions.base import (
    ConfigNotFoundError,
    ConfigValidationError,
    EnvironmentUnavailableError,
    KeyCollisionError,
    ParseError,
    ValidationIssue,
    YamlEnvError,
)

__all__ = [
    "YamlEnvError",
    "ConfigNotFoundError",
    "ParseError",
    "EnvironmentUnavailableError",
    "ConfigValidationError",
    "KeyCollisionError",
    "ValidationIssue",
]
