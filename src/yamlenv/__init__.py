"""yamlenv - YAML configuration with environment overrides and schema validation.

Pipeline for each load:
- loader: read and parse the YAML file
- env_mapper: merge double-underscore environment overrides (API__BASE_URL -> api.base_url)
- validator: validate with a pydantic model or any Schema
- keys: optionally convert mapping keys from snake_case to camelCase
"""

__version__ = "1.0.0"

from yamlenv.logger import (
    Logger,
    StructuredLogger,
    get_logger,
    create_logger,
    reset_loggers,
)

from yamlenv.exceptions import (
    YamlEnvError,
    ConfigNotFoundError,
    ParseError,
    EnvironmentUnavailableError,
    ConfigValidationError,
    KeyCollisionError,
    ValidationIssue,
)

from yamlenv.settings import LoaderSettings
from yamlenv.env_loader import EnvLoader
from yamlenv.loader import load
from yamlenv.env_mapper import EnvOverride, apply_overrides, coerce_value, env_key_to_path
from yamlenv.validator import PydanticSchema, Schema, ValidationResult, validate
from yamlenv.keys import snake_to_camel, to_camel_case
from yamlenv.factory import ConfigFactory, create, parse, raw

__all__ = [
    "__version__",
    # Logger
    "Logger",
    "StructuredLogger",
    "get_logger",
    "create_logger",
    "reset_loggers",
    # Exceptions
    "YamlEnvError",
    "ConfigNotFoundError",
    "ParseError",
    "EnvironmentUnavailableError",
    "ConfigValidationError",
    "KeyCollisionError",
    "ValidationIssue",
    # Settings
    "LoaderSettings",
    # Pipeline stages
    "EnvLoader",
    "load",
    "EnvOverride",
    "apply_overrides",
    "coerce_value",
    "env_key_to_path",
    "Schema",
    "PydanticSchema",
    "ValidationResult",
    "validate",
    "snake_to_camel",
    "to_camel_case",
    # Factory
    "ConfigFactory",
    "create",
    "raw",
    "parse",
]
