"""Schema validation of the merged config tree.

Validation itself is delegated to a schema object. Any object with a
``validate(data) -> ValidationResult`` method qualifies; pydantic models
and TypeAdapters are wrapped by ``PydanticSchema`` automatically.

Example:
    class Api(BaseModel):
        base_url: str
        timeout: int = 1000

    class AppConfig(BaseModel):
        api: Api

    value = validate(tree, AppConfig)
"""

from dataclasses import dataclass, field
from typing import Any, Optional, Protocol, Sequence, Tuple, runtime_checkable

import pydantic
from pydantic import BaseModel, TypeAdapter

from yamlenv.exceptions import ConfigValidationError, ValidationIssue
from yamlenv.logger import Logger, get_logger


@dataclass(frozen=True)
class ValidationResult:
    """Tagged outcome of a schema validation.

    Exactly one of ``value`` (on success) or ``issues`` (on failure) is
    meaningful; check ``ok`` first.
    """

    ok: bool
    value: Any = None
    issues: Tuple[ValidationIssue, ...] = field(default_factory=tuple)
    error: Optional[BaseException] = None

    @classmethod
    def success(cls, value: Any) -> "ValidationResult":
        return cls(ok=True, value=value)

    @classmethod
    def failure(
        cls, issues: Sequence[ValidationIssue], error: Optional[BaseException] = None
    ) -> "ValidationResult":
        """Failed result; ``error`` is the schema library's own exception, if any."""
        return cls(ok=False, issues=tuple(issues), error=error)


@runtime_checkable
class Schema(Protocol):
    """Validation capability supplied by the caller."""

    def validate(self, data: Any) -> ValidationResult: ...


def _format_loc(loc: Sequence[Any]) -> str:
    return ".".join(str(part) for part in loc)


class PydanticSchema:
    """Schema adapter over a pydantic model class or TypeAdapter.

    Args:
        model: BaseModel subclass or TypeAdapter
        dump: Return plain Python data (dicts, lists, scalars) with the
            schema's defaults applied rather than the model instance
    """

    def __init__(self, model: Any, dump: bool = True):
        if isinstance(model, TypeAdapter):
            self._adapter = model
        elif isinstance(model, type) and issubclass(model, BaseModel):
            self._adapter = TypeAdapter(model)
        else:
            raise TypeError(f"Expected a pydantic model or TypeAdapter, got {model!r}")
        self.model = model
        self.dump = dump

    def validate(self, data: Any) -> ValidationResult:
        try:
            value = self._adapter.validate_python(data)
        except pydantic.ValidationError as e:
            return ValidationResult.failure(
                [
                    ValidationIssue(
                        path=_format_loc(error["loc"]),
                        message=error["msg"],
                        type=error["type"],
                    )
                    for error in e.errors()
                ],
                error=e,
            )
        if self.dump:
            value = self._adapter.dump_python(value)
        return ValidationResult.success(value)

    def __repr__(self) -> str:
        return f"PydanticSchema({self.model!r}, dump={self.dump})"


def as_schema(schema: Any) -> Schema:
    """Return ``schema`` as a Schema, wrapping pydantic models.

    Raises:
        TypeError: schema is neither a Schema nor a pydantic model/TypeAdapter
    """
    if isinstance(schema, TypeAdapter) or (
        isinstance(schema, type) and issubclass(schema, BaseModel)
    ):
        return PydanticSchema(schema)
    # Model instances expose a deprecated validate() classmethod; they are not schemas
    if not isinstance(schema, (type, BaseModel)) and isinstance(schema, Schema):
        return schema
    raise TypeError(
        f"Unsupported schema {schema!r}: expected a pydantic model, a TypeAdapter "
        "or an object with a validate(data) -> ValidationResult method"
    )


def validate(tree: Any, schema: Any, logger: Optional[Logger] = None) -> Any:
    """Validate a merged config tree.

    Args:
        tree: Merged config tree
        schema: Schema, pydantic model class or TypeAdapter
        logger: Logger for diagnostics

    Returns:
        The schema's output, verbatim

    Raises:
        ConfigValidationError: the schema rejected the tree
    """
    log = logger or get_logger()
    result = as_schema(schema).validate(tree)
    if not result.ok:
        log.error(
            "Config validation failed",
            issue_count=len(result.issues),
            paths=",".join(issue.path for issue in result.issues),
        )
        raise ConfigValidationError(result.issues) from result.error
    return result.value
