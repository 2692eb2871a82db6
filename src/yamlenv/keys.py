"""snake_case to camelCase key transformation for validated config values."""

import re
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel

from yamlenv.exceptions import KeyCollisionError
from yamlenv.logger import Logger, get_logger
from yamlenv.settings import KEY_COLLISION_POLICIES

_UNDERSCORE_LOWER = re.compile(r"_([a-z])")


def snake_to_camel(key: Any) -> Any:
    """Remove each underscore followed by a lowercase letter and upper-case the letter.

    Non-string keys are returned unchanged.

    Examples:
        "base_url" -> "baseUrl"
        "retry__count" -> "retry_Count"
        "_private" -> "Private"
        "version_2" -> "version_2"
    """
    if not isinstance(key, str):
        return key
    return _UNDERSCORE_LOWER.sub(lambda m: m.group(1).upper(), key)


def _camelize_mapping(
    value: Mapping[Any, Any], on_collision: str, log: Logger, where: str
) -> Dict[Any, Any]:
    result: Dict[Any, Any] = {}
    sources: Dict[Any, Any] = {}
    for key, item in value.items():
        new_key = snake_to_camel(key)
        child_where = f"{where}.{key}" if where else str(key)
        if new_key in sources:
            details = {
                "path": where,
                "key": new_key,
                "first": sources[new_key],
                "second": key,
            }
            if on_collision == "error":
                raise KeyCollisionError(
                    f"Keys {sources[new_key]!r} and {key!r} both become {new_key!r}"
                    + (f" at {where}" if where else ""),
                    details=details,
                )
            log.warning("Camel-cased keys collide; the later one wins", **details)
            # Re-insert so the surviving entry sits at the later key's position
            del result[new_key]
        sources[new_key] = key
        result[new_key] = _camelize(item, on_collision, log, child_where)
    return result


def _camelize(value: Any, on_collision: str, log: Logger, where: str) -> Any:
    if isinstance(value, BaseModel):
        value = value.model_dump()
    if isinstance(value, Mapping):
        return _camelize_mapping(value, on_collision, log, where)
    if isinstance(value, list):
        return [_camelize(item, on_collision, log, f"{where}[{i}]") for i, item in enumerate(value)]
    if isinstance(value, tuple):
        return tuple(
            _camelize(item, on_collision, log, f"{where}[{i}]") for i, item in enumerate(value)
        )
    return value


def to_camel_case(value: Any, on_collision: str = "error", logger: Optional[Logger] = None) -> Any:
    """Return a copy of ``value`` with every mapping key camel-cased.

    Sequences keep their order and scalars are returned as-is; the input
    is not mutated. Pydantic model instances are dumped to dicts first.

    Args:
        value: Validated config value
        on_collision: "error" to raise when two keys in one mapping become
            identical, "last" to keep the later one
        logger: Logger for diagnostics

    Raises:
        KeyCollisionError: two keys collide and on_collision is "error"
    """
    if on_collision not in KEY_COLLISION_POLICIES:
        raise ValueError(f"Unknown key collision policy {on_collision!r}")
    return _camelize(value, on_collision, logger or get_logger(), "")
