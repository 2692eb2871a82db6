"""Environment variable overrides for a parsed config tree.

An environment key names a config path: segments are separated by a double
underscore and camelCase inside a segment maps onto snake_case, so
``API__baseUrl`` and ``API__BASE_URL`` both address ``api.base_url``.
Values are coerced to booleans or numbers where they look like one.

Example:
    tree = {"api": {"base_url": "https://x.test", "timeout": 1000}}
    merged = apply_overrides(tree, {"API__BASE_URL": "https://y.test"})
    # {"api": {"base_url": "https://y.test", "timeout": 1000}}
"""

import copy
import math
import re
from dataclasses import dataclass
from typing import Any, Dict, Iterator, Mapping, MutableMapping, Optional, Tuple, Union

from yamlenv.env_loader import os_environ_snapshot
from yamlenv.logger import Logger, get_logger

PATH_DELIMITER = "__"

Scalar = Union[str, int, float, bool]

_CAMEL_BOUNDARY = re.compile(r"([a-z])([A-Z])")
_INTEGER = re.compile(r"[+-]?[0-9]+")
_NUMBER = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


@dataclass(frozen=True)
class EnvOverride:
    """One environment entry resolved to a config path and typed value."""

    key: str
    path: Tuple[str, ...]
    value: Scalar

    @property
    def dotted_path(self) -> str:
        return ".".join(self.path)


def env_key_to_path(
    key: str, prefix: str = "", strip_prefix: bool = False
) -> Optional[Tuple[str, ...]]:
    """Convert an environment key to a config path.

    Returns:
        Tuple of lower-case snake_case segments, or None if the key
        contains an empty segment (e.g. ``A____B`` or ``__A``)
    """
    if strip_prefix and prefix and key.startswith(prefix):
        key = key[len(prefix):]

    path = tuple(
        _CAMEL_BOUNDARY.sub(r"\1_\2", segment).lower() for segment in key.split(PATH_DELIMITER)
    )
    if not all(path):
        return None
    return path


def coerce_value(value: str) -> Scalar:
    """Infer a scalar type for an environment value.

    "true"/"false" in any case become booleans, decimal numeric literals
    become int or float, everything else (including "" and literals too
    large for a finite float) stays a string.
    """
    lowered = value.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False

    stripped = value.strip()
    if stripped and _NUMBER.fullmatch(stripped):
        if _INTEGER.fullmatch(stripped):
            return int(stripped)
        number = float(stripped)
        # Overflowing literals such as 1e999 stay strings
        if math.isfinite(number):
            return number

    return value


def set_path(tree: MutableMapping[Any, Any], path: Tuple[str, ...], value: Any) -> None:
    """Set ``value`` at ``path``, creating intermediate mappings as needed.

    Anything other than a mapping found at an intermediate segment
    (scalar, list, None) is replaced by an empty dict.
    """
    if not path:
        raise ValueError("Config path must have at least one segment")

    current = tree
    for segment in path[:-1]:
        child = current.get(segment)
        if not isinstance(child, MutableMapping):
            child = {}
            current[segment] = child
        current = child
    current[path[-1]] = value


def iter_overrides(
    env: Mapping[str, Optional[str]],
    prefix: str = "",
    strip_prefix: bool = False,
    logger: Optional[Logger] = None,
) -> Iterator[EnvOverride]:
    """Yield the overrides selected from an environment snapshot, in its order."""
    for key, value in env.items():
        if value is None or not key.startswith(prefix):
            continue

        path = env_key_to_path(key, prefix=prefix, strip_prefix=strip_prefix)
        if path is None:
            if logger is not None:
                logger.warning("Skipping environment key with an empty path segment", key=key)
            continue

        yield EnvOverride(key=key, path=path, value=coerce_value(value))


def apply_overrides(
    tree: Any,
    env: Optional[Mapping[str, Optional[str]]] = None,
    prefix: str = "",
    strip_prefix: bool = False,
    logger: Optional[Logger] = None,
) -> Any:
    """Merge environment overrides into a copy of ``tree``.

    Existing keys are never removed or reordered; leaves are added or
    overwritten. When two keys resolve to the same path the one later in
    the snapshot's iteration order wins and a warning names both. OS
    environment order is platform-dependent, so callers who need a
    deterministic winner must not set both.

    Args:
        tree: Parsed config document; it is not mutated
        env: Environment snapshot (defaults to the OS environment)
        prefix: Only keys starting with this participate
        strip_prefix: Remove prefix from a key before mapping it to a path
        logger: Logger for diagnostics

    Returns:
        The merged tree

    Raises:
        EnvironmentUnavailableError: env is None and the OS environment cannot be read
    """
    if env is None:
        env = os_environ_snapshot()
    log = logger or get_logger()

    result = copy.deepcopy(tree)
    overrides = list(iter_overrides(env, prefix=prefix, strip_prefix=strip_prefix, logger=log))
    if not overrides:
        log.debug("No environment overrides matched", prefix=prefix)
        return result

    if result is None:
        result = {}
    elif not isinstance(result, MutableMapping):
        log.warning(
            "Replacing non-mapping config root to apply environment overrides",
            root_type=type(result).__name__,
        )
        result = {}

    targets: Dict[Tuple[str, ...], str] = {}
    for override in overrides:
        previous = targets.get(override.path)
        if previous is not None:
            log.warning(
                "Environment keys map to the same config path; the later one wins",
                path=override.dotted_path,
                previous_key=previous,
                key=override.key,
            )
        targets[override.path] = override.key
        set_path(result, override.path, override.value)

    log.debug("Applied environment overrides", count=len(overrides), prefix=prefix)
    return result
