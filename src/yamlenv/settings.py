"""Dataclass-based settings for the loader itself.

These control how environment overrides are selected and how key
collisions are handled. They can be built directly or from environment
variables with a parameterized prefix.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

KEY_COLLISION_POLICIES = ("error", "last")


def _env_flag(value: Optional[str], default: bool) -> bool:
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class LoaderSettings:
    """Loader configuration

    Attributes:
        env_prefix: Only environment keys starting with this participate
        strip_prefix: Remove env_prefix from a key before mapping it to a path
        env_file: Optional .env file merged beneath the OS environment
        key_collision: What parse() does when two keys camelize identically
            ("error" raises KeyCollisionError, "last" keeps the later key)
        encoding: Text encoding of config files
    """

    env_prefix: str = ""
    strip_prefix: bool = False
    env_file: Optional[Path] = None
    key_collision: str = "error"
    encoding: str = "utf-8"

    def __post_init__(self):
        if self.key_collision not in KEY_COLLISION_POLICIES:
            raise ValueError(
                f"Unknown key collision policy {self.key_collision!r}; "
                f"expected one of {', '.join(KEY_COLLISION_POLICIES)}"
            )

        if isinstance(self.env_file, str):
            self.env_file = Path(self.env_file)

    @classmethod
    def from_env(cls, prefix: str = "YAMLENV") -> "LoaderSettings":
        """Load loader settings from environment variables

        Args:
            prefix: Environment variable prefix

        Environment variables:
            {prefix}_ENV_PREFIX: Override key prefix filter
            {prefix}_STRIP_PREFIX: "true" to strip the filter prefix from keys
            {prefix}_ENV_FILE: Path to a .env file
            {prefix}_KEY_COLLISION: "error" or "last"
            {prefix}_ENCODING: Config file encoding
        """
        env_file = os.environ.get(f"{prefix}_ENV_FILE")
        return cls(
            env_prefix=os.environ.get(f"{prefix}_ENV_PREFIX", ""),
            strip_prefix=_env_flag(os.environ.get(f"{prefix}_STRIP_PREFIX"), False),
            env_file=Path(env_file) if env_file else None,
            key_collision=os.environ.get(f"{prefix}_KEY_COLLISION", "error").lower(),
            encoding=os.environ.get(f"{prefix}_ENCODING", "utf-8"),
        )
