"""Environment snapshot loader with optional .env support.

Loads key/value pairs in deterministic order:
1) .env file (if provided, or ./.env when present)
2) OS environment variables
3) Explicit overrides (highest precedence)
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, Mapping, MutableMapping, Optional

from dotenv import dotenv_values

from yamlenv.exceptions import EnvironmentUnavailableError


def os_environ_snapshot() -> Dict[str, str]:
    """Copy the OS environment into a plain dict.

    Raises:
        EnvironmentUnavailableError: the OS environment cannot be read
    """
    try:
        return dict(os.environ)
    except (TypeError, AttributeError, OSError) as e:
        raise EnvironmentUnavailableError(details={"reason": str(e)}) from e


class EnvLoader:
    """Load environment-style key/value pairs with .env support."""

    def __init__(self, env_file: Optional[Path | str] = None) -> None:
        self.env_file = Path(env_file) if env_file else None

    def load(self, overrides: Optional[Mapping[str, str]] = None) -> MutableMapping[str, str]:
        """Take a snapshot of the environment.

        Precedence (low -> high): .env file, OS env vars, overrides

        Raises:
            EnvironmentUnavailableError: the OS environment cannot be read
        """
        data: MutableMapping[str, str] = {}

        env_path = self.env_file or Path.cwd() / ".env"
        if env_path.is_file():
            file_values = dotenv_values(env_path)
            data.update({k: v for k, v in file_values.items() if v is not None})

        data.update(os_environ_snapshot())

        if overrides:
            data.update({k: str(v) for k, v in overrides.items()})

        return data


__all__ = ["EnvLoader", "os_environ_snapshot"]
