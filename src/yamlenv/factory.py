"""Load, override, validate and optionally camel-case a YAML config file.

Example:
    from pydantic import BaseModel
    from yamlenv import create

    class Api(BaseModel):
        base_url: str
        timeout: int

    class AppConfig(BaseModel):
        api: Api

    config = create(AppConfig)
    config.raw("config.yaml")    # {"api": {"base_url": ..., "timeout": ...}}
    config.parse("config.yaml")  # {"api": {"baseUrl": ..., "timeout": ...}}
"""

from pathlib import Path
from typing import Any, Mapping, Optional, Union

from yamlenv.env_loader import EnvLoader
from yamlenv.env_mapper import apply_overrides
from yamlenv.keys import to_camel_case
from yamlenv.loader import load
from yamlenv.logger import Logger, get_logger
from yamlenv.settings import LoaderSettings
from yamlenv.validator import Schema, as_schema, validate

PathLike = Union[str, Path]


class ConfigFactory:
    """A schema bound once, loading any number of config files.

    The environment is read afresh on every call, so overrides set after
    the factory was created still apply.

    Args:
        schema: Schema, pydantic model class or TypeAdapter
        settings: Loader settings (defaults to LoaderSettings())
        env: Fixed environment snapshot to use instead of the process
            environment and .env file
        logger: Logger for diagnostics
    """

    def __init__(
        self,
        schema: Any,
        settings: Optional[LoaderSettings] = None,
        env: Optional[Mapping[str, str]] = None,
        logger: Optional[Logger] = None,
    ):
        self.schema: Schema = as_schema(schema)
        self.settings = settings or LoaderSettings()
        self._env = dict(env) if env is not None else None
        self._logger = logger or get_logger()

    def environment(self) -> Mapping[str, str]:
        """Snapshot of the environment used for overrides."""
        if self._env is not None:
            return self._env
        return EnvLoader(self.settings.env_file).load()

    def raw(self, path: PathLike) -> Any:
        """Load, apply overrides and validate, keeping the original keys.

        Raises:
            ConfigNotFoundError: path is empty or missing
            ParseError: the file is not valid YAML
            EnvironmentUnavailableError: the environment cannot be read
            ConfigValidationError: the schema rejected the merged config
        """
        tree = load(path, encoding=self.settings.encoding)
        self._logger.debug("Loaded config file", path=str(path))

        merged = apply_overrides(
            tree,
            self.environment(),
            prefix=self.settings.env_prefix,
            strip_prefix=self.settings.strip_prefix,
            logger=self._logger,
        )

        value = validate(merged, self.schema, logger=self._logger)
        self._logger.debug("Validated config", path=str(path))
        return value

    def parse(self, path: PathLike) -> Any:
        """Same as raw(), with every mapping key converted to camelCase.

        Raises:
            KeyCollisionError: two keys camelize identically and the
                settings' key_collision policy is "error"
        """
        return to_camel_case(
            self.raw(path),
            on_collision=self.settings.key_collision,
            logger=self._logger,
        )


def create(
    schema: Any,
    settings: Optional[LoaderSettings] = None,
    env: Optional[Mapping[str, str]] = None,
    logger: Optional[Logger] = None,
) -> ConfigFactory:
    """Bind a schema and return an object exposing raw() and parse()."""
    return ConfigFactory(schema, settings=settings, env=env, logger=logger)


def raw(path: PathLike, schema: Any, **kwargs: Any) -> Any:
    """One-shot ``create(schema, **kwargs).raw(path)``."""
    return create(schema, **kwargs).raw(path)


def parse(path: PathLike, schema: Any, **kwargs: Any) -> Any:
    """One-shot ``create(schema, **kwargs).parse(path)``."""
    return create(schema, **kwargs).parse(path)
