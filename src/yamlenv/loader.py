"""Read a YAML config file into a generic tree of dicts, lists and scalars."""

from pathlib import Path
from typing import Any, Dict, Union

import yaml

from yamlenv.exceptions import ConfigNotFoundError, ParseError


def load(path: Union[str, Path], encoding: str = "utf-8") -> Any:
    """Load and parse a YAML file.

    Args:
        path: Path to the YAML file
        encoding: Text encoding of the file

    Returns:
        The parsed document (``None`` for an empty file)

    Raises:
        ConfigNotFoundError: path is empty, no file exists there, or it cannot be read
        ParseError: the content is not well-formed YAML
    """
    if not path or not str(path).strip():
        raise ConfigNotFoundError("File name not specified")

    file_path = Path(path)
    if not file_path.is_file():
        raise ConfigNotFoundError(
            f"Config file not found: {file_path}", details={"path": str(file_path)}
        )

    try:
        content = file_path.read_text(encoding=encoding)
    except OSError as e:
        raise ConfigNotFoundError(
            f"Config file not readable: {file_path}",
            details={"path": str(file_path), "reason": str(e)},
        ) from e
    except UnicodeDecodeError as e:
        raise ParseError(
            f"Config file is not valid {encoding} text: {e}",
            details={"path": str(file_path)},
        ) from e

    try:
        return yaml.safe_load(content)
    except yaml.YAMLError as e:
        details: Dict[str, Any] = {"path": str(file_path)}
        mark = getattr(e, "problem_mark", None)
        if mark is not None:
            details["line"] = mark.line + 1
            details["column"] = mark.column + 1
        raise ParseError(f"Invalid YAML in {file_path}: {e}", details=details) from e
