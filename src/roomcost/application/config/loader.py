"""Reading room configurations from JSON.

Whatever goes wrong, a missing file, broken JSON or a field outside its
bounds, surfaces as ConfigError so the CLI and the API report it the same
way.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from roomcost.application.config.schema import RoomConfiguration

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """A room configuration could not be used.

    ``error_type`` is one of ``file_not_found``, ``permission_denied``,
    ``file_read_error``, ``json_parse`` or ``validation``. For validation
    failures ``details`` holds one entry per bad field, keyed by its
    location (``layers[1].wall_count``); for JSON errors it holds the line
    and column.
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = list(details) if details else []

    def __str__(self) -> str:
        return self.message


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Render a field location the way it reads in the JSON file.

    List indices attach to the field they index:

        >>> _format_json_path(("layers", 2, "package_area"))
        'layers[2].package_area'
        >>> _format_json_path(("room", "height"))
        'room.height'
    """
    path = ""
    for segment in loc:
        if isinstance(segment, int):
            path += f"[{segment}]"
        elif path:
            path += f".{segment}"
        else:
            path = str(segment)
    return path


def _field_errors(error: PydanticValidationError) -> list[dict[str, Any]]:
    """One detail per offending field, with the rejected input."""
    return [
        {
            "path": _format_json_path(item["loc"]),
            "message": item["msg"],
            "value": item.get("input"),
            "error_type": item["type"],
        }
        for item in error.errors()
    ]


def _summarize(details: list[dict[str, Any]]) -> str:
    lines = ["Room configuration is invalid:"]
    for detail in details:
        line = f"  - {detail['path'] or '(root)'}: {detail['message']}"
        value = detail.get("value")
        if value is not None and not isinstance(value, (dict, list)):
            line += f" (got: {value!r})"
        lines.append(line)
    return "\n".join(lines)


def load_config_from_dict(data: Any, path: Path | None = None) -> RoomConfiguration:
    """Validate a room configuration held in memory.

    Args:
        data: Parsed JSON data.
        path: Source file, used only in error reports.

    Raises:
        ConfigError: If the data fails validation.
    """
    try:
        return RoomConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = _field_errors(e)
        raise ConfigError(
            message=_summarize(details),
            error_type="validation",
            path=path,
            details=details,
        ) from e


def load_config(path: Path) -> RoomConfiguration:
    """Read a room configuration such as ``samples/living-room.json``.

    Raises:
        ConfigError: The file is missing or unreadable, is not JSON, or
            describes an invalid room.
    """
    if not path.exists():
        raise ConfigError(
            message=f"Room configuration not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError as e:
        raise ConfigError(
            message=f"No permission to read room configuration: {path}",
            error_type="permission_denied",
            path=path,
        ) from e
    except OSError as e:
        raise ConfigError(
            message=f"Could not read room configuration {path}: {e}",
            error_type="file_read_error",
            path=path,
        ) from e

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=(
                f"{path} is not valid JSON: {e.msg} "
                f"(line {e.lineno}, column {e.colno})"
            ),
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e

    logger.debug(f"Read room configuration from {path}")
    return load_config_from_dict(data, path=path)
