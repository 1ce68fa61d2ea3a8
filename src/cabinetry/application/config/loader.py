"""Configuration file loader with comprehensive error handling.

Loads carcass documents and slab merge documents from JSON files. File
system errors, JSON parsing errors and pydantic validation errors are all
reported as :class:`ConfigError` with actionable messages.
"""

import json
import logging
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from cabinetry.application.config.schemas import CarcassDocument, SlabMergeDocument

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class ConfigError(Exception):
    """Exception raised for configuration-related errors.

    Attributes:
        message: The primary error message
        error_type: Category of error (file_not_found, permission_denied,
            file_read_error, json_parse, validation)
        path: Path to the configuration file (if applicable)
        details: Additional error details (line/column for JSON, per-field
            validation errors)
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        """Format error message for display."""
        return self.message


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Format a pydantic location tuple as a JSON path string.

    Examples:
        >>> _format_json_path(("config", "drawer_heights", 2))
        'config.drawer_heights[2]'
        >>> _format_json_path(("slabs", 0, "width"))
        'slabs[0].width'
    """
    parts: list[str] = []
    for segment in loc:
        if isinstance(segment, int):
            if parts:
                parts[-1] = f"{parts[-1]}[{segment}]"
            else:
                parts.append(f"[{segment}]")
        else:
            parts.append(str(segment))
    return ".".join(parts)


def _extract_validation_errors(
    error: PydanticValidationError,
) -> list[dict[str, Any]]:
    """Flatten a pydantic ValidationError into path/message/value/error_type dicts."""
    details: list[dict[str, Any]] = []
    for err in error.errors():
        details.append(
            {
                "path": _format_json_path(err["loc"]),
                "message": err["msg"],
                "value": err.get("input"),
                "error_type": err["type"],
            }
        )
    return details


def _format_validation_error_message(details: list[dict[str, Any]]) -> str:
    """Format validation error details into a human-readable message."""
    lines = ["Configuration validation failed:"]
    for detail in details:
        path = detail["path"]
        message = detail["message"]
        value = detail.get("value")
        if value is not None:
            lines.append(f"  - {path}: {message} (got: {value!r})")
        else:
            lines.append(f"  - {path}: {message}")
    return "\n".join(lines)


def _read_json(path: Path) -> Any:
    if not path.exists():
        raise ConfigError(
            message=f"Config file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError:
        raise ConfigError(
            message=f"Permission denied reading config file: {path}",
            error_type="permission_denied",
            path=path,
        )
    except OSError as e:
        raise ConfigError(
            message=f"Error reading config file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        )

    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=f"Invalid JSON in config file: {path} (line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
            details=[
                {
                    "line": e.lineno,
                    "column": e.colno,
                    "message": e.msg,
                }
            ],
        )


def _validate(model: type[ModelT], data: Any, path: Path | None = None) -> ModelT:
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        details = _extract_validation_errors(e)
        raise ConfigError(
            message=_format_validation_error_message(details),
            error_type="validation",
            path=path,
            details=details,
        )


def load_config(path: Path) -> CarcassDocument:
    """Load and validate a carcass document from a JSON file.

    Args:
        path: Path to the JSON configuration file

    Returns:
        A validated CarcassDocument

    Raises:
        ConfigError: If the file cannot be loaded or validated. The
            ``error_type`` attribute names the failure category.

    Example:
        >>> try:
        ...     doc = load_config(Path("base-600.json"))
        ... except ConfigError as e:
        ...     for detail in e.details:
        ...         print(f"  {detail['path']}: {detail['message']}")
    """
    document = _validate(CarcassDocument, _read_json(path), path)
    logger.debug(f"Loaded {document.cabinet_type.value} carcass document from {path}")
    return document


def load_config_from_dict(data: dict[str, Any]) -> CarcassDocument:
    """Validate a carcass document supplied as a dictionary.

    Raises:
        ConfigError: If the data fails validation.
    """
    return _validate(CarcassDocument, data)


def load_merge_config(path: Path) -> SlabMergeDocument:
    """Load and validate a slab merge document from a JSON file.

    Raises:
        ConfigError: If the file cannot be loaded or validated.
    """
    document = _validate(SlabMergeDocument, _read_json(path), path)
    logger.debug(f"Loaded {len(document.slabs)} {document.category.value} slabs from {path}")
    return document


def load_merge_config_from_dict(data: dict[str, Any]) -> SlabMergeDocument:
    """Validate a slab merge document supplied as a dictionary.

    Raises:
        ConfigError: If the data fails validation.
    """
    return _validate(SlabMergeDocument, data)
