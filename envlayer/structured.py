"""
envlayer/structured.py
Structured `.env.yaml` files: YAML parsing and shape validation.

The top level must be a mapping whose keys are strings or numbers and whose
values are scalars, or lists/mappings nesting scalars.

Usage:
    from envlayer.structured import read_structured, validate_structured
    errors = validate_structured({"PORT": 8080})
    assoc = read_structured(".env.yaml")
"""

from __future__ import annotations

import logging
from typing import Any

import yaml

from envlayer.errors import InvalidStructuredContent, UnreadableFile

logger = logging.getLogger(__name__)

SCALAR_TYPES = (str, int, float, bool, type(None))


def _is_valid_key(key: Any) -> bool:
    # bool is an int subclass; `true:` keys are not accepted
    return isinstance(key, (str, int, float)) and not isinstance(key, bool)


def _env_name_error(key: str) -> str | None:
    # os.environ rejects these names
    if key == "":
        return "Key must not be empty"
    if "=" in key or "\0" in key:
        return f"Key {key!r} must not contain '=' or NUL"
    return None


def _check_value(value: Any, where: str, errors: list[str]):
    if isinstance(value, str) and "\0" in value:
        errors.append(f"{where}: value must not contain NUL")
        return
    if isinstance(value, SCALAR_TYPES):
        return
    if isinstance(value, list):
        for i, item in enumerate(value):
            _check_value(item, f"{where}[{i}]", errors)
        return
    if isinstance(value, dict):
        for k, item in value.items():
            if not _is_valid_key(k):
                errors.append(f"{where}: key {k!r} must be a string or number")
                continue
            _check_value(item, f"{where}.{k}", errors)
        return
    errors.append(f"{where}: unsupported value type '{type(value).__name__}'")


def validate_structured(data: Any) -> list[str]:
    """Validate a parsed structured file.

    Returns list of error messages (empty = valid).
    """
    if not isinstance(data, dict):
        return ["Top level is not a mapping"]

    errors: list[str] = []
    for key, value in data.items():
        if not _is_valid_key(key):
            errors.append(f"Key {key!r} must be a string or number")
            continue
        name_error = _env_name_error(str(key))
        if name_error:
            errors.append(name_error)
            continue
        _check_value(value, str(key), errors)
    return errors


def read_structured(path: str) -> dict[str, Any]:
    """Parse and validate *path*, returning a RawAssoc with string keys."""
    try:
        with open(path, encoding="utf-8-sig") as f:
            data = yaml.safe_load(f)
    except (OSError, UnicodeDecodeError) as e:
        raise UnreadableFile(f'The "{path}" file could not be read: {e}', path) from e
    except yaml.YAMLError as e:
        raise InvalidStructuredContent(f"YAML parse error in {path}: {e}", path) from e

    errors = validate_structured(data)
    if errors:
        logger.debug("[structured] %s rejected: %s", path, "; ".join(errors))
        raise InvalidStructuredContent(
            f'The file "{path}" should hold a mapping of scalar values: {errors[0]}',
            path,
        )
    return {str(k): v for k, v in data.items()}
