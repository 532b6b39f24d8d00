"""Configuration validation for the launcher.

Warns on unknown keys and on values of the wrong type. Never raises; the
loader falls back to defaults for anything flagged here.
"""

from __future__ import annotations

from dataclasses import dataclass
from difflib import get_close_matches
from typing import Any, Dict, List, Optional, Set, Tuple, Type, Union

from am2rlauncher.core.logging import get_logger

LOGGER = get_logger(__name__)

# key -> accepted value types (None is always accepted for optional keys)
EXPECTED_TYPES: Dict[str, Union[Type[Any], Tuple[Type[Any], ...]]] = {
    "mirror_index": int,
    "custom_mirror": str,
    "log_to_file": bool,
    "java_working_directory": str,
}

OPTIONAL_KEYS: Set[str] = {"custom_mirror", "java_working_directory"}

VALID_KEYS: Set[str] = set(EXPECTED_TYPES)


@dataclass
class ConfigValidationWarning:
    """A validation warning for configuration."""

    message: str
    source: str
    key: Optional[str] = None
    suggestion: Optional[str] = None


def _suggest_key(key: str, valid_keys: Set[str]) -> Optional[str]:
    matches = get_close_matches(key, sorted(valid_keys), n=1, cutoff=0.6)
    return matches[0] if matches else None


def _log_warning(warning: ConfigValidationWarning) -> None:
    message = f"{warning.source}: {warning.message}"
    if warning.suggestion:
        message += f" (did you mean '{warning.suggestion}'?)"
    LOGGER.warning(message)


def _type_matches(key: str, value: Any) -> bool:
    if value is None:
        return key in OPTIONAL_KEYS
    expected = EXPECTED_TYPES[key]
    # bool is a subclass of int; keep them apart
    if expected is int and isinstance(value, bool):
        return False
    return isinstance(value, expected)


def validate_config(
    data: Dict[str, Any],
    source: str,
) -> List[ConfigValidationWarning]:
    """Validate a launcher configuration dictionary.

    Args:
        data: Config dictionary to validate.
        source: Source file path for warning messages.

    Returns:
        List of validation warnings.
    """
    warnings: List[ConfigValidationWarning] = []

    for key, value in data.items():
        if key not in VALID_KEYS:
            warning = ConfigValidationWarning(
                message=f"Unknown key '{key}'",
                source=source,
                key=key,
                suggestion=_suggest_key(str(key), VALID_KEYS),
            )
        elif not _type_matches(key, value):
            warning = ConfigValidationWarning(
                message=f"'{key}' has invalid type {type(value).__name__}, using default",
                source=source,
                key=key,
            )
        else:
            continue
        warnings.append(warning)
        _log_warning(warning)

    return warnings
