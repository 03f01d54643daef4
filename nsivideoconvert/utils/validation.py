"""
Validation utilities for client options
"""
from typing import Any, Dict, Iterable, List, Optional, Tuple

from .errors import ValidationError, MissingParametersError

CONNECTION_KEYS = ('user', 'password', 'host', 'port')
CONVERT_KEYS = ('file', 'sam_uid', 'filename', 'video_link', 'callback', 'verb')


class InputValidator:
    """Validate inputs for client operations"""

    @staticmethod
    def unknown_keys(options: Dict[str, Any], allowed: Iterable[str]) -> List[str]:
        """Return option names that are not in the allowed set"""
        allowed = set(allowed)
        return sorted(key for key in options if key not in allowed)

    @staticmethod
    def validate_connection_options(options: Dict[str, Any]) -> None:
        """Reject keys that are not connection settings"""
        unknown = InputValidator.unknown_keys(options, CONNECTION_KEYS)
        if unknown:
            raise ValidationError(f"Unknown connection settings: {', '.join(unknown)}")

    @staticmethod
    def validate_key(key: Any) -> Tuple[bool, Optional[str]]:
        """Validate a conversion key"""
        if not isinstance(key, str):
            return False, f"Key must be a string, got {type(key).__name__}"
        return True, None

    @staticmethod
    def has_value(options: Dict[str, Any], name: str) -> bool:
        """True when option is present and not None"""
        return options.get(name) is not None


class ConvertOptionsValidator:
    """Select the request shape for convert options"""

    @staticmethod
    def select_shape(options: Dict[str, Any]) -> str:
        """Return the first shape whose fields are present.

        Order is download, reference, inline. Fields belonging to a
        lower-priority shape are ignored when a higher one matches.
        """
        has_value = InputValidator.has_value

        if has_value(options, 'video_link'):
            return 'download'
        if has_value(options, 'sam_uid') and has_value(options, 'filename'):
            return 'reference'
        if has_value(options, 'file') and has_value(options, 'filename'):
            return 'inline'
        raise MissingParametersError()
