"""
Connection settings and process-wide defaults for VideoConvert clients
"""
import json
import logging
import os
import threading
from dataclasses import dataclass, asdict, replace
from typing import Any, Dict, Mapping, Optional

from ..interfaces import ConfigProvider
from ..utils import InputValidator, ValidationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConnectionSettings:
    """Credentials and address of a VideoConvert node"""
    user: Optional[str] = None
    password: Optional[str] = None
    host: Optional[str] = None
    port: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> 'ConnectionSettings':
        """Build settings from a mapping, ignoring unrelated keys"""
        if not data:
            return cls()
        return cls(
            user=data.get('user'),
            password=data.get('password'),
            host=data.get('host'),
            port=data.get('port')
        )

    def merged(self, overrides: Optional[Mapping[str, Any]] = None) -> 'ConnectionSettings':
        """Return a copy where every non-None override replaces the stored value"""
        if not overrides:
            return self
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes)

    def as_dict(self) -> Dict[str, Optional[str]]:
        return asdict(self)


class Configuration(ConfigProvider):
    """Process-wide default settings used by clients built without explicit values.

    Reads return immutable snapshots and writes are serialised by a lock, so
    clients may be configured and constructed from several threads.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._settings = ConnectionSettings()

    @property
    def settings(self) -> ConnectionSettings:
        with self._lock:
            return self._settings

    def configure(self, settings: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> ConnectionSettings:
        """Store default settings, overwriting any previous values"""
        values: Dict[str, Any] = dict(settings or {})
        values.update(kwargs)
        InputValidator.validate_connection_options(values)

        new_settings = ConnectionSettings.from_dict(values)
        with self._lock:
            previous = self._settings
            self._settings = new_settings

        if previous.host is not None and (previous.host, previous.port) != (new_settings.host, new_settings.port):
            logger.warning(
                "Replacing default VideoConvert node %s:%s with %s:%s",
                previous.host, previous.port, new_settings.host, new_settings.port
            )
        return new_settings

    def reset(self) -> None:
        """Forget all stored settings"""
        with self._lock:
            self._settings = ConnectionSettings()

    def get_config(self, key: str, default: Any = None) -> Any:
        value = self.settings.as_dict().get(key)
        return default if value is None else value

    def set_config(self, key: str, value: Any) -> None:
        InputValidator.validate_connection_options({key: value})
        with self._lock:
            self._settings = replace(self._settings, **{key: value})


_configuration = Configuration()


def get_configuration() -> Configuration:
    """Return the process-wide configuration holder"""
    return _configuration


def configure(settings: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> ConnectionSettings:
    """Set process-wide defaults for new clients.

    Args:
        settings: Mapping with any of 'user', 'password', 'host', 'port'
        **kwargs: Same keys; they take precedence over the mapping

    Returns:
        ConnectionSettings: The stored settings
    """
    return _configuration.configure(settings, **kwargs)


def current_settings() -> ConnectionSettings:
    """Return the stored defaults (all None if never configured)"""
    return _configuration.settings


def reset_configuration() -> None:
    """Clear the process-wide defaults"""
    _configuration.reset()


def load_settings_from_file(file_path: str, apply: bool = False) -> ConnectionSettings:
    """Load connection settings from a JSON file

    Args:
        file_path: Path to a JSON object with 'user', 'password', 'host', 'port'
        apply: Also store the loaded settings as process-wide defaults

    Returns:
        ConnectionSettings: The loaded settings
    """
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"Configuration file not found: {file_path}")

    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid JSON in configuration file: {e}")

    if not isinstance(data, dict):
        raise ValidationError("Configuration file must contain a JSON object")

    InputValidator.validate_connection_options(data)

    if apply:
        return configure(data)
    return ConnectionSettings.from_dict(data)
