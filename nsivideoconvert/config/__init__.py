"""
Connection configuration for VideoConvert clients
"""
from .configuration import (
    ConnectionSettings, Configuration,
    configure, current_settings, reset_configuration,
    get_configuration, load_settings_from_file
)

__all__ = [
    'ConnectionSettings',
    'Configuration',
    'configure',
    'current_settings',
    'reset_configuration',
    'get_configuration',
    'load_settings_from_file'
]
