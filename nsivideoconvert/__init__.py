"""
nsivideoconvert - Client for nsi.videoconvert nodes

Submit videos for conversion (inline, from a SAM node or by download link)
and poll their status over HTTP.
"""

# Main classes
from .core import Client, ConversionRequest, RequestBuilder, ResponseHandler

# Configuration management
from .config import (
    ConnectionSettings, Configuration, configure, current_settings,
    reset_configuration, load_settings_from_file
)

# Errors
from .utils import (
    VideoConvertError, ValidationError, MissingParametersError,
    NodeConnectionRefusedError, AuthenticationError, KeyNotFoundError,
    MalformedRequestError, QueueServiceConnectionError, SAMConnectionError
)

# Version info
__version__ = "0.1.0"
__description__ = "A simple library to access a nsi.videoconvert node"

__all__ = [
    # Core API
    'Client',
    'ConversionRequest',
    'RequestBuilder',
    'ResponseHandler',

    # Configuration
    'ConnectionSettings',
    'Configuration',
    'configure',
    'current_settings',
    'reset_configuration',
    'load_settings_from_file',

    # Errors
    'VideoConvertError',
    'ValidationError',
    'MissingParametersError',
    'NodeConnectionRefusedError',
    'AuthenticationError',
    'KeyNotFoundError',
    'MalformedRequestError',
    'QueueServiceConnectionError',
    'SAMConnectionError',

    # Version
    '__version__'
]


def get_version() -> str:
    """Get library version"""
    return __version__


def create_client(**kwargs) -> Client:
    """Create a client with optional settings

    Args:
        **kwargs: Connection settings (user, password, host, port)

    Returns:
        Client: Client using the given settings over the configured defaults
    """
    return Client(**kwargs)


# Quick start functions
def quick_convert(**options) -> dict:
    """Submit a conversion with the configured default settings

    Args:
        **options: Same options as Client.convert

    Returns:
        dict: Parsed node response
    """
    return create_client().convert(**options)


def quick_done(key: str) -> bool:
    """Check a conversion with the configured default settings

    Args:
        key: Key returned when the video was submitted

    Returns:
        bool: True when the node reports the conversion as done
    """
    return bool(create_client().done(key).get('done'))
