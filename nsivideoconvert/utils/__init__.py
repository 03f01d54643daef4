"""
Client utilities
"""
from .errors import (
    VideoConvertError, ValidationError, MissingParametersError,
    NodeConnectionRefusedError, AuthenticationError, KeyNotFoundError,
    MalformedRequestError, QueueServiceConnectionError, SAMConnectionError
)
from .file_utils import FileEncoder
from .validation import InputValidator, ConvertOptionsValidator

__all__ = [
    'VideoConvertError',
    'ValidationError',
    'MissingParametersError',
    'NodeConnectionRefusedError',
    'AuthenticationError',
    'KeyNotFoundError',
    'MalformedRequestError',
    'QueueServiceConnectionError',
    'SAMConnectionError',
    'FileEncoder',
    'InputValidator',
    'ConvertOptionsValidator'
]
