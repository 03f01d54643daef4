"""
Client core modules
"""
from .client import Client
from .request_builder import ConversionRequest, RequestBuilder
from .response_handler import ResponseHandler, STATUS_ERRORS, SAM_MARKER

__all__ = [
    'Client',
    'ConversionRequest',
    'RequestBuilder',
    'ResponseHandler',
    'STATUS_ERRORS',
    'SAM_MARKER'
]
