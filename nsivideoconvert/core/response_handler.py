"""
Interpretation of VideoConvert node responses
"""
import logging
from typing import Any, Dict, Optional, Type

import httpx

from ..utils import (
    VideoConvertError, KeyNotFoundError, MalformedRequestError,
    AuthenticationError, QueueServiceConnectionError, SAMConnectionError
)

logger = logging.getLogger(__name__)

SAM_MARKER = "SAM"

STATUS_ERRORS: Dict[int, Type[VideoConvertError]] = {
    404: KeyNotFoundError,
    400: MalformedRequestError,
    401: AuthenticationError,
    503: QueueServiceConnectionError,
}


class ResponseHandler:
    """Map node responses to parsed results or typed errors"""

    @staticmethod
    def error_for(response: httpx.Response) -> Optional[VideoConvertError]:
        """Return the error a response stands for, or None on success"""
        status = response.status_code

        error_class = STATUS_ERRORS.get(status)
        if error_class is not None:
            return error_class(status_code=status)

        # 500 is only classified when the node names the storage backend
        if status == 500 and SAM_MARKER in response.text:
            return SAMConnectionError(status_code=status)

        return None

    @classmethod
    def handle(cls, response: httpx.Response) -> Dict[str, Any]:
        """Raise the mapped error or return the JSON body"""
        error = cls.error_for(response)
        if error is not None:
            logger.debug("Node answered %s: %s", response.status_code, type(error).__name__)
            raise error

        return response.json()
