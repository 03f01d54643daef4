"""
Error taxonomy for nsi.videoconvert client operations
"""
from typing import Optional


class VideoConvertError(Exception):
    """Base class for every error raised by the client"""

    default_message = "VideoConvert request failed"

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message or self.default_message)
        self.status_code = status_code


class ValidationError(VideoConvertError):
    """Invalid input or configuration"""

    default_message = "Validation failed"


class MissingParametersError(ValidationError):
    """Incomplete or unrecognized set of conversion parameters"""

    default_message = (
        "Provide 'video_link', 'sam_uid' and 'filename', or 'file' and 'filename'"
    )


class NodeConnectionRefusedError(VideoConvertError):
    """The VideoConvert node refused the connection"""

    default_message = "Could not connect to the VideoConvert node"


class AuthenticationError(VideoConvertError):
    """Credentials rejected by the node"""

    default_message = "Invalid user and/or password"


class KeyNotFoundError(VideoConvertError):
    """Requested key does not exist on the node"""

    default_message = "Key not found"


class MalformedRequestError(VideoConvertError):
    """The node could not understand the request body"""

    default_message = "Malformed request"


class QueueServiceConnectionError(VideoConvertError):
    """The node could not reach its queue service"""

    default_message = "The VideoConvert node could not connect to the queue service"


class SAMConnectionError(VideoConvertError):
    """The node could not reach the SAM storage node"""

    default_message = "The VideoConvert node could not connect to the SAM node"
