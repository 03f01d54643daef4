"""
Client for a nsi.videoconvert node
"""
import logging
from typing import Any, Dict, Mapping, Optional, Union

import httpx

from ..config import ConnectionSettings, configure as configure_defaults, current_settings
from ..interfaces import ConversionNode
from ..utils import (
    FileEncoder, InputValidator, ValidationError, NodeConnectionRefusedError
)
from ..utils.validation import CONVERT_KEYS
from .request_builder import RequestBuilder
from .response_handler import ResponseHandler

logger = logging.getLogger(__name__)

# httpx applies its own default timeout unless one is passed
_TRANSPORT_DEFAULT = object()


class Client(ConversionNode):
    """Connection to a single VideoConvert node

    Example:
        >>> videoconvert = Client(host='localhost', port='8886', user='test', password='test')
        >>> response = videoconvert.convert(video_link='http://example.com/video.ogv')
        >>> videoconvert.done(response['video_key'])

    Settings not given as keywords fall back to ``defaults`` or, when that is
    omitted, to the values stored with :func:`configure`.
    """

    def __init__(self, defaults: Optional[Union[ConnectionSettings, Mapping[str, Any]]] = None, *,
                 user: Optional[str] = None, password: Optional[str] = None,
                 host: Optional[str] = None, port: Optional[str] = None,
                 transport: Optional[httpx.BaseTransport] = None,
                 timeout: Any = _TRANSPORT_DEFAULT):
        if defaults is None:
            defaults = current_settings()
        elif not isinstance(defaults, ConnectionSettings):
            InputValidator.validate_connection_options(dict(defaults))
            defaults = ConnectionSettings.from_dict(defaults)

        self._settings = defaults.merged(
            {'user': user, 'password': password, 'host': host, 'port': port}
        )
        self._http_options: Dict[str, Any] = {}
        if transport is not None:
            self._http_options['transport'] = transport
        if timeout is not _TRANSPORT_DEFAULT:
            self._http_options['timeout'] = timeout

    @property
    def settings(self) -> ConnectionSettings:
        return self._settings

    @property
    def user(self) -> Optional[str]:
        return self._settings.user

    @property
    def password(self) -> Optional[str]:
        return self._settings.password

    @property
    def host(self) -> Optional[str]:
        return self._settings.host

    @property
    def port(self) -> Optional[str]:
        return self._settings.port

    @property
    def base_url(self) -> str:
        """URL of the node root"""
        if not self.host:
            raise ValidationError("No VideoConvert host configured")
        if self.port is None:
            return f"http://{self.host}/"
        try:
            port = int(self.port)
        except (TypeError, ValueError):
            raise ValidationError(f"Invalid port: {self.port!r}")
        return f"http://{self.host}:{port}/"

    @classmethod
    def configure(cls, settings: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> ConnectionSettings:
        """Pre-configure default settings for clients built afterwards

        Example:
            >>> Client.configure(user='why', password='chunky', host='localhost', port='8888')
        """
        return configure_defaults(settings, **kwargs)

    def convert(self, **options: Any) -> Dict[str, Any]:
        """Send a video to be converted

        Args:
            file: Base64 encoded video, sent with ``filename``
            sam_uid: UID of a video stored in SAM, sent with ``filename``
            filename: Video filename; the node picks codecs from its extension
            video_link: Link the node downloads the video from. Wins over the
                other inputs when several are given.
            callback: URL called when the conversion finishes
            verb: HTTP verb for the callback (the node defaults to POST)

        Returns:
            dict: Parsed node response, usually holding ``video_key``

        Raises:
            MissingParametersError: No complete set of inputs was given
            NodeConnectionRefusedError: The node is unreachable
            AuthenticationError: Invalid user and/or password
            KeyNotFoundError: Unknown ``sam_uid``
            MalformedRequestError: The node rejected the body
            QueueServiceConnectionError: The node cannot reach its queue
            SAMConnectionError: The node cannot reach SAM
        """
        unknown = InputValidator.unknown_keys(options, CONVERT_KEYS)
        if unknown:
            logger.debug("Ignoring unknown convert options: %s", ", ".join(unknown))

        request = RequestBuilder.build_conversion(options)
        logger.debug("Submitting %s conversion to %s", request.shape, self.base_url)
        return self._execute('POST', request.to_json())

    def convert_file(self, file_path: str, **options: Any) -> Dict[str, Any]:
        """Encode a local video and send it inline for conversion"""
        options.setdefault('filename', FileEncoder.filename_for(file_path))
        options['file'] = FileEncoder.encode_file(file_path)
        return self.convert(**options)

    def done(self, key: str) -> Dict[str, Any]:
        """Check whether a video was already converted

        Returns:
            dict: Parsed node response with a boolean ``done``

        Raises:
            KeyNotFoundError: Unknown key
        """
        body = RequestBuilder.build_status(key)
        logger.debug("Checking conversion status of %s", key)
        return self._execute('GET', body)

    def _execute(self, method: str, body: str) -> Dict[str, Any]:
        url = self.base_url
        try:
            with httpx.Client(**self._http_options) as http:
                response = http.request(
                    method, url,
                    content=body,
                    headers={'Content-Type': 'application/json'},
                    auth=(self.user or '', self.password or '')
                )
        except httpx.ConnectError as e:
            raise NodeConnectionRefusedError(f"Could not connect to {url}: {e}") from e

        logger.debug("%s %s -> %s", method, url, response.status_code)
        return ResponseHandler.handle(response)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(host={self.host!r}, port={self.port!r}, user={self.user!r})"
