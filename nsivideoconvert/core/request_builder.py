"""
Request bodies for the VideoConvert node
"""
import json
from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..utils import ConvertOptionsValidator, InputValidator, ValidationError


@dataclass
class ConversionRequest:
    """Body of a conversion request.

    Exactly one shape is filled: 'download' uses video_link, 'reference'
    uses sam_uid and filename, 'inline' uses video and filename.
    """
    shape: str
    video_link: Optional[str] = None
    sam_uid: Optional[str] = None
    video: Optional[str] = None
    filename: Optional[str] = None
    callback: Optional[str] = None
    verb: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        if self.shape == 'download':
            body = {'video_link': self.video_link}
        elif self.shape == 'reference':
            body = {'sam_uid': self.sam_uid, 'filename': self.filename}
        else:
            body = {'video': self.video, 'filename': self.filename}

        if self.callback is not None:
            body['callback'] = self.callback
        if self.verb is not None:
            body['verb'] = self.verb
        return body

    def to_json(self) -> str:
        return json.dumps(self.to_dict())


class RequestBuilder:
    """Turn caller options into request bodies"""

    @staticmethod
    def build_conversion(options: Dict[str, Any]) -> ConversionRequest:
        """Build a conversion request from convert() options"""
        shape = ConvertOptionsValidator.select_shape(options)

        if shape == 'download':
            request = ConversionRequest(shape, video_link=options['video_link'])
        elif shape == 'reference':
            request = ConversionRequest(shape, sam_uid=options['sam_uid'], filename=options['filename'])
        else:
            request = ConversionRequest(shape, video=options['file'], filename=options['filename'])

        request.callback = options.get('callback')
        request.verb = options.get('verb')
        return request

    @staticmethod
    def build_status(key: str) -> str:
        """Body for a done() query"""
        is_valid, error = InputValidator.validate_key(key)
        if not is_valid:
            raise ValidationError(error)
        return json.dumps({'key': key})
