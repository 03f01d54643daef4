"""Tests for request body construction."""

from __future__ import annotations

import json

import httpx
import pytest

import nsivideoconvert
from nsivideoconvert import ConversionRequest, RequestBuilder, MissingParametersError, ValidationError


@pytest.mark.parametrize("options, shape, body", [
    ({"video_link": "http://x/v.ogv"}, "download", {"video_link": "http://x/v.ogv"}),
    ({"sam_uid": "uid", "filename": "v.ogv"}, "reference", {"sam_uid": "uid", "filename": "v.ogv"}),
    ({"file": "dmlkZW8=", "filename": "v.ogv"}, "inline", {"video": "dmlkZW8=", "filename": "v.ogv"}),
])
def test_shapes(options, shape, body):
    request = RequestBuilder.build_conversion(options)

    assert request.shape == shape
    assert request.to_dict() == body


def test_callback_fields_are_appended_to_any_shape():
    request = RequestBuilder.build_conversion(
        {"sam_uid": "uid", "filename": "v.ogv", "callback": "http://cb", "verb": "PUT"}
    )

    assert request.to_dict() == {
        "sam_uid": "uid", "filename": "v.ogv", "callback": "http://cb", "verb": "PUT",
    }


def test_to_json_keeps_field_order():
    request = ConversionRequest("download", video_link="http://host/video.ogv",
                                callback="http://cb", verb="PUT")

    assert request.to_json() == json.dumps(
        {"video_link": "http://host/video.ogv", "callback": "http://cb", "verb": "PUT"}
    )


def test_incomplete_options():
    with pytest.raises(MissingParametersError):
        RequestBuilder.build_conversion({"filename": "v.ogv", "callback": "http://cb"})


def test_missing_parameters_is_a_validation_error():
    assert issubclass(MissingParametersError, ValidationError)


def test_status_body():
    assert json.loads(RequestBuilder.build_status("abc")) == {"key": "abc"}


def test_quick_helpers_use_configured_defaults(monkeypatch):
    def handler(request):
        if request.method == "POST":
            return httpx.Response(200, json={"video_key": "k"})
        return httpx.Response(200, json={"done": True})

    original_init = nsivideoconvert.Client.__init__

    def init_with_mock(self, *args, **kwargs):
        kwargs.setdefault("transport", httpx.MockTransport(handler))
        original_init(self, *args, **kwargs)

    monkeypatch.setattr(nsivideoconvert.Client, "__init__", init_with_mock)
    nsivideoconvert.configure(user="u", password="p", host="localhost", port="8886")

    assert nsivideoconvert.quick_convert(video_link="http://x/v.ogv") == {"video_key": "k"}
    assert nsivideoconvert.quick_done("k") is True
