import pytest

from cloudevent_intake.decoding import decode_binary, decode_structured
from cloudevent_intake.decoding.media_type import content_type_header, is_json, must_be_json, parse_media_type
from cloudevent_intake.errors import CloudEventDecodeError, UnsupportedMediaTypeError


@pytest.mark.parametrize(
    "value",
    ["application/json", "application/json; charset=utf-8", "application/cloudevents+json", "Application/JSON"],
)
def test_json_types_accepted(value):
    media_type = parse_media_type(value)
    assert is_json(media_type)
    must_be_json(media_type)


@pytest.mark.parametrize("value", ["text/plain", "application/xml", "application/jsonx", "multipart/form-data"])
def test_non_json_types_rejected(value):
    with pytest.raises(UnsupportedMediaTypeError) as exc:
        must_be_json(parse_media_type(value))
    assert exc.value.status_code == 400
    assert "Unsupported encoding" in exc.value.message


@pytest.mark.parametrize("value", [None, "", "json", "application/", "application/json; charset"])
def test_missing_or_garbled_content_type(value):
    with pytest.raises(UnsupportedMediaTypeError):
        parse_media_type(value)


def test_str_is_normalized():
    media_type = parse_media_type('Application/JSON; Charset="utf-8"')
    assert media_type.mime_type == "application/json"
    assert str(media_type) == "application/json; charset=utf-8"


def test_content_type_lookup_ignores_name_case():
    assert content_type_header({"Content-Type": "application/json"}) == "application/json"
    assert content_type_header({"ce-id": "1"}) is None


def test_text_plain_fails_before_builder_in_both_modes(binary_headers):
    headers = {**binary_headers, "content-type": "text/plain"}
    # Body is not even JSON: the media type check must fire first
    with pytest.raises(UnsupportedMediaTypeError) as exc:
        decode_binary(headers, b"hello")
    assert not isinstance(exc.value, CloudEventDecodeError)

    with pytest.raises(UnsupportedMediaTypeError) as exc:
        decode_structured({"content-type": "text/plain"}, b"hello")
    assert not isinstance(exc.value, CloudEventDecodeError)


def test_quoted_parameter_may_contain_semicolon():
    media_type = parse_media_type('application/json; foo="a;b"; charset=utf-8')
    assert media_type.parameters == {"foo": "a;b", "charset": "utf-8"}
    assert str(media_type) == 'application/json; foo="a;b"; charset=utf-8'


def test_quoted_parameter_escapes_are_unescaped():
    media_type = parse_media_type(r'application/json; note="say \"hi\""')
    assert media_type.parameters == {"note": 'say "hi"'}


def test_trailing_garbage_after_quoted_value_is_rejected():
    with pytest.raises(UnsupportedMediaTypeError):
        parse_media_type('application/json; foo="a"b')


def test_structured_decode_with_quoted_semicolon_parameter():
    body = b'{"specversion": "1.0", "type": "t", "source": "/s", "id": "1"}'
    event = decode_structured({"content-type": 'application/json; foo="a;b"'}, body)
    assert event.id == "1"
    assert event.datacontenttype == 'application/json; foo="a;b"'
