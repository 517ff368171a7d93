import orjson
import pytest
from pydantic import ValidationError

from cloudevent_intake.decoding import decode_event, decode_structured, projection_for
from cloudevent_intake.errors import CloudEventDecodeError, InvalidCloudEventError, MalformedBodyError

JSON = {"content-type": "application/json"}


def test_envelope_is_decoded(envelope):
    event = decode_event(JSON, orjson.dumps(envelope))

    assert event.id == "order-1"
    assert event.source == "/orders"
    assert event.type == "com.example.order.created"
    assert event.specversion == "1.0"
    assert event.time.year == 2021
    assert event.data == {"order_id": 1, "total": 9.5}


def test_missing_datacontenttype_comes_from_transport(envelope):
    event = decode_structured(JSON, orjson.dumps(envelope))
    assert event.datacontenttype == "application/json"


def test_cloudevents_json_transport_type():
    body = orjson.dumps({"specversion": "1.0", "type": "t", "source": "s", "id": "1"})
    event = decode_structured({"Content-Type": "application/cloudevents+json; charset=UTF-8"}, body)
    assert event.datacontenttype == "application/cloudevents+json; charset=UTF-8"
    assert event.data is None


def test_explicit_datacontenttype_is_preserved(envelope):
    envelope["datacontenttype"] = "text/plain"
    envelope["data"] = "hello"
    event = decode_structured(JSON, orjson.dumps(envelope))
    assert event.datacontenttype == "text/plain"
    assert event.data == "hello"


def test_extensions_are_kept(envelope):
    envelope["traceparent"] = "00-4bf92f3577b34da6a3ce929d0e0e4736-00f067aa0ba902b7-01"
    event = decode_structured(JSON, orjson.dumps(envelope))
    assert event.extensions == {"traceparent": envelope["traceparent"]}


def test_typed_payload(envelope):
    event = decode_structured(JSON, orjson.dumps(envelope), projection_for(dict[str, float]))
    assert event.data == {"order_id": 1.0, "total": 9.5}


@pytest.mark.parametrize("body", [b"[1, 2, 3]", b'"just a string"', b"", b"null"])
def test_non_object_body_fails(body):
    with pytest.raises(CloudEventDecodeError) as exc:
        decode_structured(JSON, body)
    assert exc.value.message == "Could not decode the request as a structured-mode message."
    assert isinstance(exc.value.cause, MalformedBodyError)


def test_invalid_json_fails():
    with pytest.raises(CloudEventDecodeError) as exc:
        decode_structured(JSON, b'{"id": ')
    assert "structured-mode message" in exc.value.message


@pytest.mark.parametrize("attribute", ["id", "source", "specversion", "type"])
def test_missing_required_attribute_fails(envelope, attribute):
    del envelope[attribute]
    with pytest.raises(CloudEventDecodeError) as exc:
        decode_structured(JSON, orjson.dumps(envelope))
    assert isinstance(exc.value.cause, InvalidCloudEventError)


def test_wrongly_typed_attribute_fails(envelope):
    envelope["id"] = 42
    with pytest.raises(CloudEventDecodeError):
        decode_structured(JSON, orjson.dumps(envelope))


def test_event_is_immutable(envelope):
    event = decode_structured(JSON, orjson.dumps(envelope))
    with pytest.raises(ValidationError):
        event.id = "other"
