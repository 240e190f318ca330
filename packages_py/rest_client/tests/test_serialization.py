"""
Tests for JsonSerializer.
"""
import json
from dataclasses import dataclass
from typing import List

import pytest
from pydantic import PydanticSchemaGenerationError

from postmark_models import PostmarkMessage, PostmarkResponse
from rest_client import JsonSerializer, SerializationError


@dataclass
class Point:
    x: int
    y: int


def test_serialize_model_by_alias():
    message = PostmarkMessage(from_address="a@example.com", to="b@example.com", subject="Hi", text_body="Body")
    payload = json.loads(JsonSerializer().serialize(message))
    assert payload == {"From": "a@example.com", "To": "b@example.com", "Subject": "Hi", "TextBody": "Body"}


def test_serialize_plain_values():
    serializer = JsonSerializer()
    assert json.loads(serializer.serialize({"a": [1, 2]})) == {"a": [1, 2]}
    assert json.loads(serializer.serialize(Point(1, 2))) == {"x": 1, "y": 2}


def test_serialize_unknown_type_fails():
    with pytest.raises(SerializationError) as exc:
        JsonSerializer().serialize(object())
    assert exc.value.entity_type is object


def test_deserialize_into_model():
    content = '{"ErrorCode": 0, "Message": "OK", "MessageID": "b7bc2f4a"}'
    result = JsonSerializer().deserialize(content, PostmarkResponse)
    assert isinstance(result, PostmarkResponse)
    assert result.message_id == "b7bc2f4a"


def test_deserialize_into_generic_list():
    result = JsonSerializer().deserialize(b'[{"x": 1, "y": 2}]', List[Point])
    assert result == [Point(1, 2)]


def test_deserialize_untyped():
    assert JsonSerializer().deserialize('{"a": 1}') == {"a": 1}


def test_deserialize_failures():
    serializer = JsonSerializer()
    with pytest.raises(SerializationError):
        serializer.deserialize("not json")
    with pytest.raises(SerializationError) as exc:
        serializer.deserialize('{"Message": "missing code"}', PostmarkResponse)
    assert exc.value.entity_type is PostmarkResponse


class Tweet:
    """Plain class pydantic cannot build a schema for."""

    def __init__(self, text):
        self.text = text


def test_deserialize_into_unsupported_type_fails():
    with pytest.raises(SerializationError) as exc:
        JsonSerializer().deserialize('{"text": "hello"}', Tweet)
    assert exc.value.entity_type is Tweet
    assert isinstance(exc.value.__cause__, PydanticSchemaGenerationError)


def test_deserialize_into_unhashable_type_fails():
    unhashable = [int]
    with pytest.raises(SerializationError) as exc:
        JsonSerializer().deserialize("[1]", unhashable)
    assert isinstance(exc.value.__cause__, TypeError)
