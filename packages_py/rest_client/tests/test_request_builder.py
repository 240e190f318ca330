"""
Tests for request assembly.
"""
import json

import pytest

from postmark_models import PostmarkMessage
from rest_client import ClientConfig, RestRequest, SerializationError
from rest_client.config import DEFAULT_USER_AGENT
from rest_client.core.request import build_url, prepare_request
from rest_client.types import FORM_CONTENT_TYPE


@pytest.mark.parametrize(
    "authority, version_path, path, expected",
    [
        ("http://api.twitter.com", "1", "statuses/home_timeline.json", "http://api.twitter.com/1/statuses/home_timeline.json"),
        ("http://api.twitter.com/", "/1/", "/statuses/home_timeline.json", "http://api.twitter.com/1/statuses/home_timeline.json"),
        ("http://twitter.com/oauth", None, "request_token", "http://twitter.com/oauth/request_token"),
        ("http://api.postmarkapp.com", "", "email", "http://api.postmarkapp.com/email"),
        ("http://api.postmarkapp.com", None, "", "http://api.postmarkapp.com"),
    ],
)
def test_build_url(authority, version_path, path, expected):
    assert build_url(authority, version_path, path) == expected


def test_headers_and_parameters_are_unioned():
    config = ClientConfig(authority="http://api.twitter.com", version_path="1")
    config.add_header("Always", "on every request").add_header("X-Dup", "client")
    config.add_parameter("client", "true")

    request = RestRequest(path="statuses/home_timeline.json")
    request.add_header("Only", "on this request").add_header("X-Dup", "request")
    request.add_parameter("request", "true")

    prepared = prepare_request(config, request)

    assert ("Always", "on every request") in prepared.headers
    assert ("Only", "on this request") in prepared.headers
    assert [v for k, v in prepared.headers if k == "X-Dup"] == ["client", "request"]
    assert prepared.params == [("client", "true"), ("request", "true")]
    assert prepared.content is None


def test_query_in_path_is_kept():
    config = ClientConfig(authority="https://example.com")
    prepared = prepare_request(config, RestRequest(path="search?q=rest&page=2", parameters={"lang": "en"}))

    assert prepared.url == "https://example.com/search"
    assert prepared.params == [("q", "rest"), ("page", "2"), ("lang", "en")]


def test_user_agent_defaults_and_overrides():
    config = ClientConfig(authority="https://example.com")
    assert prepare_request(config, RestRequest()).get_header("User-Agent") == DEFAULT_USER_AGENT

    config.user_agent = "rest-client-tests"
    assert prepare_request(config, RestRequest()).get_header("User-Agent") == "rest-client-tests"

    config.add_header("User-Agent", "explicit")
    prepared = prepare_request(config, RestRequest())
    assert [v for k, v in prepared.headers if k == "User-Agent"] == ["explicit"]


def test_method_falls_back_to_client():
    config = ClientConfig(authority="https://example.com", method="PUT")
    assert prepare_request(config, RestRequest()).method == "PUT"
    assert prepare_request(config, RestRequest(method="DELETE")).method == "DELETE"


def test_post_parameters_become_form_body():
    config = ClientConfig(authority="http://api.twitter.com", version_path="1")
    config.add_parameter("status", "testing something new and awesome")

    prepared = prepare_request(config, RestRequest(path="statuses/update.json", method="POST"))

    assert prepared.params == []
    assert prepared.content == "status=testing+something+new+and+awesome"
    assert prepared.get_header("Content-Type") == FORM_CONTENT_TYPE


def test_entity_is_serialized():
    config = ClientConfig(authority="http://api.postmarkapp.com")
    message = PostmarkMessage(from_address="a@example.com", to="b@example.com", subject="Hi", text_body="Body")

    prepared = prepare_request(config, RestRequest(path="email", method="POST", entity=message, parameters={"x": "1"}))

    assert json.loads(prepared.content)["From"] == "a@example.com"
    assert prepared.get_header("Content-Type") == "application/json; charset=utf-8"
    assert prepared.params == [("x", "1")]


def test_explicit_content_type_is_not_duplicated():
    config = ClientConfig(authority="http://api.postmarkapp.com", headers={"Content-Type": "application/json"})
    prepared = prepare_request(config, RestRequest(method="POST", entity={"a": 1}))
    assert [v for k, v in prepared.headers if k.lower() == "content-type"] == ["application/json"]


def test_entity_serialization_error():
    config = ClientConfig(authority="https://example.com")
    with pytest.raises(SerializationError):
        prepare_request(config, RestRequest(method="POST", entity=object()))


def test_request_credentials_win_over_client(basic_auth, oauth_request_token):
    config = ClientConfig(authority="http://twitter.com/oauth", credentials=basic_auth)

    from_client = prepare_request(config, RestRequest(path="request_token"))
    assert from_client.get_header("Authorization").startswith("Basic ")

    from_request = prepare_request(config, RestRequest(path="request_token", credentials=oauth_request_token))
    assert from_request.get_header("Authorization").startswith("OAuth ")
    assert len([k for k, _ in from_request.headers if k == "Authorization"]) == 1
