import hashlib
import hmac
import json

import pytest

from errors import ValidationError
from foxy_webhook import extract_items, valid_foxy_request

BODY = json.dumps({"_embedded": {"fx:items": [{"code": "X1", "quantity": 1}]}})


def sign(body, key):
    return hmac.new(key.encode(), body.encode(), hashlib.sha256).hexdigest()


def test_valid_request_without_key():
    event = {"headers": {"Foxy-Webhook-Event": "transaction/created"}, "body": BODY}
    assert valid_foxy_request(event) == ""


def test_empty_body():
    assert valid_foxy_request({"headers": {}, "body": ""}).startswith("Bad Request")


def test_body_not_json():
    event = {"headers": {"foxy-webhook-event": "x"}, "body": "not json"}
    assert valid_foxy_request(event) == "Bad Request: body is not valid JSON."


def test_missing_event_header():
    event = {"headers": {}, "body": BODY}
    assert valid_foxy_request(event) == "Bad Request: missing Foxy webhook event header."


def test_signature_checked_when_key_configured():
    headers = {
        "Foxy-Webhook-Event": "transaction/created",
        "Foxy-Webhook-Signature": sign(BODY, "secret"),
    }
    assert valid_foxy_request({"headers": headers, "body": BODY}, "secret") == ""
    assert valid_foxy_request({"headers": headers, "body": BODY}, "other").startswith("Forbidden")


def test_missing_signature_when_key_configured():
    event = {"headers": {"Foxy-Webhook-Event": "transaction/created"}, "body": BODY}
    assert valid_foxy_request(event, "secret").startswith("Forbidden")


def test_extract_items():
    assert extract_items(BODY) == [{"code": "X1", "quantity": 1}]
    assert extract_items("{}") == []
    assert extract_items(json.dumps({"_embedded": {}})) == []


def test_extract_items_ignores_non_object_embedded():
    assert extract_items(json.dumps({"_embedded": ["x"]})) == []
    assert extract_items(json.dumps({"_embedded": "x"})) == []


def test_extract_items_rejects_non_list_items():
    with pytest.raises(ValidationError):
        extract_items(json.dumps({"_embedded": {"fx:items": {"code": "X1"}}}))


def test_extract_items_rejects_non_object_entries():
    with pytest.raises(ValidationError):
        extract_items(json.dumps({"_embedded": {"fx:items": ["X1"]}}))
