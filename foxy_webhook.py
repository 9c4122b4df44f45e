"""
Checks on incoming FoxyCart webhook requests.

Foxy signs each webhook with an HMAC-SHA256 of the raw body keyed by the
store's webhook encryption key, sent hex-encoded in the
``Foxy-Webhook-Signature`` header.
"""
import hashlib
import hmac
import json

from errors import ValidationError

EVENT_HEADER = "foxy-webhook-event"
SIGNATURE_HEADER = "foxy-webhook-signature"


def _header(headers, name):
    for key, value in (headers or {}).items():
        if key.lower() == name:
            return value
    return None


def valid_signature(body, signature, key):
    expected = hmac.new(key.encode(), body.encode(), hashlib.sha256).hexdigest()
    return hmac.compare_digest(expected, signature.strip().lower())


def valid_foxy_request(event, encryption_key=None):
    """Return an error message for an invalid request, or an empty string"""
    body = event.get("body")
    if not body:
        return "Bad Request: empty body."
    try:
        parsed = json.loads(body)
    except ValueError:
        parsed = None
    if not isinstance(parsed, dict):
        return "Bad Request: body is not valid JSON."

    headers = event.get("headers")
    if not _header(headers, EVENT_HEADER):
        return "Bad Request: missing Foxy webhook event header."

    if encryption_key:
        signature = _header(headers, SIGNATURE_HEADER)
        if not signature or not valid_signature(body, signature, encryption_key):
            return "Forbidden: invalid Foxy webhook signature."
    return ""


def extract_items(body):
    """
    Return the ``fx:items`` of a Foxy transaction payload.

    A payload without an ``_embedded`` object has no items. An ``fx:items``
    that is not a list of objects raises ValidationError.
    """
    payload = json.loads(body) if isinstance(body, str) else body
    embedded = payload.get("_embedded") if isinstance(payload, dict) else None
    if not isinstance(embedded, dict) or not embedded.get("fx:items"):
        return []
    items = embedded["fx:items"]
    if not isinstance(items, list):
        raise ValidationError("Bad Request: fx:items must be a list.")
    if not all(isinstance(item, dict) for item in items):
        raise ValidationError("Bad Request: every fx:items entry must be an object.")
    return items
