import base64
import binascii
from typing import NamedTuple

from pydantic import ValidationError

from .exceptions import InvalidPayloadEncoding, MalformedEnvelope
from .schemas import PubSubMessage, PushEnvelope

DEFAULT_NAME = "World"

class PushResult(NamedTuple):
    envelope: PushEnvelope
    payload: str
    greeting: str

def parse_envelope(body: bytes) -> PushEnvelope:
    """
    Validate a raw push body. Empty bodies, invalid JSON, non-object
    documents and a missing or mistyped `message` all collapse into
    MalformedEnvelope.
    """
    if not body or not body.strip():
        raise MalformedEnvelope("empty body")
    try:
        return PushEnvelope.model_validate_json(body)
    except ValidationError as e:
        raise MalformedEnvelope(f"{e.error_count()} validation error(s)") from e

def decode_payload(message: PubSubMessage) -> str:
    if not message.data:
        return ""
    try:
        raw = base64.b64decode(message.data, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidPayloadEncoding(f"invalid base64: {e}") from e
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidPayloadEncoding(f"invalid utf-8: {e}") from e

def build_greeting(payload: str) -> str:
    return f"Hello {payload or DEFAULT_NAME}!"

def handle_push(body: bytes) -> PushResult:
    envelope = parse_envelope(body)
    payload = decode_payload(envelope.message)
    return PushResult(envelope, payload, build_greeting(payload))
