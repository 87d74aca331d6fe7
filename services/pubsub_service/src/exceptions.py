class PushError(Exception):
    """Push request body could not be turned into a greeting. Maps to a 400."""

    status_code = 400
    message = "Bad Request"

    def __init__(self, reason: str = ""):
        super().__init__(reason or self.message)
        self.reason = reason

class MalformedEnvelope(PushError):
    """Empty body, invalid JSON, or no usable `message` object."""
    message = "Bad Request: invalid Pub/Sub message format"

class InvalidPayloadEncoding(PushError):
    """`message.data` is not strict base64 or does not decode to UTF-8."""
    message = "Bad Request: invalid Pub/Sub message data encoding"
