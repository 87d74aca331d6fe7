from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import PlainTextResponse

from ..exceptions import PushError
from ..logging import jlog
from ..sanitize import sanitize_value
from ..service import handle_push

router = APIRouter()

def _is_json_media_type(content_type: str) -> bool:
    media_type = content_type.split(";", 1)[0].strip().lower()
    if media_type == "application/json":
        return True
    major, _, minor = media_type.partition("/")
    return major == "application" and minor.endswith("+json")

async def require_json_content_type(request: Request) -> None:
    """
    Reject non-JSON requests with 415 before the handler runs.
    A missing Content-Type passes; the body is validated downstream.
    """
    content_type: Optional[str] = request.headers.get("content-type")
    if content_type is None:
        return
    if not _is_json_media_type(content_type):
        jlog(event="unsupported_media_type", severity="WARNING", content_type=content_type)
        raise HTTPException(
            status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
            detail="Unsupported Media Type",
        )

def _slog(event: str, severity: str = "INFO", **fields) -> None:
    jlog(event=event, severity=severity, **{k: sanitize_value(k, v) for k, v in fields.items()})

@router.post(
    "/",
    response_class=PlainTextResponse,
    summary="Pub/Sub push handler",
    dependencies=[Depends(require_json_content_type)],
)
async def pubsub_push(request: Request) -> PlainTextResponse:
    """
    Pub/Sub push handler. Decodes message.data and greets it.
    Malformed envelopes and undecodable data -> 400 with a fixed text body.
    """
    delivery_attempt = request.headers.get("X-Goog-Delivery-Attempt")
    body = await request.body()

    try:
        result = handle_push(body)
    except PushError as e:
        _slog(
            "pubsub_message_rejected",
            severity="WARNING",
            error_type=type(e).__name__,
            reason=e.reason,
            body_size=len(body),
            delivery_attempt=delivery_attempt,
        )
        return PlainTextResponse(e.message, status_code=e.status_code)

    msg = result.envelope.message
    _slog(
        "pubsub_message_received",
        message_id=msg.messageId,
        publish_time=msg.publishTime,
        subscription=result.envelope.subscription,
        delivery_attempt=delivery_attempt,
        attributes=msg.attributes or {},
        has_data=bool(msg.data),
    )
    _slog("greeting_sent", message_id=msg.messageId, payload=result.payload)
    return PlainTextResponse(result.greeting)
