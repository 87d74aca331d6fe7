from pydantic import BaseModel, field_validator
from typing import Any, Optional, Dict

class PubSubMessage(BaseModel):
    data: Optional[str] = None             # base64
    attributes: Optional[Dict[str, Any]] = None
    messageId: Optional[str] = None
    publishTime: Optional[str] = None      # RFC3339

    # Metadata is only logged; accept any scalar the publisher sent
    @field_validator("messageId", "publishTime", mode="before")
    @classmethod
    def _scalar_to_str(cls, v: Any) -> Any:
        if v is None or isinstance(v, str):
            return v
        if isinstance(v, (int, float, bool)):
            return str(v)
        return v

    @field_validator("attributes", mode="before")
    @classmethod
    def _attribute_values_to_str(cls, v: Any) -> Any:
        if isinstance(v, dict):
            return {k: val if isinstance(val, str) else str(val) for k, val in v.items()}
        return v

class PushEnvelope(BaseModel):
    message: PubSubMessage
    subscription: Optional[str] = None
