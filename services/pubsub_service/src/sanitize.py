import hashlib
from typing import Any

SAFE_KEYS = {
    "message_id", "publish_time", "subscription", "delivery_attempt",
}
SENSITIVE_KEYS = {
    "authorization", "token", "secret", "payload",
}

def hash_preview(s: str, n: int = 12) -> str:
    return f"sha256={hashlib.sha256(s.encode('utf-8')).hexdigest()[:n]},len={len(s)}"

def sanitize_value(key: str, value: Any) -> Any:
    k = (key or "").lower()
    if k in SAFE_KEYS or value is None or isinstance(value, (bool, int, float)):
        return value
    if k in SENSITIVE_KEYS:
        # Never log raw; hash/length only
        return hash_preview(str(value))
    if isinstance(value, dict):
        return {k: sanitize_value(k, v) for k, v in value.items()}
    value = str(value)
    return value if len(value) <= 120 else hash_preview(value)
