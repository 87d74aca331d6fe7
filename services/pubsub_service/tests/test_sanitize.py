from services.pubsub_service.src.sanitize import hash_preview, sanitize_value

def test_hash_preview_hides_text():
    out = hash_preview("secret name")
    assert "secret" not in out
    assert out.endswith("len=11")

def test_payload_is_hashed():
    assert sanitize_value("payload", "test") == hash_preview("test")

def test_safe_keys_kept_verbatim():
    long_sub = "projects/p/subscriptions/" + "s" * 200
    assert sanitize_value("subscription", long_sub) == long_sub
    assert sanitize_value("delivery_attempt", "3") == "3"

def test_scalars_pass_through():
    assert sanitize_value("body_size", 12) == 12
    assert sanitize_value("has_data", True) is True
    assert sanitize_value("message_id", None) is None

def test_attributes_are_shallow_sanitized():
    attrs = {"origin": "scheduler", "token": "abc", "blob": "x" * 200}
    out = sanitize_value("attributes", attrs)
    assert out["origin"] == "scheduler"
    assert out["token"].startswith("sha256=")
    assert out["blob"].startswith("sha256=")
