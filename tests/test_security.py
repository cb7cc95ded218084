from app.core.security import SessionCodec, redact_email, redact_token


def test_session_roundtrip():
    codec = SessionCodec(secret="test-secret")
    token = codec.issue("u-eric")
    assert token != "u-eric"
    assert codec.resolve(token) == "u-eric"


def test_session_rejects_tampered_cookie():
    codec = SessionCodec(secret="test-secret")
    token = codec.issue("u-eric")
    assert codec.resolve(token[:-4] + "AAAA") is None
    assert codec.resolve("garbage") is None


def test_session_rejects_other_secret():
    token = SessionCodec(secret="one-secret").issue("u-eric")
    assert SessionCodec(secret="another-secret").resolve(token) is None


def test_session_anonymous():
    assert SessionCodec(secret="test-secret").resolve(None) is None
    assert SessionCodec(secret="test-secret").resolve("") is None


def test_redaction():
    assert redact_email("eric@somemail.se") == "e***@somemail.se"
    assert redact_email(None) == "None"
    assert redact_token("abcdefghijkl") == "abcdefgh***"
    assert redact_token("short") == "***"
