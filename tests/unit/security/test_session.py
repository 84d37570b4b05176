"""Unit tests for security/session.py"""

from datetime import timedelta

from jose import jwt

from notekeeper.security import session as session_module
from notekeeper.security.session import (
    create_session_token,
    decode_session_token,
    get_username_from_token,
)


class DummySettings:
    secret_key = "test-secret"
    algorithm = "HS256"
    session_expire_hours = 24


def test_create_and_decode_session_token(monkeypatch):
    monkeypatch.setattr(session_module, "get_settings", lambda: DummySettings())

    token = create_session_token("alice")
    payload = decode_session_token(token)

    assert payload["sub"] == "alice"
    assert payload["type"] == "session"
    # 32 random bytes, hex encoded
    assert len(payload["jti"]) == 64
    assert get_username_from_token(token) == "alice"


def test_tokens_carry_fresh_secrets(monkeypatch):
    monkeypatch.setattr(session_module, "get_settings", lambda: DummySettings())
    first = decode_session_token(create_session_token("alice"))
    second = decode_session_token(create_session_token("alice"))
    assert first["jti"] != second["jti"]


def test_username_colon_secret_strings_are_rejected(monkeypatch):
    monkeypatch.setattr(session_module, "get_settings", lambda: DummySettings())
    assert get_username_from_token("admin:" + "ab" * 64) is None
    assert get_username_from_token("admin:anything") is None


def test_token_signed_with_other_key_is_rejected(monkeypatch):
    monkeypatch.setattr(session_module, "get_settings", lambda: DummySettings())
    forged = jwt.encode({"sub": "admin", "type": "session"}, "other-key", algorithm="HS256")
    assert get_username_from_token(forged) is None


def test_expired_token_is_rejected(monkeypatch):
    monkeypatch.setattr(session_module, "get_settings", lambda: DummySettings())
    token = create_session_token("alice", expires_delta=timedelta(seconds=-10))
    assert decode_session_token(token) is None


def test_wrong_token_type_is_rejected(monkeypatch):
    monkeypatch.setattr(session_module, "get_settings", lambda: DummySettings())
    token = jwt.encode({"sub": "alice", "type": "access"}, "test-secret", algorithm="HS256")
    assert decode_session_token(token) is None


def test_token_without_subject_has_no_username(monkeypatch):
    monkeypatch.setattr(session_module, "get_settings", lambda: DummySettings())
    token = jwt.encode({"type": "session"}, "test-secret", algorithm="HS256")
    assert get_username_from_token(token) is None
