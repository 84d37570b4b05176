"""Unit tests for security/password.py"""

import logging

from notekeeper.security.password import hash_password, needs_update, verify_password


def test_hash_and_verify():
    hashed = hash_password("secret")
    assert hashed != "secret"
    assert hashed.startswith("$pbkdf2-sha256$")
    assert verify_password("secret", hashed) is True
    assert verify_password("wrong", hashed) is False


def test_legacy_plaintext_passwords_verify_and_need_update():
    assert verify_password("secret", "secret") is True
    assert verify_password("wrong", "secret") is False
    assert needs_update("secret") is True


def test_fresh_hash_needs_no_update():
    assert needs_update(hash_password("secret")) is False


def test_empty_stored_password_never_verifies():
    assert verify_password("", "") is False
    assert verify_password("anything", "") is False


def test_damaged_hash_is_a_failed_check(caplog):
    # The notekeeper logger does not propagate to the root logger
    logger = logging.getLogger("notekeeper")
    logger.addHandler(caplog.handler)
    try:
        assert verify_password("y", "$pbkdf2-sha256$bad") is False
    finally:
        logger.removeHandler(caplog.handler)
    assert "could not be checked" in caplog.text
