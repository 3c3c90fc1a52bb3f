"""Tests for log-safe identifier helper functions."""

from banana_stand.core.config import settings
from banana_stand.core.identifiers import clear_log_safe_user_cache, get_log_safe_user_id

PSEUDONYM_LENGTH = 16
USER = "amzn1.ask.account.AAAA"


def test_get_log_safe_user_id_is_deterministic() -> None:
    """Same user id + secret should always yield the same pseudonym."""
    clear_log_safe_user_cache()

    token_first = get_log_safe_user_id(USER, secret="deterministic-secret")
    token_second = get_log_safe_user_id(USER, secret="deterministic-secret")

    assert token_first == token_second
    assert len(token_first) == PSEUDONYM_LENGTH
    assert USER not in token_first
    clear_log_safe_user_cache()


def test_get_log_safe_user_id_varies_by_input_and_secret() -> None:
    """Changing the user id or secret should change the pseudonym output."""
    clear_log_safe_user_cache()
    base_token = get_log_safe_user_id(USER, secret="deterministic-secret")
    different_secret_token = get_log_safe_user_id(USER, secret="alternate-secret")
    different_user_token = get_log_safe_user_id(
        "amzn1.ask.account.BBBB", secret="deterministic-secret"
    )

    assert base_token != different_secret_token
    assert base_token != different_user_token
    clear_log_safe_user_cache()


def test_get_log_safe_user_id_defaults_to_configured_secret() -> None:
    clear_log_safe_user_cache()
    configured = get_log_safe_user_id(USER, secret=settings.LOG_PSEUDONYM_SECRET)
    assert get_log_safe_user_id(USER) == configured
    clear_log_safe_user_cache()
