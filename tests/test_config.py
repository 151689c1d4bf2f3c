import pytest

from session_token.config import TokenConfig


def test_from_env_defaults() -> None:
    assert TokenConfig.from_env({}) == TokenConfig()


def test_from_env_reads_values() -> None:
    cfg = TokenConfig.from_env(
        {
            "SESSION_TOKEN_KEY_LENGTH": "12",
            "SESSION_TOKEN_REFRESH_KEY_RANDOM": "Yes",
            "SESSION_TOKEN_REFRESH_KEY_LENGTH": "20",
        }
    )
    assert cfg.secret_key_length == 12
    assert cfg.refresh_key_random is True
    assert cfg.refresh_key_length == 20


def test_from_env_rejects_bad_values() -> None:
    with pytest.raises(ValueError):
        TokenConfig.from_env({"SESSION_TOKEN_KEY_LENGTH": "six"})
    with pytest.raises(ValueError):
        TokenConfig.from_env({"SESSION_TOKEN_REFRESH_KEY_LENGTH": "0"})
