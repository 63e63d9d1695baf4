"""Unit tests for application settings configuration."""

from pathlib import Path

import pytest

from request_desk.config import Settings


def test_settings_uses_backend_env_file_independent_of_cwd():
    """Settings should always include backend/.env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_backend_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_backend_env in normalized
    assert str(Path(".env")) in normalized


def test_defaults_seed_the_documented_admin(monkeypatch):
    monkeypatch.delenv("ADMIN_USERNAME", raising=False)
    monkeypatch.delenv("ADMIN_PASSWORD", raising=False)

    settings = Settings(_env_file=None)

    assert settings.admin_username == "admin"
    assert settings.admin_password == "admin123"
    assert settings.attachment_failure_policy == "tolerate"
    assert settings.unique_attachment_names is False


def test_attachment_policy_comes_from_environment(monkeypatch):
    monkeypatch.setenv("ATTACHMENT_FAILURE_POLICY", "propagate")
    monkeypatch.setenv("UNIQUE_ATTACHMENT_NAMES", "true")

    settings = Settings(_env_file=None)

    assert settings.attachment_failure_policy == "propagate"
    assert settings.unique_attachment_names is True


def test_unknown_attachment_policy_is_rejected(monkeypatch):
    monkeypatch.setenv("ATTACHMENT_FAILURE_POLICY", "ignore")

    with pytest.raises(ValueError):
        Settings(_env_file=None)
