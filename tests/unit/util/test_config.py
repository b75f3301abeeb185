"""Unit tests for application settings."""

import pytest
from pydantic import ValidationError

from clinic_iam.config import CognitoSettings, Settings


class TestSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("COGNITO__USER_POOL_ID", raising=False)

        settings = Settings(_env_file=None)

        assert settings.environment == "development"
        assert settings.debug is False
        assert settings.cognito.region == "us-east-1"
        assert settings.cognito.user_pool_id == ""
        assert settings.cognito.default_list_limit == 20
        assert settings.observability.logfire_token is None

    def test_nested_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("COGNITO__REGION", "us-east-2")
        monkeypatch.setenv("COGNITO__USER_POOL_ID", "us-east-2_AbCdEf123")
        monkeypatch.setenv("COGNITO__DEFAULT_LIST_LIMIT", "50")

        settings = Settings(_env_file=None)

        assert settings.environment == "production"
        assert settings.cognito.region == "us-east-2"
        assert settings.cognito.user_pool_id == "us-east-2_AbCdEf123"
        assert settings.cognito.default_list_limit == 50

    @pytest.mark.parametrize("limit", [0, 61])
    def test_default_list_limit_bounds(self, limit):
        with pytest.raises(ValidationError):
            CognitoSettings(default_list_limit=limit)

    def test_unknown_environment_rejected(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "qa")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)
