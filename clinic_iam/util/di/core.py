"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from clinic_iam.config import CognitoSettings, Settings
from clinic_iam.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_cognito_settings(self, settings: Settings) -> CognitoSettings:
        """Provide Cognito settings."""
        return settings.cognito
