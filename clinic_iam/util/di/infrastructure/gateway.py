"""Identity gateway infrastructure providers."""

import aioboto3
from dishka import Scope, provide

from clinic_iam.adapter.cognito import CognitoIdentityGateway
from clinic_iam.config import CognitoSettings
from clinic_iam.domain.gateway import IdentityGateway
from clinic_iam.util.di.base import ProviderBase


class GatewayProvider(ProviderBase):
    """Identity gateway component base."""

    __mock_component__ = "gateway"


class ProdGatewayProvider(GatewayProvider):
    """Production gateway provider backed by Cognito."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_session(self) -> aioboto3.Session:
        """Provide aioboto3 session using the default credential chain."""
        return aioboto3.Session()

    @provide(scope=Scope.APP)
    def get_identity_gateway(
        self, session: aioboto3.Session, cognito_settings: CognitoSettings
    ) -> IdentityGateway:
        """Provide Cognito identity gateway.

        Raises:
            GatewayConfigurationError: If no user pool id is configured
        """
        return CognitoIdentityGateway(session=session, settings=cognito_settings)
