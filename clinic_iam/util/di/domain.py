"""Domain layer DI providers."""

from dishka import Scope, provide

from clinic_iam.domain.gateway import IdentityGateway
from clinic_iam.domain.service import ErrorTranslator, IdentityService
from clinic_iam.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    The translator is stateless and shared; the identity service is
    REQUEST-scoped to follow the gateway lifecycle.
    """

    @provide(scope=Scope.APP)
    def get_error_translator(self) -> ErrorTranslator:
        """Provide gateway error translator."""
        return ErrorTranslator()

    @provide(scope=Scope.REQUEST)
    def get_identity_service(
        self, identity_gateway: IdentityGateway, error_translator: ErrorTranslator
    ) -> IdentityService:
        """Provide identity domain service."""
        return IdentityService(
            identity_gateway=identity_gateway, error_translator=error_translator
        )
