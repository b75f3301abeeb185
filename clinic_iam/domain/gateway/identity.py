"""Identity gateway interface."""

from abc import ABC, abstractmethod

from clinic_iam.domain.model.identity import Identity


class IdentityGateway(ABC):
    """Capabilities the orchestration layer needs from the identity provider.

    Implementations live in the adapter layer. They signal provider failures
    by raising ``GatewayError`` (or a ``DomainError`` they already
    classified); they apply their own timeouts and never retry on behalf of
    the caller.
    """

    @abstractmethod
    async def create(self, identity: Identity, send_invite: bool) -> Identity:
        """Create an identity at the provider.

        Args:
            identity: Identity to create
            send_invite: Whether the provider sends a welcome/invite message

        Returns:
            The identity as confirmed by the provider
        """
        pass

    @abstractmethod
    async def enable(self, handle: str) -> None:
        """Enable an identity."""
        pass

    @abstractmethod
    async def disable(self, handle: str) -> None:
        """Disable an identity."""
        pass

    @abstractmethod
    async def set_password(self, handle: str, password: str, permanent: bool) -> None:
        """Set an identity's password.

        Args:
            handle: Identity handle
            password: New password
            permanent: When False the identity must change it on next sign-in
        """
        pass

    @abstractmethod
    async def add_to_group(self, handle: str, group_name: str) -> None:
        """Add an identity to a single group."""
        pass

    @abstractmethod
    async def get(self, handle: str) -> Identity:
        """Get an identity, including its groups."""
        pass

    @abstractmethod
    async def list_identities(
        self, limit: int, filter_query: str | None
    ) -> list[Identity]:
        """List identities.

        Args:
            limit: Soft cap; non-positive means the provider default
            filter_query: Provider-specific query string, passed through untouched

        Returns:
            Identities with their groups
        """
        pass

    @abstractmethod
    async def list_groups(self, handle: str) -> list[str]:
        """List the group names an identity belongs to."""
        pass
