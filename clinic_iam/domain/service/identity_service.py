"""Identity orchestration service."""

from collections.abc import Mapping, Sequence

import logfire
from pydantic import SecretStr

from clinic_iam.domain import validation
from clinic_iam.domain.error import InvalidInputError
from clinic_iam.domain.gateway import IdentityGateway
from clinic_iam.domain.model import Identity, IdentityCandidate
from clinic_iam.domain.service.base import Service
from clinic_iam.domain.service.error_translator import ErrorTranslator


class IdentityService(Service):
    """Command/query surface for staff identities.

    Validates input before touching the provider, then drives the gateway.
    Gateway failures come out as domain errors through the translator. No
    retries and no rollback happen here.
    """

    def __init__(
        self,
        identity_gateway: IdentityGateway,
        error_translator: ErrorTranslator,
    ) -> None:
        """Initialize identity service.

        Args:
            identity_gateway: Identity provider gateway
            error_translator: Translator for gateway failures
        """
        self.identity_gateway = identity_gateway
        self.error_translator = error_translator

    async def create_identity(
        self, candidate: IdentityCandidate | None, send_invite: bool
    ) -> Identity:
        """Create an identity.

        Args:
            candidate: Handle, attributes and initial password
            send_invite: Whether the provider sends an invite message

        Returns:
            Identity as confirmed by the provider

        Raises:
            InvalidInputError: If any rule fails (nothing is sent to the provider)
            ProviderError: If the provider rejects the creation
        """
        if candidate is None:
            raise InvalidInputError("Identity is required")

        with logfire.span(
            "identity_service.create_identity",
            handle=candidate.handle,
            send_invite=send_invite,
        ):
            logfire.info("Creating identity", handle=candidate.handle)
            validation.validate_candidate(candidate)

            with self.error_translator.guard("create", candidate.handle):
                created = await self.identity_gateway.create(
                    candidate.to_identity(), send_invite
                )

            logfire.info("Identity created in provider", handle=created.handle)
            return created

    async def disable_identity(self, handle: str) -> None:
        """Disable an identity. Disabling twice is left to the provider."""
        self._require_handle(handle)
        with logfire.span("identity_service.disable_identity", handle=handle):
            logfire.info("Disabling identity", handle=handle)
            with self.error_translator.guard("disable", handle):
                await self.identity_gateway.disable(handle)

    async def enable_identity(self, handle: str) -> None:
        """Enable an identity."""
        self._require_handle(handle)
        with logfire.span("identity_service.enable_identity", handle=handle):
            logfire.info("Enabling identity", handle=handle)
            with self.error_translator.guard("enable", handle):
                await self.identity_gateway.enable(handle)

    async def set_permanent_password(
        self, handle: str, password: str | SecretStr
    ) -> None:
        """Set a password the identity is not forced to rotate.

        Raises:
            InvalidInputError: If the password fails the policy (no provider call)
        """
        self._require_handle(handle)
        with logfire.span("identity_service.set_permanent_password", handle=handle):
            logfire.info("Setting permanent password", handle=handle)
            validation.validate_password(password)

            if isinstance(password, SecretStr):
                password = password.get_secret_value()
            with self.error_translator.guard("set_password", handle):
                await self.identity_gateway.set_password(
                    handle, password, permanent=True
                )

    async def add_to_groups(
        self, handle: str, groups: Sequence[str] | None
    ) -> None:
        """Add an identity to groups, one provider call per group.

        Groups are assigned in the order received. The first failure stops
        the loop; groups assigned before it stay assigned.

        Args:
            handle: Identity handle
            groups: Group names; ``None`` or empty is a no-op

        Raises:
            InvalidInputError: If ``groups`` is a single string
            ProviderError: Tagged ``add_to_group(<group>)`` for the failing group
        """
        if isinstance(groups, str):
            raise InvalidInputError(
                "Groups must be a sequence of group names", field="groups"
            )

        group_list = list(groups or [])
        if not group_list:
            logfire.info("No groups provided, skipping", handle=handle)
            return

        self._require_handle(handle)
        with logfire.span(
            "identity_service.add_to_groups", handle=handle, groups=group_list
        ):
            logfire.info("Adding identity to groups", handle=handle, groups=group_list)
            for group in group_list:
                with self.error_translator.guard(f"add_to_group({group})", handle):
                    await self.identity_gateway.add_to_group(handle, group)

    async def find_by_handle(self, handle: str) -> Identity:
        """Get identity by handle.

        Raises:
            NotFoundError: If the provider has no such identity
        """
        self._require_handle(handle)
        with logfire.span("identity_service.find_by_handle", handle=handle):
            with self.error_translator.guard("get", handle):
                identity = await self.identity_gateway.get(handle)
            logfire.info("Identity found", handle=handle, active=identity.active)
            return identity

    async def list_identities(
        self, limit: int, filter_query: str | None = None
    ) -> list[Identity]:
        """List identities.

        Args:
            limit: Soft cap; non-positive lets the provider pick its default
            filter_query: Opaque provider query string

        Returns:
            Identities returned by the provider
        """
        with logfire.span(
            "identity_service.list_identities", limit=limit, filter=filter_query
        ):
            with self.error_translator.guard("list"):
                identities = await self.identity_gateway.list_identities(
                    limit, filter_query
                )
            logfire.info("Listed identities", count=len(identities))
            return identities

    async def list_groups(self, handle: str) -> list[str]:
        """List the groups an identity belongs to."""
        self._require_handle(handle)
        with logfire.span("identity_service.list_groups", handle=handle):
            with self.error_translator.guard("list_groups", handle):
                return await self.identity_gateway.list_groups(handle)

    def validate_updatable_attributes(
        self, partial_attributes: Mapping[str, str] | None
    ) -> None:
        """Check the attributes present in a partial update.

        Raises:
            InvalidInputError: On the first violated rule
        """
        validation.validate_partial_attributes(partial_attributes)

    @staticmethod
    def _require_handle(handle: str | None) -> None:
        if not handle:
            raise InvalidInputError("Username (handle) is required", field="handle")
