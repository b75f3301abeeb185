"""Cognito user pool implementation of the identity gateway.

Talks to the ``cognito-idp`` admin API through aioboto3. Every botocore
failure is re-raised as ``GatewayError`` carrying the Cognito error code, so
the domain layer never sees botocore types.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

import aioboto3
import logfire
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from clinic_iam.adapter.cognito.mapper import CognitoMapper
from clinic_iam.adapter.error import GatewayConfigurationError
from clinic_iam.config import CognitoSettings
from clinic_iam.domain.error import GatewayError
from clinic_iam.domain.gateway import IdentityGateway
from clinic_iam.domain.model import Identity

# ListUsers rejects limits above this
MAX_LIST_LIMIT = 60


class CognitoIdentityGateway(IdentityGateway):
    """Identity gateway backed by a Cognito user pool."""

    def __init__(
        self,
        session: aioboto3.Session,
        settings: CognitoSettings,
        mapper: CognitoMapper | None = None,
    ) -> None:
        """Initialize Cognito gateway.

        Args:
            session: aioboto3 session (default credential chain)
            settings: User pool, region and timeout settings
            mapper: Record mapper

        Raises:
            GatewayConfigurationError: If no user pool id is configured
        """
        if not settings.user_pool_id:
            raise GatewayConfigurationError("Cognito user pool id must be configured")

        self.session = session
        self.settings = settings
        self.user_pool_id = settings.user_pool_id
        self.mapper = mapper or CognitoMapper()
        self._client_config = Config(
            connect_timeout=settings.connect_timeout,
            read_timeout=settings.read_timeout,
            retries={"max_attempts": settings.max_attempts, "mode": "standard"},
        )

    @asynccontextmanager
    async def _client(self) -> AsyncIterator[Any]:
        """Open a cognito-idp client, converting botocore failures."""
        client_kwargs: dict[str, Any] = {
            "region_name": self.settings.region,
            "config": self._client_config,
        }
        if self.settings.endpoint_url:
            client_kwargs["endpoint_url"] = self.settings.endpoint_url

        try:
            async with self.session.client("cognito-idp", **client_kwargs) as client:
                yield client
        except ClientError as e:
            error = e.response.get("Error", {})
            raise GatewayError(
                error.get("Code", "ClientError"), error.get("Message") or str(e)
            ) from e
        except BotoCoreError as e:
            raise GatewayError(type(e).__name__, str(e)) from e

    async def create(self, identity: Identity, send_invite: bool) -> Identity:
        """Create a user with AdminCreateUser.

        Without an invite the welcome message is suppressed; with one,
        Cognito emails the temporary credentials.
        """
        request: dict[str, Any] = {
            "UserPoolId": self.user_pool_id,
            "Username": identity.handle,
            "UserAttributes": self.mapper.to_attributes(identity.attributes),
        }
        if send_invite:
            request["DesiredDeliveryMediums"] = ["EMAIL"]
        else:
            request["MessageAction"] = "SUPPRESS"

        async with self._client() as client:
            response = await client.admin_create_user(**request)

        logfire.info(
            "Cognito user created", handle=identity.handle, send_invite=send_invite
        )
        return self.mapper.from_user(response["User"])

    async def enable(self, handle: str) -> None:
        """Enable a user with AdminEnableUser."""
        async with self._client() as client:
            await client.admin_enable_user(
                UserPoolId=self.user_pool_id, Username=handle
            )

    async def disable(self, handle: str) -> None:
        """Disable a user with AdminDisableUser."""
        async with self._client() as client:
            await client.admin_disable_user(
                UserPoolId=self.user_pool_id, Username=handle
            )

    async def set_password(self, handle: str, password: str, permanent: bool) -> None:
        """Set a password with AdminSetUserPassword."""
        async with self._client() as client:
            await client.admin_set_user_password(
                UserPoolId=self.user_pool_id,
                Username=handle,
                Password=password,
                Permanent=permanent,
            )

    async def add_to_group(self, handle: str, group_name: str) -> None:
        """Add a user to one group with AdminAddUserToGroup."""
        logfire.debug("Assigning Cognito group", handle=handle, group=group_name)
        async with self._client() as client:
            await client.admin_add_user_to_group(
                UserPoolId=self.user_pool_id,
                Username=handle,
                GroupName=group_name,
            )

    async def get(self, handle: str) -> Identity:
        """Get a user with AdminGetUser, plus its groups."""
        async with self._client() as client:
            response = await client.admin_get_user(
                UserPoolId=self.user_pool_id, Username=handle
            )
            groups = await self._load_groups(client, handle)
        return self.mapper.from_user(response, groups)

    async def list_identities(
        self, limit: int, filter_query: str | None
    ) -> list[Identity]:
        """List users with ListUsers, loading each user's groups.

        Non-positive limits fall back to the configured default; limits above
        the ListUsers maximum are clamped.
        """
        effective = limit if limit > 0 else self.settings.default_list_limit
        request: dict[str, Any] = {
            "UserPoolId": self.user_pool_id,
            "Limit": min(effective, MAX_LIST_LIMIT),
        }
        if filter_query:
            request["Filter"] = filter_query

        async with self._client() as client:
            response = await client.list_users(**request)
            identities = []
            for user in response.get("Users", []):
                groups = await self._load_groups(client, user["Username"])
                identities.append(self.mapper.from_user(user, groups))
        return identities

    async def list_groups(self, handle: str) -> list[str]:
        """List a user's groups with AdminListGroupsForUser."""
        async with self._client() as client:
            return await self._load_groups(client, handle)

    async def _load_groups(self, client: Any, handle: str) -> list[str]:
        """Fetch every group page for a user."""
        request: dict[str, Any] = {"UserPoolId": self.user_pool_id, "Username": handle}
        groups: list[str] = []
        while True:
            response = await client.admin_list_groups_for_user(**request)
            groups.extend(group["GroupName"] for group in response.get("Groups", []))
            next_token = response.get("NextToken")
            if not next_token:
                return groups
            request["NextToken"] = next_token
