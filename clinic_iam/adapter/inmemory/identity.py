"""In-memory identity gateway for testing."""

from dataclasses import dataclass, field

from clinic_iam.domain.error import GatewayError
from clinic_iam.domain.gateway import IdentityGateway
from clinic_iam.domain.model import Identity, StaffRole

DEFAULT_LIST_LIMIT = 20


@dataclass(frozen=True)
class GatewayCall:
    """One recorded gateway invocation."""

    operation: str
    handle: str | None = None
    args: tuple = field(default_factory=tuple)


class InMemoryIdentityGateway(IdentityGateway):
    """Dictionary-backed implementation of IdentityGateway for testing.

    Mirrors the provider's error codes so translation can be exercised
    without a user pool. Every call is recorded in ``calls`` before it runs,
    including calls that fail.

    Identities are copied in and out, so callers never share state with
    the store.
    """

    def __init__(self, groups: set[str] | None = None) -> None:
        self._identities: dict[str, Identity] = {}
        self._passwords: dict[str, tuple[str, bool]] = {}
        self._groups = (
            set(groups)
            if groups is not None
            else {role.group_name for role in StaffRole}
        )
        self._failures: dict[tuple[str, str | None], Exception] = {}
        self.calls: list[GatewayCall] = []

    def fail_on(
        self, operation: str, error: Exception, group_name: str | None = None
    ) -> None:
        """Make the next calls to ``operation`` raise ``error``.

        Args:
            operation: Gateway method name (``create``, ``add_to_group``, ...)
            error: Exception to raise
            group_name: For ``add_to_group``, only fail for this group
        """
        self._failures[(operation, group_name)] = error

    def calls_to(self, operation: str) -> list[GatewayCall]:
        """Recorded calls for one operation, in call order."""
        return [call for call in self.calls if call.operation == operation]

    def password_of(self, handle: str) -> tuple[str, bool] | None:
        """Stored (password, permanent) pair for an identity."""
        return self._passwords.get(handle)

    async def create(self, identity: Identity, send_invite: bool) -> Identity:
        """Create an identity."""
        self._record("create", identity.handle, send_invite)
        if identity.handle in self._identities:
            raise GatewayError("UsernameExistsException", "User account already exists")
        created = identity.model_copy(
            update={"active": True, "groups": frozenset()}, deep=True
        )
        self._identities[identity.handle] = created
        return created.model_copy(deep=True)

    async def enable(self, handle: str) -> None:
        """Enable an identity."""
        self._record("enable", handle)
        self._set_active(handle, True)

    async def disable(self, handle: str) -> None:
        """Disable an identity."""
        self._record("disable", handle)
        self._set_active(handle, False)

    async def set_password(self, handle: str, password: str, permanent: bool) -> None:
        """Store a password."""
        self._record("set_password", handle, permanent)
        self._require(handle)
        self._passwords[handle] = (password, permanent)

    async def add_to_group(self, handle: str, group_name: str) -> None:
        """Add an identity to a group."""
        self._record("add_to_group", handle, group_name)
        failure = self._failures.get(("add_to_group", group_name))
        if failure is not None:
            raise failure
        identity = self._require(handle)
        if group_name not in self._groups:
            raise GatewayError("ResourceNotFoundException", "Group not found.")
        self._identities[handle] = identity.model_copy(
            update={"groups": identity.groups | {group_name}}
        )

    async def get(self, handle: str) -> Identity:
        """Get an identity by handle."""
        self._record("get", handle)
        return self._require(handle).model_copy(deep=True)

    async def list_identities(
        self, limit: int, filter_query: str | None
    ) -> list[Identity]:
        """List identities in creation order.

        ``filter_query`` is accepted for interface compatibility; the double
        does not interpret provider query syntax.
        """
        self._record("list_identities", None, limit, filter_query)
        effective = limit if limit > 0 else DEFAULT_LIST_LIMIT
        return [
            identity.model_copy(deep=True)
            for identity in list(self._identities.values())[:effective]
        ]

    async def list_groups(self, handle: str) -> list[str]:
        """List an identity's groups, sorted by name."""
        self._record("list_groups", handle)
        return sorted(self._require(handle).groups)

    def _record(self, operation: str, handle: str | None, *args) -> None:
        self.calls.append(GatewayCall(operation=operation, handle=handle, args=args))
        failure = self._failures.get((operation, None))
        if failure is not None:
            raise failure

    def _require(self, handle: str) -> Identity:
        identity = self._identities.get(handle)
        if identity is None:
            raise GatewayError("UserNotFoundException", "User does not exist.")
        return identity

    def _set_active(self, handle: str, active: bool) -> None:
        identity = self._require(handle)
        self._identities[handle] = identity.model_copy(update={"active": active})
