"""Conversion between Cognito records and domain identities."""

from collections.abc import Iterable, Mapping
from typing import Any

from clinic_iam.domain.model import Identity


class CognitoMapper:
    """Maps Cognito user records to ``Identity`` and back.

    Cognito returns attributes as ``[{"Name": ..., "Value": ...}]`` under
    ``Attributes`` (ListUsers, AdminCreateUser) or ``UserAttributes``
    (AdminGetUser).
    """

    def to_attributes(self, values: Mapping[str, str] | None) -> list[dict[str, str]]:
        """Convert an attribute mapping to Cognito's name/value list."""
        if not values:
            return []
        return [{"Name": name, "Value": value} for name, value in values.items()]

    def attributes_from(
        self, records: Iterable[Mapping[str, Any]] | None
    ) -> dict[str, str]:
        """Convert Cognito's name/value list to an attribute mapping."""
        return {record["Name"]: record.get("Value", "") for record in records or []}

    def from_user(
        self, user: Mapping[str, Any], groups: Iterable[str] = ()
    ) -> Identity:
        """Build an identity from a Cognito user record.

        Args:
            user: ``UserType`` dict or an ``AdminGetUser`` response
            groups: Group names the user belongs to

        Returns:
            Identity
        """
        records = user.get("Attributes")
        if records is None:
            records = user.get("UserAttributes")
        return Identity(
            handle=user["Username"],
            active=user.get("Enabled", True),
            attributes=self.attributes_from(records),
            groups=frozenset(groups),
        )
