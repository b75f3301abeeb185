"""Identity attribute names and derived status values."""

from enum import Enum

# Provider attribute names. Custom attributes carry the ``custom:`` prefix
# the user pool schema requires.
DOCUMENT = "custom:document"
ROLE = "custom:role"
EMAIL = "email"
PHONE_NUMBER = "phone_number"
ADDRESS = "address"
BIRTHDATE = "birthdate"
GIVEN_NAME = "given_name"
FAMILY_NAME = "family_name"


class IdentityStatus(str, Enum):
    """Read-only view of an identity's ``active`` flag."""

    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"

    @classmethod
    def from_active(cls, active: bool) -> "IdentityStatus":
        return cls.ACTIVE if active else cls.INACTIVE
