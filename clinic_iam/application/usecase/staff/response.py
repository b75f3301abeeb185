"""Staff member response shared by staff use cases."""

from pydantic import BaseModel

from clinic_iam.domain.model import Identity
from clinic_iam.domain.value import IdentityStatus


class StaffMemberResponse(BaseModel):
    """Staff member as seen by callers."""

    handle: str
    active: bool
    status: IdentityStatus
    attributes: dict[str, str]
    groups: list[str]

    @classmethod
    def from_identity(cls, identity: Identity) -> "StaffMemberResponse":
        return cls(
            handle=identity.handle,
            active=identity.active,
            status=identity.status,
            attributes=dict(identity.attributes),
            groups=sorted(identity.groups),
        )
