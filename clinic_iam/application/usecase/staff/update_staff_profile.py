"""Update staff profile use case."""

from pydantic import BaseModel

from clinic_iam.application.usecase.base import BaseUseCase
from clinic_iam.application.usecase.staff.response import StaffMemberResponse
from clinic_iam.domain.service import IdentityService
from clinic_iam.domain.value import attributes as attrs


class UpdateStaffProfileRequest(BaseModel):
    """Update staff profile request. ``None`` fields are left unchanged."""

    handle: str
    email: str | None = None
    phone: str | None = None
    address: str | None = None
    birthdate: str | None = None

    def changed_attributes(self) -> dict[str, str]:
        """Provider attributes for the fields that were given."""
        fields = {
            attrs.EMAIL: self.email,
            attrs.PHONE_NUMBER: self.phone,
            attrs.ADDRESS: self.address,
            attrs.BIRTHDATE: self.birthdate,
        }
        return {name: value for name, value in fields.items() if value is not None}


class UpdateStaffProfileUseCase(BaseUseCase):
    """Use case for editing a staff member's contact data.

    Handle, role and groups cannot be changed here.
    """

    def __init__(self, identity_service: IdentityService) -> None:
        """Initialize update staff profile use case.

        Args:
            identity_service: Identity domain service
        """
        self.identity_service = identity_service

    async def execute(self, request: UpdateStaffProfileRequest) -> StaffMemberResponse:
        """Execute update staff profile flow.

        Steps:
        1. Validate only the fields that were given
        2. Load the current identity
        3. Merge the changes over its attributes

        Args:
            request: Handle and fields to change

        Returns:
            Staff member with the merged attributes

        Raises:
            InvalidInputError: If a given field is invalid (nothing is loaded)
            NotFoundError: If the identity does not exist
        """
        changes = request.changed_attributes()
        self.identity_service.validate_updatable_attributes(changes)

        existing = await self.identity_service.find_by_handle(request.handle)
        updated = existing.with_attributes(changes)
        return StaffMemberResponse.from_identity(updated)
