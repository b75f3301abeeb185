"""Enroll staff member use case."""

import logfire
from pydantic import BaseModel, SecretStr

from clinic_iam.application.usecase.base import BaseUseCase
from clinic_iam.application.usecase.staff.response import StaffMemberResponse
from clinic_iam.domain.model import IdentityCandidate, StaffRole
from clinic_iam.domain.service import IdentityService
from clinic_iam.domain.value import attributes as attrs


class EnrollStaffMemberRequest(BaseModel):
    """Enroll staff member request.

    Fields are carried as given; the identity service applies the rules.
    """

    handle: str
    first_name: str
    last_name: str
    document: str
    email: str
    phone: str
    address: str
    birthdate: str  # DD/MM/YYYY
    password: SecretStr
    role: StaffRole
    send_invite: bool = False


class EnrollStaffMemberUseCase(BaseUseCase):
    """Use case for onboarding a new staff member.

    Steps run in a fixed order and stop at the first failure:
    1. Create the identity (validates every attribute and the password)
    2. Add it to the group for its role
    3. Set the password as permanent so no rotation is forced

    A failure after step 1 leaves the identity created; nothing is undone.
    """

    def __init__(self, identity_service: IdentityService) -> None:
        """Initialize enroll staff member use case.

        Args:
            identity_service: Identity domain service
        """
        self.identity_service = identity_service

    async def execute(self, request: EnrollStaffMemberRequest) -> StaffMemberResponse:
        """Execute enrollment flow.

        Args:
            request: New staff member data

        Returns:
            Enrolled staff member

        Raises:
            InvalidInputError: If any field fails validation
            ProviderError: If the identity provider rejects a step
        """
        candidate = IdentityCandidate(
            handle=request.handle,
            attributes={
                attrs.GIVEN_NAME: request.first_name,
                attrs.FAMILY_NAME: request.last_name,
                attrs.DOCUMENT: request.document,
                attrs.EMAIL: request.email,
                attrs.PHONE_NUMBER: request.phone,
                attrs.ADDRESS: request.address,
                attrs.BIRTHDATE: request.birthdate,
                attrs.ROLE: request.role.value,
            },
            password=request.password,
        )

        with logfire.span(
            "enroll_staff_member", handle=request.handle, role=request.role.value
        ):
            created = await self.identity_service.create_identity(
                candidate, request.send_invite
            )
            group = request.role.group_name
            await self.identity_service.add_to_groups(created.handle, [group])
            await self.identity_service.set_permanent_password(
                created.handle, request.password
            )

            enrolled = created.model_copy(
                update={"groups": created.groups | {group}}
            )
            logfire.info(
                "Staff member enrolled", handle=enrolled.handle, group=group
            )
            return StaffMemberResponse.from_identity(enrolled)
