"""Unit tests for EnrollStaffMemberUseCase."""

import pytest
from pydantic import SecretStr

from clinic_iam.application.usecase.staff import (
    EnrollStaffMemberRequest,
    EnrollStaffMemberUseCase,
)
from clinic_iam.domain.error import GatewayError, InvalidInputError, ProviderError
from clinic_iam.domain.gateway import IdentityGateway
from clinic_iam.domain.model import StaffRole
from clinic_iam.domain.value import IdentityStatus
from clinic_iam.domain.value import attributes as attrs
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


def _request(**overrides) -> EnrollStaffMemberRequest:
    fields = {
        "handle": "nurse01",
        "first_name": "Laura",
        "last_name": "Gomez",
        "document": "123456789",
        "email": "laura@clinic.com",
        "phone": "3001234567",
        "address": "Calle 123",
        "birthdate": "01/01/1990",
        "password": SecretStr("Passw0rd!"),
        "role": StaffRole.ENFERMERA,
    }
    fields.update(overrides)
    return EnrollStaffMemberRequest(**fields)


class TestEnrollStaffMemberUseCase:
    """Tests for EnrollStaffMemberUseCase."""

    @pytest.mark.asyncio
    async def test_enroll_success(self, unit_env):
        """Should create, assign the role group and fix the password."""
        # Arrange
        use_case = await unit_env.get(EnrollStaffMemberUseCase)
        gateway = await unit_env.get(IdentityGateway)

        # Act
        response = await use_case.execute(_request())

        # Assert
        assert response.handle == "nurse01"
        assert response.active is True
        assert response.status == IdentityStatus.ACTIVE
        assert response.groups == ["nurse"]
        assert response.attributes[attrs.ROLE] == "ENFERMERA"
        assert response.attributes[attrs.GIVEN_NAME] == "Laura"
        assert gateway.password_of("nurse01") == ("Passw0rd!", True)

    @pytest.mark.asyncio
    async def test_steps_run_in_order(self, unit_env):
        use_case = await unit_env.get(EnrollStaffMemberUseCase)
        gateway = await unit_env.get(IdentityGateway)

        await use_case.execute(_request(role=StaffRole.MEDICO))

        assert [c.operation for c in gateway.calls] == [
            "create",
            "add_to_group",
            "set_password",
        ]
        assert gateway.calls_to("add_to_group")[0].args == ("doctor",)
        assert gateway.calls_to("set_password")[0].args == (True,)

    @pytest.mark.asyncio
    async def test_invite_flag_is_forwarded(self, unit_env):
        use_case = await unit_env.get(EnrollStaffMemberUseCase)
        gateway = await unit_env.get(IdentityGateway)

        await use_case.execute(_request(send_invite=True))

        assert gateway.calls_to("create")[0].args == (True,)

    @pytest.mark.asyncio
    async def test_invalid_field_stops_before_provider(self, unit_env):
        use_case = await unit_env.get(EnrollStaffMemberUseCase)
        gateway = await unit_env.get(IdentityGateway)

        with pytest.raises(InvalidInputError, match="Email is not valid"):
            await use_case.execute(_request(email="laura-at-clinic"))

        assert gateway.calls == []

    @pytest.mark.asyncio
    async def test_group_failure_leaves_identity_created(self, unit_env):
        """No rollback: the identity exists even though enrollment failed."""
        use_case = await unit_env.get(EnrollStaffMemberUseCase)
        gateway = await unit_env.get(IdentityGateway)
        gateway.fail_on(
            "add_to_group",
            GatewayError("ResourceNotFoundException", "Group not found."),
            group_name="humanR",
        )

        with pytest.raises(ProviderError, match=r"add_to_group\(humanR\)"):
            await use_case.execute(_request(role=StaffRole.RRHH))

        assert (await gateway.get("nurse01")).handle == "nurse01"
        assert gateway.calls_to("set_password") == []
