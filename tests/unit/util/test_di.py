"""Unit tests for dependency injection wiring."""

from unittest.mock import MagicMock

import pytest

from clinic_iam import bootstrap as bootstrap_module
from clinic_iam.adapter.cognito import CognitoIdentityGateway
from clinic_iam.adapter.inmemory import InMemoryIdentityGateway
from clinic_iam.application.usecase.staff import (
    EnrollStaffMemberUseCase,
    UpdateStaffProfileUseCase,
)
from clinic_iam.domain.gateway import IdentityGateway
from clinic_iam.domain.service import ErrorTranslator, IdentityService
from clinic_iam.util.di import GatewayProvider, ProdGatewayProvider, get_provider
from clinic_iam.util.di.container import create_container
from tests.di import MockGatewayProvider, build_test_container


class TestGetProvider:
    """Tests for provider selection."""

    def test_mockable_component(self):
        assert get_provider(GatewayProvider, use_mock=False) is ProdGatewayProvider
        assert get_provider(GatewayProvider, use_mock=True) is MockGatewayProvider


class TestTestContainer:
    """Tests for the test container builder."""

    def test_unknown_component_rejected(self):
        with pytest.raises(ValueError, match="Unknown components"):
            build_test_container(unmock={"ledger"})

    @pytest.mark.asyncio
    async def test_resolves_use_cases_with_in_memory_gateway(self):
        container = build_test_container()
        try:
            async with container() as request_container:
                gateway = await request_container.get(IdentityGateway)
                service = await request_container.get(IdentityService)
                await request_container.get(EnrollStaffMemberUseCase)
                await request_container.get(UpdateStaffProfileUseCase)

                assert isinstance(gateway, InMemoryIdentityGateway)
                assert service.identity_gateway is gateway
        finally:
            await container.close()

    @pytest.mark.asyncio
    async def test_gateway_is_fresh_per_request(self):
        container = build_test_container()
        try:
            async with container() as first:
                first_gateway = await first.get(IdentityGateway)
            async with container() as second:
                second_gateway = await second.get(IdentityGateway)

            assert first_gateway is not second_gateway
        finally:
            await container.close()


class TestProductionContainer:
    """Tests for the production container."""

    @pytest.mark.asyncio
    async def test_resolves_cognito_gateway(self, monkeypatch):
        monkeypatch.setenv("COGNITO__USER_POOL_ID", "us-east-1_TestPool")
        container = create_container()
        try:
            translator = await container.get(ErrorTranslator)
            async with container() as request_container:
                gateway = await request_container.get(IdentityGateway)
                service = await request_container.get(IdentityService)

            assert isinstance(gateway, CognitoIdentityGateway)
            assert gateway.user_pool_id == "us-east-1_TestPool"
            assert service.error_translator is translator
        finally:
            await container.close()

    @pytest.mark.asyncio
    async def test_bootstrap_configures_logging_and_logfire(self, monkeypatch):
        setup_logging = MagicMock()
        configure_logfire = MagicMock()
        monkeypatch.setattr(bootstrap_module, "setup_logging", setup_logging)
        monkeypatch.setattr(bootstrap_module, "configure_logfire", configure_logfire)

        container = bootstrap_module.bootstrap()
        try:
            setup_logging.assert_called_once()
            configure_logfire.assert_called_once()
            assert setup_logging.call_args.args[0] is configure_logfire.call_args.args[0]
        finally:
            await container.close()
