"""Fixtures for API tests."""

from datetime import UTC, datetime
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from resmgmt.application.ports import ProviderIdentity
from resmgmt.application.use_cases.auth.login import LoginUseCase
from resmgmt.application.use_cases.template.create_template import CreateTemplateUseCase
from resmgmt.application.use_cases.template.delete_template import DeleteTemplateUseCase
from resmgmt.application.use_cases.template.duplicate_template import DuplicateTemplateUseCase
from resmgmt.application.use_cases.template.get_template import (
    GetLatestTemplateUseCase,
    GetTemplateVersionUseCase,
    ListTemplateVersionsUseCase,
)
from resmgmt.application.use_cases.template.list_categories import (
    ListTemplateCategoriesUseCase,
)
from resmgmt.application.use_cases.template.publish_template_version import (
    PublishTemplateVersionUseCase,
)
from resmgmt.application.use_cases.user.assign_role import AssignRoleUseCase
from resmgmt.domain.entities import User
from resmgmt.domain.services.permission_resolver import defaults_for
from resmgmt.domain.value_objects import Role
from resmgmt.infrastructure.auth.jwt_token_service import JwtTokenService
from resmgmt.infrastructure.permission.permission_checker import ClaimPermissionChecker
from resmgmt.interfaces.api.app import ApiResources, create_app
from resmgmt.interfaces.api.middleware.auth import AuthMiddleware
from resmgmt.interfaces.api.resources.auth import LoginResource, MeResource
from resmgmt.interfaces.api.resources.health import HealthResource
from resmgmt.interfaces.api.resources.templates import (
    TemplateCategoriesResource,
    TemplateDuplicateResource,
    TemplateResource,
    TemplatesResource,
    TemplateVersionResource,
    TemplateVersionsResource,
)
from resmgmt.interfaces.api.resources.users import UserRoleResource

from tests.conftest import TEST_JWT_SECRET


@pytest.fixture
def token_service() -> JwtTokenService:
    return JwtTokenService(secret=TEST_JWT_SECRET)


@pytest.fixture
def identity_provider() -> AsyncMock:
    provider = AsyncMock()
    provider.exchange_code.return_value = ProviderIdentity(subject="kc-1", email="ada@example.com")
    return provider


@pytest.fixture
def app(uow_factory, token_service, identity_provider):
    """Falcon ASGI app wired to in-memory storage."""
    checker = ClaimPermissionChecker()
    resources = ApiResources(
        health=HealthResource(),
        login=LoginResource(
            LoginUseCase(uow_factory, identity_provider, token_service),
            default_redirect_uri="http://localhost/callback",
        ),
        me=MeResource(),
        user_role=UserRoleResource(AssignRoleUseCase(uow_factory, checker)),
        templates=TemplatesResource(CreateTemplateUseCase(uow_factory, checker)),
        template_categories=TemplateCategoriesResource(ListTemplateCategoriesUseCase(uow_factory)),
        template=TemplateResource(
            GetLatestTemplateUseCase(uow_factory), DeleteTemplateUseCase(uow_factory, checker)
        ),
        template_versions=TemplateVersionsResource(
            ListTemplateVersionsUseCase(uow_factory), PublishTemplateVersionUseCase(uow_factory, checker)
        ),
        template_version=TemplateVersionResource(GetTemplateVersionUseCase(uow_factory)),
        template_duplicate=TemplateDuplicateResource(DuplicateTemplateUseCase(uow_factory, checker)),
    )
    return create_app(resources, middleware=[AuthMiddleware(token_service)])


@pytest.fixture
def client(app):
    """Falcon ASGI test client."""
    from falcon.testing import TestClient
    return TestClient(app)


@pytest.fixture
def auth_headers(token_service, org_id):
    """Build Authorization headers for a role in the test organization."""

    def _headers(role: Role = Role.ADMIN, organization_id=None, permissions=None) -> dict:
        token = token_service.issue(
            user_id=uuid4(),
            organization_id=organization_id or org_id,
            email="caller@example.com",
            role=role,
            permissions=permissions or defaults_for(role),
            now=datetime.now(UTC),
        )
        return {"Authorization": f"Bearer {token}"}

    return _headers


@pytest.fixture
def member(fake_uow, org_id) -> User:
    now = datetime.now(UTC)
    return fake_uow.users.add(
        User(
            id=uuid4(),
            organization_id=org_id,
            email="ada@example.com",
            name="Ada",
            role=Role.INSPECTOR,
            created_at=now,
            updated_at=now,
        )
    )
