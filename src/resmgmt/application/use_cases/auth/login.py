"""Login use case."""

import logging
from datetime import UTC, datetime
from uuid import UUID, uuid4

from resmgmt.application.dto.auth_dto import AuthResult
from resmgmt.application.ports import IdentityProvider, TokenService
from resmgmt.domain.entities import User
from resmgmt.domain.exceptions import IdentityExchangeFailed, NotFound
from resmgmt.domain.services.permission_resolver import effective_permissions
from resmgmt.domain.services.role_authority import DEFAULT_ROLE

logger = logging.getLogger(__name__)


class LoginUseCase:
    """Exchange an authorization code for a signed identity token.

    Unknown users are provisioned as inspectors when the caller names an
    existing organization to join.
    """

    def __init__(
        self,
        unit_of_work_factory: type,
        identity_provider: IdentityProvider,
        token_service: TokenService,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._identity_provider = identity_provider
        self._token_service = token_service

    async def execute(
        self,
        code: str,
        redirect_uri: str,
        organization_id: UUID | None = None,
    ) -> AuthResult:
        identity = await self._identity_provider.exchange_code(code, redirect_uri)
        email = identity.email.strip().lower()
        if not email:
            raise IdentityExchangeFailed("Identity provider returned no email")

        now = datetime.now(UTC)
        async with self._uow_factory() as uow:
            user = await uow.users.get_by_email(email)
            if user is None:
                user = await self._provision(uow, identity.name or email, email, organization_id, now)

        permissions = effective_permissions(user.role, user.permissions_override)
        token = self._token_service.issue(
            user_id=user.id,
            organization_id=user.organization_id,
            email=user.email,
            role=user.role,
            permissions=permissions,
            now=now,
        )
        claim = self._token_service.verify(token, now)
        logger.info("User %s logged in to organization %s", user.id, user.organization_id)
        return AuthResult(token=token, claim=claim, user=user)

    async def _provision(
        self,
        uow,
        name: str,
        email: str,
        organization_id: UUID | None,
        now: datetime,
    ) -> User:
        if organization_id is None:
            raise NotFound("User", email)
        organization = await uow.organizations.get_by_id(organization_id)
        if organization is None:
            raise NotFound("Organization", str(organization_id))

        user = User(
            id=uuid4(),
            organization_id=organization.id,
            email=email,
            name=name,
            role=DEFAULT_ROLE,
            created_at=now,
            updated_at=now,
        )
        await uow.users.create(user)
        logger.info("Provisioned user %s in organization %s", user.id, organization.id)
        return user
