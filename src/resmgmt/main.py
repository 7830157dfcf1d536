"""Application entry point and composition root."""

import logging
from datetime import timedelta

from resmgmt import __version__
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
from resmgmt.config import Settings, get_settings
from resmgmt.infrastructure.auth.jwt_token_service import JwtTokenService
from resmgmt.infrastructure.auth.keycloak_provider import KeycloakProvider
from resmgmt.infrastructure.permission.permission_checker import ClaimPermissionChecker
from resmgmt.infrastructure.persistence.postgres.connection import create_pool
from resmgmt.infrastructure.persistence.postgres.unit_of_work import (
    create_uow_factory,
)
from resmgmt.interfaces.api.app import ApiResources, create_app
from resmgmt.interfaces.api.middleware.auth import AuthMiddleware
from resmgmt.interfaces.api.middleware.pool_lifespan import PoolLifespanMiddleware
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

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_resmgmt_app():
    """Composition root - build Falcon app with all dependencies."""
    settings = get_settings()
    configure_logging(settings)

    pool = create_pool(
        settings.database_url,
        min_size=settings.db_pool_min_size,
        max_size=settings.db_pool_max_size,
    )
    uow_factory = create_uow_factory(pool)

    token_service = JwtTokenService(
        secret=settings.jwt_secret,
        issuer=settings.jwt_issuer,
        ttl=timedelta(hours=settings.token_ttl_hours),
        algorithm=settings.jwt_algorithm,
    )
    keycloak = KeycloakProvider(
        server_url=settings.keycloak_url,
        realm=settings.keycloak_realm,
        client_id=settings.keycloak_client_id,
        client_secret=settings.keycloak_client_secret,
    )
    permission_checker = ClaimPermissionChecker()

    login = LoginUseCase(
        unit_of_work_factory=uow_factory,
        identity_provider=keycloak,
        token_service=token_service,
    )
    assign_role = AssignRoleUseCase(
        unit_of_work_factory=uow_factory,
        permission_checker=permission_checker,
    )
    create_template = CreateTemplateUseCase(
        unit_of_work_factory=uow_factory,
        permission_checker=permission_checker,
    )
    publish_version = PublishTemplateVersionUseCase(
        unit_of_work_factory=uow_factory,
        permission_checker=permission_checker,
    )
    duplicate_template = DuplicateTemplateUseCase(
        unit_of_work_factory=uow_factory,
        permission_checker=permission_checker,
    )
    delete_template = DeleteTemplateUseCase(
        unit_of_work_factory=uow_factory,
        permission_checker=permission_checker,
    )

    resources = ApiResources(
        health=HealthResource(pool),
        login=LoginResource(login, settings.oauth_redirect_uri),
        me=MeResource(),
        user_role=UserRoleResource(assign_role),
        templates=TemplatesResource(create_template),
        template_categories=TemplateCategoriesResource(
            ListTemplateCategoriesUseCase(unit_of_work_factory=uow_factory)
        ),
        template=TemplateResource(
            GetLatestTemplateUseCase(unit_of_work_factory=uow_factory), delete_template
        ),
        template_versions=TemplateVersionsResource(
            ListTemplateVersionsUseCase(unit_of_work_factory=uow_factory), publish_version
        ),
        template_version=TemplateVersionResource(
            GetTemplateVersionUseCase(unit_of_work_factory=uow_factory)
        ),
        template_duplicate=TemplateDuplicateResource(duplicate_template),
    )
    app = create_app(
        resources,
        middleware=[
            PoolLifespanMiddleware(pool),
            AuthMiddleware(token_service),
        ],
    )
    logger.info("resmgmt v%s configured (%s)", __version__, settings.environment)
    return app


def run_server() -> None:
    """Run uvicorn server."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        create_resmgmt_app(),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


def main() -> None:
    """CLI entry point."""
    run_server()


if __name__ == "__main__":
    main()
