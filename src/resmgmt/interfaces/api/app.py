"""Falcon ASGI application."""

from dataclasses import dataclass

import falcon.asgi
from falcon.asgi import App

from resmgmt.domain.exceptions import ResMgmtError
from resmgmt.interfaces.api.errors import handle_domain_error, handle_unexpected_error
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


@dataclass
class ApiResources:
    """Resource instances wired by the composition root."""

    health: HealthResource
    login: LoginResource
    me: MeResource
    user_role: UserRoleResource
    templates: TemplatesResource
    template_categories: TemplateCategoriesResource
    template: TemplateResource
    template_versions: TemplateVersionsResource
    template_version: TemplateVersionResource
    template_duplicate: TemplateDuplicateResource


def create_app(resources: ApiResources, middleware: list | None = None) -> App:
    """Create Falcon ASGI app with routes and error handlers."""
    app = falcon.asgi.App(middleware=middleware or [])
    app.add_error_handler(Exception, handle_unexpected_error)
    app.add_error_handler(ResMgmtError, handle_domain_error)

    app.add_route("/v1/health", resources.health)
    app.add_route("/v1/health/ready", resources.health, suffix="ready")
    app.add_route("/v1/auth/login", resources.login)
    app.add_route("/v1/auth/me", resources.me)
    app.add_route("/v1/users/{user_id:uuid}/role", resources.user_role)
    app.add_route("/v1/templates", resources.templates)
    app.add_route("/v1/templates/categories", resources.template_categories)
    app.add_route("/v1/templates/{template_id:uuid}", resources.template)
    app.add_route("/v1/templates/{template_id:uuid}/versions", resources.template_versions)
    app.add_route(
        "/v1/templates/{template_id:uuid}/versions/{version:int(min=1)}",
        resources.template_version,
    )
    app.add_route("/v1/templates/{template_id:uuid}/duplicate", resources.template_duplicate)
    return app
