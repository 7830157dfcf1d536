"""Repository ports."""

from resmgmt.application.ports.repositories.organization_repository import (
    OrganizationRepository,
)
from resmgmt.application.ports.repositories.template_repository import (
    TemplateRepository,
)
from resmgmt.application.ports.repositories.user_repository import UserRepository

__all__ = [
    "OrganizationRepository",
    "TemplateRepository",
    "UserRepository",
]
