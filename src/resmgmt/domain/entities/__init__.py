"""Domain entities."""

from resmgmt.domain.entities.organization import Organization
from resmgmt.domain.entities.template import Template
from resmgmt.domain.entities.user import User

__all__ = [
    "Organization",
    "Template",
    "User",
]
