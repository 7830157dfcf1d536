"""Organization scope guard - tenant isolation for entity access."""

import logging
from typing import Protocol, TypeVar
from uuid import UUID

from resmgmt.domain.exceptions import NotFound
from resmgmt.domain.value_objects import IdentityClaim

logger = logging.getLogger(__name__)


class _Scoped(Protocol):
    organization_id: UUID


T = TypeVar("T", bound=_Scoped)


class OrganizationScopeGuard:
    """Confines reads and writes to the organization carried by the caller's claim.

    A row that exists but belongs to another organization is reported exactly
    like a missing row, so callers cannot probe for other tenants' resources.
    """

    def scope_filter(self, claim: IdentityClaim) -> UUID:
        """Organization id every storage query must be conjoined with."""
        return claim.organization_id

    def confine(
        self,
        entity: T | None,
        claim: IdentityClaim,
        kind: str,
        identifier: object,
    ) -> T:
        """Return ``entity`` if it is inside the caller's scope, else raise NotFound."""
        if entity is None:
            raise NotFound(kind, str(identifier))
        if entity.organization_id != self.scope_filter(claim):
            logger.warning(
                "Cross-organization access to %s %s by user %s (org %s)",
                kind,
                identifier,
                claim.user_id,
                claim.organization_id,
            )
            raise NotFound(kind, str(identifier))
        return entity
