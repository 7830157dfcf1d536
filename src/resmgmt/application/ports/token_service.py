"""Token service port - signed identity claims."""

from datetime import datetime
from typing import Protocol
from uuid import UUID

from resmgmt.domain.value_objects import CapabilitySet, IdentityClaim, Role


class TokenService(Protocol):
    """Port for issuing and verifying identity tokens."""

    def issue(
        self,
        user_id: UUID,
        organization_id: UUID,
        email: str,
        role: Role,
        permissions: CapabilitySet,
        now: datetime,
    ) -> str: ...

    def verify(self, token: str, now: datetime) -> IdentityClaim: ...
