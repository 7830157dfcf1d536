"""Permission checker implementation - checks against the claim's resolved permissions."""

from resmgmt.domain.services.permission_resolver import is_authorized
from resmgmt.domain.value_objects import Capability, IdentityClaim


class ClaimPermissionChecker:
    """Checks capabilities against the permissions embedded in a verified claim.

    Permissions were resolved from role defaults and override when the token
    was issued; there is no role bypass.
    """

    def check(self, claim: IdentityClaim, capability: Capability) -> bool:
        return is_authorized(claim.permissions, capability)
