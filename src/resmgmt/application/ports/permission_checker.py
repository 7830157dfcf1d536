"""Permission checker port - capability authorization."""

from typing import Protocol

from resmgmt.domain.value_objects import Capability, IdentityClaim


class PermissionChecker(Protocol):
    """Port for checking a caller's capability."""

    def check(self, claim: IdentityClaim, capability: Capability) -> bool: ...
