"""Identity provider port - authorization code exchange."""

from dataclasses import dataclass
from typing import Protocol


@dataclass
class ProviderIdentity:
    """Identity asserted by an external provider."""

    subject: str
    email: str
    name: str = ""


class IdentityProvider(Protocol):
    """Port for exchanging an authorization code for a provider identity."""

    async def exchange_code(self, code: str, redirect_uri: str) -> ProviderIdentity: ...
