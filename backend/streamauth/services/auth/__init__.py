"""Token lifecycle: issuance, verification and revocation."""

from .principal import DelegatedPrincipal, LocalPrincipal, Principal, principal_from_token
from .service import AuthenticationGateway
from .sweeper import RevocationSweeper

__all__ = [
    "AuthenticationGateway",
    "DelegatedPrincipal",
    "LocalPrincipal",
    "Principal",
    "RevocationSweeper",
    "principal_from_token",
]
