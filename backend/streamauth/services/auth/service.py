# streamauth/services/auth/service.py
from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timedelta

from streamauth.services._shared.base import BaseService
from streamauth.services._shared.dto import IssuedToken
from streamauth.services._shared.errors import (
    AlreadyRevoked,
    InvalidCredentials,
    MalformedToken,
    MissingOrMalformedHeader,
    TokenExpired,
    TokenRevoked,
)
from streamauth.services._shared.ports import (
    CredentialRepository,
    RevocationStore,
    TokenCodec,
)
from streamauth.services.auth.principal import (
    DelegatedPrincipal,
    LocalPrincipal,
    Principal,
    principal_from_token,
)
from streamauth.services.credentials import CredentialVerifier

DEFAULT_TOKEN_TTL = timedelta(hours=1)


class AuthenticationGateway(BaseService):
    """
    Token lifecycle service (login / verify / logout).

    Both login paths converge on :meth:`issue`, so every token has the same
    claims and the same TTL whatever produced it. Verification layers the
    codec's signature and expiry checks with the revocation store.

    Token states
    ------------
    ``Issued`` → ``Active`` → ``Expired`` (now ≥ exp, detected lazily) or
    ``Revoked`` (logout). Neither terminal state leads back to ``Active``;
    once a token has expired it is reported as expired even if it was also
    revoked.
    """

    def __init__(
        self,
        *,
        codec: TokenCodec,
        revocations: RevocationStore,
        credentials: CredentialRepository,
        verifier: CredentialVerifier | None = None,
        token_ttl: timedelta = DEFAULT_TOKEN_TTL,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """
        Initialize the gateway with its collaborators.

        :param codec: Signs and parses tokens.
        :param revocations: Denylist consulted on every verify; owned by this
            gateway for the lifetime of the process.
        :param credentials: Read-only lookup of local credential records.
        :param verifier: Password hash comparison.
        :param token_ttl: Lifetime shared by local and delegated tokens.
        :param clock: Source of "now" for expiry decisions.
        """
        super().__init__(clock=clock)
        if token_ttl <= timedelta(0):
            raise ValueError("Token TTL must be positive.")
        self.codec = codec
        self.revocations = revocations
        self.credentials = credentials
        self.verifier = verifier or CredentialVerifier()
        self.token_ttl = token_ttl

    # ------------------------------------------------------------------ #
    # Issuance
    # ------------------------------------------------------------------ #

    def issue(self, principal: Principal) -> IssuedToken:
        """Sign a token for ``principal`` with the gateway-wide TTL."""
        issued = self.codec.issue(principal.subject(), self.token_ttl, origin=principal.origin())
        self.log.info(
            "auth.token.issued",
            extra={"subject": issued.subject, "origin": issued.origin.value, "jti": issued.jti},
        )
        return issued

    def login_local(self, email: str, password: str) -> IssuedToken:
        """
        Authenticate email/password credentials and issue a token.

        :raises InvalidCredentials: Unknown email or wrong password. Both
            cases look identical to the caller.
        """
        record = self.credentials.find_credentials(email.strip().lower())
        if record is None or not self.verifier.matches(password, record.password_hash):
            self.log.warning("auth.login.rejected", extra={"reason": "invalid_credentials"})
            raise InvalidCredentials()
        return self.issue(LocalPrincipal(subject_id=str(record.subject)))

    def login_delegated(self, principal: DelegatedPrincipal) -> IssuedToken:
        """Issue a token for an identity the external provider already proved."""
        return self.issue(principal)

    # ------------------------------------------------------------------ #
    # Verification
    # ------------------------------------------------------------------ #

    def verify(self, token: str, now: datetime | None = None) -> Principal:
        """
        Resolve a presented token to its principal.

        :raises MalformedToken: Unparsable, or signed with another key
            (:class:`~streamauth.services._shared.errors.InvalidSignature`).
        :raises TokenExpired: Authentic but past its expiry.
        :raises TokenRevoked: Authentic, unexpired, and logged out.
        """
        at = now or self.now_utc()
        try:
            decoded = self.codec.parse(token)
        except MalformedToken as exc:
            self.log.info("auth.verify.rejected", extra={"reason": type(exc).__name__})
            raise
        if self.codec.is_expired(decoded, at):
            self.log.info("auth.verify.rejected", extra={"reason": "expired", "jti": decoded.jti})
            raise TokenExpired()
        if self.revocations.is_revoked(decoded.jti, at):
            self.log.info("auth.verify.rejected", extra={"reason": "revoked", "jti": decoded.jti})
            raise TokenRevoked()
        return principal_from_token(decoded)

    # ------------------------------------------------------------------ #
    # Logout
    # ------------------------------------------------------------------ #

    def logout(self, token: str, now: datetime | None = None) -> None:
        """
        Revoke ``token`` until its own expiry.

        An already-expired token is accepted without creating an entry: it
        can no longer be used, so a denylist entry would be dropped at once.

        :raises MissingOrMalformedHeader: The token does not parse.
        :raises AlreadyRevoked: A previous logout already revoked it.
        """
        at = now or self.now_utc()
        try:
            decoded = self.codec.parse(token)
        except MalformedToken:
            raise MissingOrMalformedHeader() from None
        if self.codec.is_expired(decoded, at):
            self.log.info("auth.logout.expired", extra={"subject": decoded.subject, "jti": decoded.jti})
            return
        if not self.revocations.revoke(decoded.jti, decoded.expires_at):
            raise AlreadyRevoked()
        self.log.info("auth.logout", extra={"subject": decoded.subject, "jti": decoded.jti})
