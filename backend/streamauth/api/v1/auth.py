"""Local account endpoints: signup, login, logout and identity lookup."""

from __future__ import annotations

from flask import Blueprint, current_app, request

from streamauth.api.deps import (
    current_principal,
    json_response,
    require_auth,
    timing,
)
from streamauth.api.transport import get_transport
from streamauth.core.errors import NotFound
from streamauth.core.extensions import limiter
from streamauth.core.security import get_gateway
from streamauth.repositories.user import UserRepository
from streamauth.schemas import (
    LoginSchema,
    PrincipalSchema,
    SignupSchema,
    TokenResponseSchema,
    UserSchema,
)
from streamauth.services import AuthOrigin
from streamauth.services.registration.dto import SignupIn
from streamauth.services.registration.service import SignupService

bp = Blueprint("user", __name__)

signup_schema = SignupSchema()
login_schema = LoginSchema()
user_schema = UserSchema()
token_schema = TokenResponseSchema()
principal_schema = PrincipalSchema()


def _login_rate_limit() -> str:
    return str(current_app.config.get("AUTH_LOGIN_RATE_LIMIT", "5 per minute"))


@bp.post("/signup")
@timing
def signup():
    """Create a local account and return its public representation."""

    data = signup_schema.load(request.get_json(silent=True) or {})
    user = SignupService(verifier=get_gateway().verifier).signup(SignupIn(**data))
    body = {"data": user_schema.dump(user), "message": "User created successfully"}
    return json_response(body, status=201)


@bp.post("/login")
@limiter.limit(_login_rate_limit)
@timing
def login():
    """Authenticate credentials and issue a bearer token."""

    data = login_schema.load(request.get_json(silent=True) or {})
    issued = get_gateway().login_local(data["email"], data["password"])
    body = {"data": token_schema.dump(issued), "message": "Login successful"}
    return get_transport().deliver(json_response(body), issued)


@bp.post("/logout")
@timing
def logout():
    """Revoke the presented token until it would have expired anyway."""

    transport = get_transport()
    token = transport.extract(request)
    get_gateway().logout(token)
    return transport.clear(json_response({"message": "Logout successful"}))


@bp.route("/user-info", methods=["GET", "POST"])
@require_auth
@timing
def user_info():
    """Return the identity behind the presented token."""

    principal = current_principal()
    email = None
    if principal.origin() is AuthOrigin.LOCAL:
        user = UserRepository().get(int(principal.subject()))
        if user is None:
            raise NotFound("User not found")
        email = user.email
    payload = {
        "subject": principal.subject(),
        "origin": principal.origin().value,
        "email": email,
    }
    body = {"data": principal_schema.dump(payload), "message": "User info retrieved successfully"}
    return json_response(body)
