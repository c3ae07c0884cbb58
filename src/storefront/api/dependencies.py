"""Request-scoped dependencies shared by the routers."""

from fastapi import Header
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront.account.session import AuthSession
from storefront.account.user import User
from storefront.shared.errors import Unauthorized


def bearer_token(authorization: str | None) -> str | None:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


async def current_token(authorization: str | None = Header(default=None)) -> str:
    token = bearer_token(authorization)
    if token is None:
        raise Unauthorized("Authentication required")
    return token


async def current_user(authorization: str | None = Header(default=None)) -> User:
    """Resolve the bearer token to its user. Missing, unknown or expired tokens are 401."""
    token = bearer_token(authorization)
    if token is None:
        raise Unauthorized("Authentication required")

    session = current_domain.repository_for(AuthSession).find_by_token(token)
    if session is None or session.is_expired():
        raise Unauthorized("Session expired or invalid")

    try:
        return current_domain.repository_for(User).get(session.user_id)
    except ObjectNotFoundError:
        raise Unauthorized("Session expired or invalid") from None
