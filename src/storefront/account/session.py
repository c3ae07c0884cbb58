"""AuthSession aggregate — bearer token sessions for signed-in users.

Only a SHA-256 digest of the token is stored; the raw token is handed to the
client once, at login.
"""

import hashlib
import secrets
from datetime import UTC, datetime, timedelta

from protean.fields import DateTime, Identifier, String

from storefront.account.events import SessionStarted
from storefront.config import session_ttl_hours
from storefront.domain import storefront


def digest_token(token: str) -> str:
    return hashlib.sha256(token.encode("utf-8")).hexdigest()


@storefront.aggregate
class AuthSession:
    user_id = Identifier(required=True)
    token_digest = String(required=True, max_length=64, unique=True)
    created_at = DateTime()
    expires_at = DateTime(required=True)

    @classmethod
    def start(cls, user_id):
        """Open a session and return it with the raw token."""
        token = secrets.token_urlsafe(32)
        now = datetime.now(UTC)
        session = cls(
            user_id=user_id,
            token_digest=digest_token(token),
            created_at=now,
            expires_at=now + timedelta(hours=session_ttl_hours()),
        )
        session.raise_(
            SessionStarted(
                session_id=str(session.id),
                user_id=str(user_id),
                expires_at=session.expires_at,
            )
        )
        return session, token

    def is_expired(self, now=None) -> bool:
        now = now or datetime.now(UTC)
        expires_at = self.expires_at
        if expires_at.tzinfo is None:
            expires_at = expires_at.replace(tzinfo=UTC)
        return now >= expires_at


@storefront.repository(part_of=AuthSession)
class AuthSessionRepository:
    def find_by_token(self, token: str) -> AuthSession | None:
        if not token:
            return None
        return self._dao.query.filter(token_digest=digest_token(token)).all().first

    def revoke(self, session: AuthSession) -> None:
        self._dao.delete(session)
