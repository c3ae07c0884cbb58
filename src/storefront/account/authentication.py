"""Login and logout — commands and handlers."""

from protean import handle
from protean.fields import String
from protean.utils.globals import current_domain

from storefront.account.session import AuthSession
from storefront.account.user import User
from storefront.domain import logger, storefront
from storefront.shared.errors import Unauthorized


@storefront.command(part_of="AuthSession")
class LogIn:
    username = String(required=True, max_length=50)
    password = String(required=True, max_length=128)


@storefront.command(part_of="AuthSession")
class LogOut:
    token = String(required=True, max_length=255)


@storefront.command_handler(part_of=AuthSession)
class AuthenticationHandler:
    @handle(LogIn)
    def log_in(self, command):
        """Verify credentials and open a session. Returns the raw bearer token."""
        user = current_domain.repository_for(User).find_by_username(command.username)
        if user is None or not user.check_password(command.password):
            logger.info("login_rejected", username=command.username)
            raise Unauthorized("Invalid username or password")

        session, token = AuthSession.start(user_id=str(user.id))
        current_domain.repository_for(AuthSession).add(session)
        return token

    @handle(LogOut)
    def log_out(self, command):
        repo = current_domain.repository_for(AuthSession)
        session = repo.find_by_token(command.token)
        if session is not None:
            repo.revoke(session)
