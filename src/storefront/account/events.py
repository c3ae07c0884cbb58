"""Domain events for the User and AuthSession aggregates."""

from protean.fields import DateTime, Identifier, String

from storefront.domain import storefront


@storefront.event(part_of="User")
class UserRegistered:
    """A new shopper account was created."""

    __version__ = 1

    user_id = Identifier(required=True)
    username = String(required=True, max_length=50)
    email = String(required=True, max_length=254)
    registered_at = DateTime(required=True)


@storefront.event(part_of="User")
class ProfileUpdated:
    """Profile or billing details of a user changed."""

    __version__ = 1

    user_id = Identifier(required=True)
    updated_at = DateTime(required=True)


@storefront.event(part_of="AuthSession")
class SessionStarted:
    __version__ = 1

    session_id = Identifier(required=True)
    user_id = Identifier(required=True)
    expires_at = DateTime(required=True)
