"""Lookups on the User aggregate by its natural keys."""

from storefront.account.user import User
from storefront.domain import storefront


@storefront.repository(part_of=User)
class UserRepository:
    def find_by_username(self, username: str) -> User | None:
        return self._dao.query.filter(username=username).all().first

    def find_by_email(self, email: str) -> User | None:
        return self._dao.query.filter(email=email.strip().lower()).all().first
