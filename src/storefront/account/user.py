"""User aggregate — shopper account with profile and billing details."""

import re
from datetime import UTC, datetime

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, String

from storefront.account.events import ProfileUpdated, UserRegistered
from storefront.account.passwords import hash_password, verify_password
from storefront.domain import storefront

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

# Sentinel for distinguishing "not provided" from None in partial updates
_UNSET = object()

_PROFILE_FIELDS = ("name", "email", "address", "phone", "vat_number", "is_company", "company_name")


@storefront.aggregate
class User:
    """A registered shopper.

    Users are never hard-deleted. The VAT number (NIF) and company details are
    forwarded to the invoicing system when an order is invoiced.
    """

    username: String(required=True, max_length=50, unique=True)
    email: String(required=True, max_length=254, unique=True)
    password_hash: String(required=True, max_length=255)
    name: String(required=True, max_length=150)
    address: String(max_length=500)
    phone: String(max_length=30)
    vat_number: String(max_length=30)
    is_company: Boolean(default=False)
    company_name: String(max_length=200)
    created_at: DateTime(default=lambda: datetime.now(UTC))

    @invariant.post
    def email_must_be_well_formed(self):
        if self.email and not _EMAIL_PATTERN.match(self.email):
            raise ValidationError({"email": [f"Invalid email address: {self.email}"]})

    @invariant.post
    def company_accounts_need_a_company_name(self):
        if self.is_company and not self.company_name:
            raise ValidationError({"company_name": ["Company accounts must provide a company name"]})

    @classmethod
    def register(cls, username, password, email, name, address=None, phone=None, vat_number=None,
                 is_company=False, company_name=None):
        if not password or len(password) < 6:
            raise ValidationError({"password": ["Password must be at least 6 characters"]})

        now = datetime.now(UTC)
        user = cls(
            username=username,
            email=email.strip().lower(),
            password_hash=hash_password(password),
            name=name,
            address=address,
            phone=phone,
            vat_number=vat_number,
            is_company=bool(is_company),
            company_name=company_name,
            created_at=now,
        )
        user.raise_(
            UserRegistered(
                user_id=str(user.id),
                username=user.username,
                email=user.email,
                registered_at=now,
            )
        )
        return user

    def check_password(self, password: str) -> bool:
        return verify_password(password, self.password_hash)

    def display_name(self) -> str:
        return self.name or self.username

    def update_profile(self, **changes):
        """Apply a partial profile update; keys left out are not touched."""
        with atomic_change(self):
            for field_name in _PROFILE_FIELDS:
                value = changes.get(field_name, _UNSET)
                if value is _UNSET:
                    continue
                if field_name == "email" and value:
                    value = value.strip().lower()
                setattr(self, field_name, value)

        self.raise_(ProfileUpdated(user_id=str(self.id), updated_at=datetime.now(UTC)))
