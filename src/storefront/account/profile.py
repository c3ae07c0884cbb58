"""Profile update — command and handler."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Boolean, Identifier, String
from protean.utils.globals import current_domain

from storefront.account.user import User
from storefront.domain import storefront


@storefront.command(part_of="User")
class UpdateProfile:
    """Change profile and billing details. Fields left empty are not touched."""

    user_id = Identifier(required=True)
    name = String(max_length=150)
    email = String(max_length=254)
    address = String(max_length=500)
    phone = String(max_length=30)
    vat_number = String(max_length=30)
    is_company = Boolean()
    company_name = String(max_length=200)


@storefront.command_handler(part_of=User)
class UpdateProfileHandler:
    @handle(UpdateProfile)
    def update_profile(self, command):
        repo = current_domain.repository_for(User)
        user = repo.get(command.user_id)

        changes = {
            field_name: getattr(command, field_name)
            for field_name in ("name", "email", "address", "phone", "vat_number", "is_company", "company_name")
            if getattr(command, field_name) is not None
        }

        if "email" in changes:
            owner = repo.find_by_email(changes["email"])
            if owner is not None and str(owner.id) != str(user.id):
                raise ValidationError({"email": ["Email already registered"]})

        user.update_profile(**changes)
        repo.add(user)
