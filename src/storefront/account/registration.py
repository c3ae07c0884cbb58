"""User registration — command and handler."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Boolean, String
from protean.utils.globals import current_domain

from storefront.account.user import User
from storefront.domain import logger, storefront


@storefront.command(part_of="User")
class RegisterUser:
    """Create a shopper account."""

    username: String(required=True, max_length=50)
    password: String(required=True, max_length=128)
    email: String(required=True, max_length=254)
    name: String(required=True, max_length=150)
    address: String(max_length=500)
    phone: String(max_length=30)
    vat_number: String(max_length=30)
    is_company: Boolean(default=False)
    company_name: String(max_length=200)


@storefront.command_handler(part_of=User)
class RegisterUserHandler:
    @handle(RegisterUser)
    def register_user(self, command):
        repo = current_domain.repository_for(User)

        if repo.find_by_username(command.username):
            raise ValidationError({"username": ["Username already exists"]})
        if repo.find_by_email(command.email):
            raise ValidationError({"email": ["Email already registered"]})

        user = User.register(
            username=command.username,
            password=command.password,
            email=command.email,
            name=command.name,
            address=command.address,
            phone=command.phone,
            vat_number=command.vat_number,
            is_company=command.is_company,
            company_name=command.company_name,
        )
        repo.add(user)

        logger.info("user_registered", user_id=str(user.id), username=user.username)
        return str(user.id)
