"""Contact form submissions."""

import re
from datetime import UTC, datetime

from protean import handle, invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Identifier, String, Text
from protean.utils.globals import current_domain

from storefront.domain import logger, storefront

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


@storefront.event(part_of="ContactMessage")
class ContactMessageReceived:
    __version__ = 1

    message_id = Identifier(required=True)
    email = String(required=True, max_length=254)
    subject = String(required=True, max_length=200)
    received_at = DateTime(required=True)


@storefront.aggregate
class ContactMessage:
    name = String(required=True, max_length=150)
    email = String(required=True, max_length=254)
    subject = String(required=True, max_length=200)
    message = Text(required=True)
    created_at = DateTime(default=lambda: datetime.now(UTC))

    @invariant.post
    def email_must_be_well_formed(self):
        if self.email and not _EMAIL_PATTERN.match(self.email):
            raise ValidationError({"email": [f"Invalid email address: {self.email}"]})

    @classmethod
    def receive(cls, name, email, subject, message):
        now = datetime.now(UTC)
        contact = cls(name=name, email=email.strip(), subject=subject, message=message, created_at=now)
        contact.raise_(
            ContactMessageReceived(
                message_id=str(contact.id),
                email=contact.email,
                subject=contact.subject,
                received_at=now,
            )
        )
        return contact


@storefront.command(part_of="ContactMessage")
class SubmitContactMessage:
    name = String(required=True, max_length=150)
    email = String(required=True, max_length=254)
    subject = String(required=True, max_length=200)
    message = Text(required=True)


@storefront.command_handler(part_of=ContactMessage)
class ContactMessageHandler:
    @handle(SubmitContactMessage)
    def submit(self, command):
        contact = ContactMessage.receive(
            name=command.name,
            email=command.email,
            subject=command.subject,
            message=command.message,
        )
        current_domain.repository_for(ContactMessage).add(contact)
        logger.info("contact_message_received", message_id=str(contact.id), subject=contact.subject)
        return str(contact.id)
