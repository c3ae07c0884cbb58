"""Testimonials and the contact form."""

from fastapi import APIRouter
from protean.utils.globals import current_domain

from storefront.api.schemas import ContactMessageResponse, ContactRequest, TestimonialResponse
from storefront.content.contact import ContactMessage, SubmitContactMessage
from storefront.content.testimonial import Testimonial

content_router = APIRouter(tags=["content"])


@content_router.get("/testimonials", response_model=list[TestimonialResponse])
async def list_testimonials() -> list[TestimonialResponse]:
    testimonials = current_domain.repository_for(Testimonial).all_testimonials()
    return [TestimonialResponse.from_testimonial(t) for t in testimonials]


@content_router.post("/contact", status_code=201, response_model=ContactMessageResponse)
async def submit_contact(body: ContactRequest) -> ContactMessageResponse:
    message_id = current_domain.process(SubmitContactMessage(**body.model_dump()), asynchronous=False)
    contact = current_domain.repository_for(ContactMessage).get(message_id)
    return ContactMessageResponse.from_message(contact)
