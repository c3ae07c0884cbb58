"""Customer testimonials shown on the storefront home page. Append-only."""

from protean.fields import Integer, String, Text

from storefront.domain import storefront


@storefront.aggregate
class Testimonial:
    name = String(required=True, max_length=150)
    initials = String(max_length=5)
    customer_since = String(max_length=10)
    content = Text(required=True)
    rating = Integer(required=True, min_value=1, max_value=5)


@storefront.repository(part_of=Testimonial)
class TestimonialRepository:
    def all_testimonials(self) -> list[Testimonial]:
        return self._dao.query.all().items
