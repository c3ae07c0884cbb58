"""Category aggregate — static reference data grouping products."""

import re

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import String, Text

from storefront.domain import storefront

_SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


def validate_slug(slug: str) -> None:
    if slug and not _SLUG_PATTERN.match(slug):
        raise ValidationError(
            {"slug": ["Slug must contain only lowercase alphanumeric characters separated by single hyphens"]}
        )


@storefront.aggregate
class Category:
    name: String(required=True, max_length=100)
    slug: String(required=True, max_length=120, unique=True)
    description: Text()
    image: String(max_length=500)

    @invariant.post
    def slug_must_be_url_safe(self):
        validate_slug(self.slug)


@storefront.repository(part_of=Category)
class CategoryRepository:
    def find_by_slug(self, slug: str) -> Category | None:
        return self._dao.query.filter(slug=slug).all().first

    def all_categories(self) -> list[Category]:
        return self._dao.query.order_by("name").all().items
