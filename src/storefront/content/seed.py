"""Demo catalogue: four categories, six products and three testimonials."""

from protean.utils.globals import current_domain

from storefront.catalogue.category import Category
from storefront.catalogue.management import CreateCategory, CreateProduct
from storefront.content.testimonial import Testimonial
from storefront.domain import logger

_IMAGE = "https://images.unsplash.com/photo-{}?auto=format&fit=crop&w=600&h=400"

CATEGORIES = [
    {
        "name": "Anéis",
        "slug": "aneis",
        "description": "Anéis elegantes para qualquer ocasião",
        "image": _IMAGE.format("1605100804763-247f67b3557e"),
    },
    {
        "name": "Relógios",
        "slug": "relogios",
        "description": "Relógios de luxo com design moderno",
        "image": _IMAGE.format("1587836374828-4dbafa94cf0e"),
    },
    {
        "name": "Colares",
        "slug": "colares",
        "description": "Colares elegantes para ocasiões especiais",
        "image": _IMAGE.format("1599643478518-a784e5dc4c8f"),
    },
    {
        "name": "Pulseiras",
        "slug": "pulseiras",
        "description": "Pulseiras finas e elegantes",
        "image": _IMAGE.format("1611652022419-a9419f74343d"),
    },
]

# Products reference their category by slug
PRODUCTS = [
    {
        "name": "Relógio Cronógrafo de Luxo",
        "slug": "relogio-cronografo-de-luxo",
        "description": "Relógio de luxo com design moderno e materiais de alta qualidade.",
        "price": "999.99",
        "image": _IMAGE.format("1522312346375-d1a52e2b99b3"),
        "category": "relogios",
        "is_featured": True,
        "is_new": True,
        "rating": "4.5",
    },
    {
        "name": "Anel de Diamante Solitário",
        "slug": "anel-de-diamante-solitario",
        "description": "Deslumbrante anel de diamante com acabamento em ouro branco 18k.",
        "price": "1299.99",
        "image": _IMAGE.format("1605100804763-247f67b3557e"),
        "category": "aneis",
        "is_featured": True,
        "rating": "5.0",
    },
    {
        "name": "Colar de Pérolas Naturais",
        "slug": "colar-de-perolas-naturais",
        "description": "Elegante colar de pérolas naturais com fecho em prata esterlina.",
        "price": "799.99",
        "original_price": "899.99",
        "image": _IMAGE.format("1515562141207-7a88fb7ce338"),
        "category": "colares",
        "is_featured": True,
        "rating": "4.0",
    },
    {
        "name": "Pulseira de Ouro 18k",
        "slug": "pulseira-de-ouro-18k",
        "description": "Elegante pulseira de ouro 18k com design contemporâneo.",
        "price": "599.99",
        "image": _IMAGE.format("1611652022419-a9419f74343d"),
        "category": "pulseiras",
        "is_new": True,
        "rating": "4.8",
    },
    {
        "name": "Relógio de Ouro Automático",
        "slug": "relogio-de-ouro-automatico",
        "description": "Relógio automático de ouro com funcionalidades avançadas.",
        "price": "1499.99",
        "image": _IMAGE.format("1587836374828-4dbafa94cf0e"),
        "category": "relogios",
        "rating": "4.9",
    },
    {
        "name": "Anel de Esmeralda",
        "slug": "anel-de-esmeralda",
        "description": "Anel exclusivo com esmeralda natural e diamantes.",
        "price": "1099.99",
        "image": _IMAGE.format("1605100804763-247f67b3557e"),
        "category": "aneis",
        "is_new": True,
        "rating": "5.0",
    },
]

TESTIMONIALS = [
    {
        "name": "Miguel Almeida",
        "initials": "MA",
        "customer_since": "2022",
        "content": (
            "O anel de noivado que comprei superou todas as minhas expectativas. "
            "A qualidade é extraordinária e o atendimento foi impecável."
        ),
        "rating": 5,
    },
    {
        "name": "Sofia Fernandes",
        "initials": "SF",
        "customer_since": "2019",
        "content": (
            "As joias são verdadeiras obras de arte. Cada peça que possuo é um tesouro "
            "que pretendo passar para as próximas gerações."
        ),
        "rating": 5,
    },
    {
        "name": "Ricardo Costa",
        "initials": "RC",
        "customer_since": "2021",
        "content": (
            "Comprei um relógio para o meu pai e ele adorou. A qualidade é excepcional e o "
            "atendimento personalizado fez toda a diferença na escolha da peça perfeita."
        ),
        "rating": 4,
    },
]


def seed_catalogue() -> dict:
    """Load the demo data into an empty store. Existing category slugs are skipped.

    Must run inside a domain context. Returns counts of what was created.
    """
    categories = current_domain.repository_for(Category)
    created = {"categories": 0, "products": 0, "testimonials": 0}

    category_ids = {}
    for data in CATEGORIES:
        existing = categories.find_by_slug(data["slug"])
        if existing:
            category_ids[data["slug"]] = str(existing.id)
            continue
        category_ids[data["slug"]] = current_domain.process(CreateCategory(**data), asynchronous=False)
        created["categories"] += 1

    if created["categories"] == 0:
        logger.info("seed_skipped", reason="catalogue already present")
        return created

    for data in PRODUCTS:
        attributes = {key: value for key, value in data.items() if key != "category"}
        current_domain.process(
            CreateProduct(category_id=category_ids[data["category"]], **attributes),
            asynchronous=False,
        )
        created["products"] += 1

    testimonials = current_domain.repository_for(Testimonial)
    for data in TESTIMONIALS:
        testimonials.add(Testimonial(**data))
        created["testimonials"] += 1

    logger.info("catalogue_seeded", **created)
    return created
