from book_finder.config import Settings, get_settings
from book_finder.models import BookCard, CatalogRecord

UNKNOWN_AUTHOR = "Unknown Author"


def cover_url(record: CatalogRecord, settings: Settings | None = None) -> str:
    settings = settings or get_settings()
    if record.cover_i is None:
        return settings.placeholder_cover_url
    return f"{settings.covers_base_url.rstrip('/')}/{record.cover_i}-L.jpg"


def format_authors(record: CatalogRecord) -> str:
    if not record.author_name:
        return UNKNOWN_AUTHOR
    return ", ".join(record.author_name)


def detail_url(record: CatalogRecord, settings: Settings | None = None) -> str:
    # Catalog keys carry their own leading slash, e.g. "/works/OL45804W".
    settings = settings or get_settings()
    return f"{settings.openlibrary_base_url.rstrip('/')}{record.key}"


def build_card(record: CatalogRecord, settings: Settings | None = None) -> BookCard:
    settings = settings or get_settings()
    return BookCard(
        key=record.key,
        title=record.title,
        authors=format_authors(record),
        cover_url=cover_url(record, settings),
        placeholder_url=settings.placeholder_cover_url,
        detail_url=detail_url(record, settings),
    )
