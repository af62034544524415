import pytest

from book_finder.config import Settings
from book_finder.exceptions import CatalogUnavailableError
from book_finder.interfaces.book_search import BookSearchClient
from book_finder.models import CatalogRecord, SearchCategory


class MockBookSearchClient(BookSearchClient):
    def __init__(
        self,
        results: list[CatalogRecord] | None = None,
        error: Exception | None = None,
    ):
        self._results = results or []
        self._error = error
        self.calls: list[tuple[str, SearchCategory, int]] = []

    async def search(
        self, query: str, category: SearchCategory, limit: int = 24
    ) -> list[CatalogRecord]:
        self.calls.append((query, category, limit))
        if self._error:
            raise self._error
        return self._results


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def sample_records() -> list[CatalogRecord]:
    return [
        CatalogRecord(
            key="/works/OL45804W",
            title="Fantastic Mr Fox",
            author_name=["Roald Dahl"],
            cover_i=6498519,
        ),
        CatalogRecord(
            key="/works/OL27448W",
            title="The Lord of the Rings",
            author_name=["J.R.R. Tolkien"],
            cover_i=14625765,
        ),
        CatalogRecord(key="/works/OL1W", title="Untitled Pamphlet"),
    ]


@pytest.fixture
def unavailable_error() -> CatalogUnavailableError:
    return CatalogUnavailableError("Service Unavailable", status_code=503)
