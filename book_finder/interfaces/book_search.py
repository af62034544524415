from abc import ABC, abstractmethod
from urllib.parse import quote

from book_finder.models import CatalogRecord, SearchCategory


class BookSearchClient(ABC):
    @abstractmethod
    async def search(
        self, query: str, category: SearchCategory, limit: int = 24
    ) -> list[CatalogRecord]:
        ...

    @staticmethod
    def build_query_string(query: str, category: SearchCategory, limit: int) -> str:
        # The category value doubles as the upstream field name.
        return f"{category.value}={quote(query, safe='')}&limit={limit}"
