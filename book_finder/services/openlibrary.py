import logging

import httpx
from pydantic import ValidationError

from book_finder.config import Settings, get_settings
from book_finder.exceptions import CatalogUnavailableError
from book_finder.interfaces.book_search import BookSearchClient
from book_finder.models import CatalogRecord, SearchCategory

logger = logging.getLogger(__name__)


class OpenLibraryClient(BookSearchClient):
    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._client = client
        self._settings = settings or get_settings()

    def search_url(self, query: str, category: SearchCategory, limit: int) -> str:
        base = self._settings.openlibrary_base_url.rstrip("/")
        return f"{base}/search.json?{self.build_query_string(query, category, limit)}"

    async def search(
        self, query: str, category: SearchCategory, limit: int = 24
    ) -> list[CatalogRecord]:
        url = self.search_url(query, category, limit)
        headers = {"User-Agent": self._settings.user_agent}
        logger.debug("Searching Open Library: %s", url)

        try:
            if self._client is not None:
                response = await self._client.get(url, headers=headers)
            else:
                async with httpx.AsyncClient() as client:
                    response = await client.get(url, headers=headers)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            logger.warning("Open Library returned %s for %s", e.response.status_code, url)
            raise CatalogUnavailableError(
                e.response.reason_phrase, status_code=e.response.status_code
            ) from e
        except httpx.HTTPError as e:
            logger.warning("Open Library request failed for %s: %s", url, e)
            raise CatalogUnavailableError(str(e) or type(e).__name__) from e
        except ValueError as e:
            logger.warning("Open Library sent an unreadable body for %s: %s", url, e)
            raise CatalogUnavailableError("invalid JSON response") from e

        docs = data.get("docs") if isinstance(data, dict) else None
        if not isinstance(docs, list):
            return []

        records: list[CatalogRecord] = []
        for position, doc in enumerate(docs):
            try:
                records.append(CatalogRecord.model_validate(doc))
            except ValidationError as e:
                logger.warning(
                    "Skipping unreadable doc %d from %s: %s", position, url, e.errors()
                )
        return records
