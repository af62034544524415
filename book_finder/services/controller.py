import itertools
import logging

from book_finder.config import Settings
from book_finder.exceptions import CatalogUnavailableError
from book_finder.interfaces.book_search import BookSearchClient
from book_finder.models import (
    Error,
    Idle,
    Loading,
    Ready,
    RenderBranch,
    ResultState,
    SearchCategory,
    SearchRequest,
)
from book_finder.services import renderer

logger = logging.getLogger(__name__)

FETCH_FAILED_MESSAGE = "Failed to fetch books. Please try again later."
NO_RESULTS_MESSAGE = "No books found. Try a different search!"


class SearchController:
    """Drives one search session: input, committed query and result state."""

    def __init__(
        self,
        book_search: BookSearchClient,
        page_size: int | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._search = book_search
        if page_size is None:
            page_size = settings.page_size if settings is not None else 24
        self._page_size = page_size
        self._settings = settings
        self._sequence = itertools.count(1)
        self._latest = 0

        self.input_text = ""
        self.query = ""
        self.category = SearchCategory.TITLE
        self.state: ResultState = Idle()
        self.requests_issued = 0

    @property
    def has_searched(self) -> bool:
        return not isinstance(self.state, Idle)

    def update_input(self, text: str) -> None:
        self.input_text = text

    async def submit(
        self, text: str | None = None, category: SearchCategory | None = None
    ) -> bool:
        """Commit a search. Returns False when the input is blank.

        A commit that matches the current query and category does not
        start another request.
        """
        request = SearchRequest(
            raw_input=self.input_text if text is None else text,
            category=category or self.category,
        )
        if request.is_empty:
            return False

        changed = (request.query, request.category) != (self.query, self.category)
        self.query = request.query
        self.category = request.category
        if changed:
            await self.run_search()
        return True

    async def select_category(self, category: SearchCategory) -> None:
        if category == self.category:
            return
        self.category = category
        if self.query:
            await self.run_search()

    async def run_search(self) -> ResultState:
        sequence = next(self._sequence)
        self._latest = sequence
        self.state = Loading()

        query, category = self.query, self.category
        self.requests_issued += 1
        try:
            records = await self._search.search(query, category, limit=self._page_size)
        except CatalogUnavailableError:
            outcome: ResultState = Error(message=FETCH_FAILED_MESSAGE)
        else:
            if records:
                outcome = Ready(records=records)
            else:
                outcome = Error(message=NO_RESULTS_MESSAGE)

        if sequence != self._latest:
            logger.debug(
                "Dropping stale response for %s=%r (search #%d superseded by #%d)",
                category.value,
                query,
                sequence,
                self._latest,
            )
            return self.state

        self.state = outcome
        return outcome

    def render(self) -> RenderBranch:
        return renderer.render(self.state, self._settings)
