import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse

from book_finder.config import get_settings
from book_finder.interfaces.book_search import BookSearchClient
from book_finder.models import HealthResponse, Ready, SearchCategory, SearchResponse
from book_finder.services.cards import build_card
from book_finder.services.controller import SearchController
from book_finder.services.openlibrary import OpenLibraryClient
from book_finder.services.renderer import render_html, templates

settings = get_settings()
logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger(__name__)

book_search: BookSearchClient | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    global book_search
    async with httpx.AsyncClient() as client:
        book_search = OpenLibraryClient(client, settings)
        logger.info("Book Finder %s using %s", settings.app_version, settings.openlibrary_base_url)
        yield
    book_search = None


app = FastAPI(title="Book Finder", version=settings.app_version, lifespan=lifespan)


async def _run(q: str, category: SearchCategory) -> SearchController:
    assert book_search is not None
    controller = SearchController(book_search, settings=settings)
    await controller.submit(q, category)
    return controller


@app.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(status="healthy", version=settings.app_version)


@app.get("/", response_class=HTMLResponse)
async def search_page(
    request: Request, q: str = "", category: SearchCategory = SearchCategory.TITLE
):
    controller = await _run(q, category)
    return templates.TemplateResponse(
        request,
        "page.html",
        {
            "query": q,
            "category": category,
            "categories": list(SearchCategory),
            "branch": controller.render(),
        },
    )


@app.get("/results", response_class=HTMLResponse)
async def search_results(q: str = "", category: SearchCategory = SearchCategory.TITLE):
    controller = await _run(q, category)
    return HTMLResponse(render_html(controller.render()))


@app.get("/api/search", response_model=SearchResponse)
async def search_api(q: str = "", category: SearchCategory = SearchCategory.TITLE):
    controller = await _run(q, category)
    cards = []
    if isinstance(controller.state, Ready):
        cards = [build_card(record, settings) for record in controller.state.records]
    return SearchResponse(
        query=controller.query,
        category=category,
        state=controller.state,
        cards=cards,
    )
