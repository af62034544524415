"""Maps a search state onto the view branch shown below the search form."""

from pathlib import Path

from starlette.templating import Jinja2Templates

from book_finder.config import Settings
from book_finder.models import Error, Idle, Loading, Ready, RenderBranch, ResultState
from book_finder.services.cards import build_card

WELCOME_MESSAGE = "Search for a book to get started."

TEMPLATE_DIR = Path(__file__).parent.parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATE_DIR))


def render(state: ResultState, settings: Settings | None = None) -> RenderBranch:
    """Return the branch for ``state``.

    Checked in the order loading, error, ready, idle. Only one state holds
    at a time, so a stale error can never show through a newer load.
    """
    if isinstance(state, Loading):
        return RenderBranch(kind="loading")
    if isinstance(state, Error):
        return RenderBranch(kind="message", message=state.message)
    if isinstance(state, Ready):
        return RenderBranch(
            kind="grid",
            cards=[build_card(record, settings) for record in state.records],
        )
    if isinstance(state, Idle):
        return RenderBranch(kind="welcome", message=WELCOME_MESSAGE)
    raise TypeError(f"Unknown result state: {type(state).__name__}")


def render_html(branch: RenderBranch) -> str:
    return templates.get_template("results.html").render(branch=branch)
