from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        serialize_by_alias=True,
    )


class SearchCategory(str, Enum):
    TITLE = "title"
    AUTHOR = "author"
    SUBJECT = "subject"


class SearchRequest(CamelModel):
    raw_input: str
    category: SearchCategory = SearchCategory.TITLE

    @property
    def query(self) -> str:
        return self.raw_input.strip()

    @property
    def is_empty(self) -> bool:
        return not self.query


class CatalogRecord(BaseModel):
    """One doc from the Open Library search response, keyed as upstream sends it."""

    model_config = ConfigDict(extra="ignore")

    key: str = ""
    title: str = ""
    author_name: list[str] | None = None
    cover_i: int | None = None

    @field_validator("key", "title", mode="before")
    @classmethod
    def _text_or_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("author_name", mode="before")
    @classmethod
    def _only_named_authors(cls, value: Any) -> Any:
        if not isinstance(value, list):
            return None
        return [name for name in value if isinstance(name, str)]

    @field_validator("cover_i", mode="before")
    @classmethod
    def _cover_id_or_none(cls, value: Any) -> Any:
        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            return value
        if isinstance(value, str) and value.strip().isdigit():
            return int(value)
        return None


class Idle(CamelModel):
    status: Literal["idle"] = "idle"


class Loading(CamelModel):
    status: Literal["loading"] = "loading"


class Error(CamelModel):
    status: Literal["error"] = "error"
    message: str


class Ready(CamelModel):
    status: Literal["ready"] = "ready"
    records: list[CatalogRecord]


ResultState = Annotated[Idle | Loading | Error | Ready, Field(discriminator="status")]


class BookCard(CamelModel):
    key: str
    title: str
    authors: str
    cover_url: str
    placeholder_url: str
    detail_url: str


class RenderBranch(CamelModel):
    kind: Literal["loading", "message", "grid", "welcome"]
    message: str | None = None
    cards: list[BookCard] = []


class SearchResponse(CamelModel):
    query: str
    category: SearchCategory
    state: ResultState
    cards: list[BookCard] = []


class HealthResponse(CamelModel):
    status: str
    version: str
