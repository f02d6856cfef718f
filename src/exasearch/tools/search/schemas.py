"""
Pydantic schemas for search tool requests and provider results.

Field aliases are the camelCase names agents send. ``to_provider_params``
returns keyword arguments for the Exa client with unset options left out.
"""
import math
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

SearchType = Literal["auto", "neural", "keyword"]

MIN_RESULTS = 1
MAX_RESULTS = 25
DEFAULT_NUM_RESULTS = 5

# Tool signature type: advertises the bounds, the request models do the clamping
NumResults = Annotated[
    int,
    Field(
        description="Number of results to return",
        json_schema_extra={"minimum": MIN_RESULTS, "maximum": MAX_RESULTS},
    ),
]


def clamp(value: Any) -> Any:
    """Clamp a result count to [MIN_RESULTS, MAX_RESULTS]. Non-numbers pass through."""
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return value
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return value
    if isinstance(value, float) and not math.isfinite(value):
        return value
    return max(MIN_RESULTS, min(MAX_RESULTS, int(value)))


class RequestModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class SearchRequest(RequestModel):
    """Basic web search."""

    query: str = Field(description="The search query")
    type: SearchType = Field(default="auto", description="The type of search to perform")
    num_results: int = Field(
        default=DEFAULT_NUM_RESULTS,
        ge=MIN_RESULTS,
        le=MAX_RESULTS,
        alias="numResults",
        description="Number of results to return",
    )
    include_text: bool = Field(
        default=False,
        alias="includeText",
        description="Whether to include full text of results",
    )

    @field_validator("num_results", mode="before")
    @classmethod
    def clamp_num_results(cls, value: Any) -> Any:
        return clamp(value)

    def to_provider_params(self, use_autoprompt: bool = False) -> dict[str, Any]:
        params: dict[str, Any] = {"type": self.type, "num_results": self.num_results}
        if use_autoprompt:
            params["use_autoprompt"] = True
        return params


class AdvancedSearchRequest(SearchRequest):
    """Web search with date, domain and category filters."""

    start_date: str | None = Field(
        default=None,
        alias="startDate",
        description="Filter results published after this date (YYYY-MM-DD)",
    )
    end_date: str | None = Field(
        default=None,
        alias="endDate",
        description="Filter results published before this date (YYYY-MM-DD)",
    )
    include_domains: list[str] | None = Field(
        default=None,
        alias="includeDomains",
        description="Only include results from these domains",
    )
    exclude_domains: list[str] | None = Field(
        default=None,
        alias="excludeDomains",
        description="Exclude results from these domains",
    )
    category: str | None = Field(
        default=None,
        description='Filter by category (e.g., "research paper", "news", "company")',
    )

    def to_provider_params(self, use_autoprompt: bool = False) -> dict[str, Any]:
        params = super().to_provider_params(use_autoprompt)
        if self.start_date:
            params["start_published_date"] = self.start_date
        if self.end_date:
            params["end_published_date"] = self.end_date
        if self.include_domains:
            params["include_domains"] = list(self.include_domains)
        if self.exclude_domains:
            params["exclude_domains"] = list(self.exclude_domains)
        if self.category:
            params["category"] = self.category
        return params


class ContentRequest(RequestModel):
    """Fetch parsed page content for explicit URLs."""

    urls: list[str] = Field(description="Array of URLs to get content from")
    include_text: bool = Field(
        default=True,
        alias="includeText",
        description="Whether to include full text",
    )
    include_summary: bool = Field(
        default=False,
        alias="includeSummary",
        description="Whether to include AI-generated summary",
    )
    include_highlights: bool = Field(
        default=False,
        alias="includeHighlights",
        description="Whether to include relevant highlights",
    )

    def to_provider_params(self) -> dict[str, Any]:
        params: dict[str, Any] = {}
        if self.include_text:
            params["text"] = True
        if self.include_summary:
            params["summary"] = True
        if self.include_highlights:
            params["highlights"] = True
        return params


class SimilarityRequest(RequestModel):
    """Find pages similar to a seed URL."""

    url: str = Field(description="The URL to find similar pages for")
    num_results: int = Field(
        default=DEFAULT_NUM_RESULTS,
        ge=MIN_RESULTS,
        le=MAX_RESULTS,
        alias="numResults",
        description="Number of results to return",
    )
    include_text: bool = Field(
        default=False,
        alias="includeText",
        description="Whether to include full text of results",
    )

    @field_validator("num_results", mode="before")
    @classmethod
    def clamp_num_results(cls, value: Any) -> Any:
        return clamp(value)

    def to_provider_params(self) -> dict[str, Any]:
        return {"num_results": self.num_results}


class ResultRecord(BaseModel):
    """A single provider result. Only ``url`` is expected; everything else may be missing."""

    title: str | None = None
    url: str = ""
    published_date: str | None = None
    author: str | None = None
    highlights: list[str] = Field(default_factory=list)
    summary: str | None = None
    text: str | None = None

    @classmethod
    def from_provider(cls, item: Any) -> "ResultRecord":
        """Build a record from an Exa ``Result`` object or a plain dict."""
        if isinstance(item, dict):
            get = item.get
        else:
            def get(name, default=None):
                return getattr(item, name, default)

        published = get("published_date") or get("publishedDate")
        highlights = get("highlights") or []
        return cls(
            title=_as_text(get("title")),
            url=_as_text(get("url")) or "",
            published_date=_as_text(published),
            author=_as_text(get("author")),
            highlights=[str(h) for h in highlights if h is not None],
            summary=_as_text(get("summary")),
            text=_as_text(get("text")),
        )


def _as_text(value: Any) -> str | None:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)
