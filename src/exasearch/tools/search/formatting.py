"""
Plain-text rendering of search results for agents.
"""
from typing import Iterable, Optional

from .schemas import ResultRecord

NO_RESULTS = "No results found."
SECTION_SEPARATOR = "\n\n" + "-" * 33 + "\n\n"
PREVIEW_CHARS = 500
TRUNCATION_MARKER = "... [text truncated]"


def format_result(index: int, record: ResultRecord, include_full_text: bool = False) -> str:
    """Render one result as a numbered section."""
    lines = [
        f"[{index}] {record.title or 'No title'}",
        f"URL: {record.url}",
        f"Published: {record.published_date}" if record.published_date else "",
        f"Author: {record.author}" if record.author else "",
    ]

    if record.highlights:
        lines.append("\nHighlights:")
        lines.extend(f"  - {highlight.strip()}" for highlight in record.highlights)

    if record.summary:
        lines.append("\nSummary:")
        lines.append(f"  {record.summary}")

    if include_full_text and record.text:
        lines.append("\nFull Text (Preview):")
        lines.append(f"  {record.text[:PREVIEW_CHARS]}{TRUNCATION_MARKER}")

    return "\n".join(line for line in lines if line != "")


def format_search_results(
    records: Optional[Iterable[ResultRecord]],
    include_full_text: bool = False,
) -> str:
    """Format search results for better readability.

    Args:
        records: Results in provider order, may be None
        include_full_text: Whether to append a text preview to each result

    Returns:
        One section per result joined by a dashed separator, or
        ``NO_RESULTS`` when there is nothing to show
    """
    records = list(records or [])
    if not records:
        return NO_RESULTS

    return SECTION_SEPARATOR.join(
        format_result(index, record, include_full_text)
        for index, record in enumerate(records, start=1)
    )
