from exasearch.tools.search.formatting import (
    NO_RESULTS,
    SECTION_SEPARATOR,
    format_search_results,
)
from exasearch.tools.search.schemas import ResultRecord


def test_empty_and_missing_results():
    assert format_search_results([]) == "No results found."
    assert format_search_results(None) == "No results found."
    assert NO_RESULTS == "No results found."


def test_minimal_record_has_title_placeholder_and_url_only():
    text = format_search_results([ResultRecord(url="https://a.com")])

    assert text.split("\n") == ["[1] No title", "URL: https://a.com"]


def test_full_record_layout():
    record = ResultRecord(
        title="Title",
        url="https://a.com",
        published_date="2024-01-02",
        author="Ada",
        highlights=["  first ", "second"],
        summary="Short summary",
    )

    assert format_search_results([record]) == (
        "[1] Title\n"
        "URL: https://a.com\n"
        "Published: 2024-01-02\n"
        "Author: Ada\n"
        "\nHighlights:\n"
        "  - first\n"
        "  - second\n"
        "\nSummary:\n"
        "  Short summary"
    )


def test_sections_in_input_order_with_separator():
    records = [ResultRecord(title=f"R{i}", url=f"https://{i}.com") for i in range(1, 4)]

    text = format_search_results(records)
    sections = text.split(SECTION_SEPARATOR)

    assert SECTION_SEPARATOR == "\n\n---------------------------------\n\n"
    assert len(sections) == 3
    assert [s.split("\n")[0] for s in sections] == ["[1] R1", "[2] R2", "[3] R3"]


def test_full_text_is_truncated_when_requested():
    record = ResultRecord(url="https://a.com", text="x" * 600)

    text = format_search_results([record], include_full_text=True)

    assert "\nFull Text (Preview):\n" in text
    assert text.endswith("  " + "x" * 500 + "... [text truncated]")
    assert "x" * 501 not in text


def test_full_text_omitted_unless_requested():
    record = ResultRecord(url="https://a.com", text="secret body")

    assert "secret body" not in format_search_results([record])
    assert "Full Text" not in format_search_results([record], include_full_text=False)


def test_output_is_deterministic():
    records = [ResultRecord(title="T", url="https://a.com", summary="s")]

    assert format_search_results(records, True) == format_search_results(records, True)


def test_record_from_provider_object_and_dict():
    class Result:
        title = "Obj"
        url = "https://obj.com"
        published_date = "2024-03-03"
        author = None
        highlights = None
        summary = "sum"
        text = None

    from_obj = ResultRecord.from_provider(Result())
    from_dict = ResultRecord.from_provider({"url": "https://d.com", "publishedDate": "2023"})

    assert from_obj.published_date == "2024-03-03"
    assert from_obj.highlights == []
    assert from_obj.summary == "sum"
    assert from_dict.published_date == "2023"
    assert from_dict.title is None
    assert ResultRecord.from_provider({}).url == ""
