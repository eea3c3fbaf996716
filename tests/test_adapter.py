"""Tests for the Guardian result adapter."""

from pulse_report.search.adapter import (
    PLACEHOLDER_IMAGE,
    SOURCE_NAME,
    STAFF_AUTHOR,
    adapt_result,
)


def test_adapt_full_result() -> None:
    article = adapt_result(
        {
            "webTitle": "Markets rally",
            "webUrl": "https://www.theguardian.com/business/1",
            "webPublicationDate": "2026-02-01T10:00:00Z",
            "sectionName": "Business",
            "fields": {"thumbnail": "https://media.example/1.jpg", "trailText": "Stocks up"},
        }
    )
    assert article.title == "Markets rally"
    assert article.description == "Stocks up"
    assert article.url == "https://www.theguardian.com/business/1"
    assert article.image_url == "https://media.example/1.jpg"
    assert article.published_at == "2026-02-01T10:00:00Z"
    assert article.author == STAFF_AUTHOR
    assert article.source == SOURCE_NAME
    assert article.category == "Business"


def test_missing_summary_uses_title() -> None:
    article = adapt_result({"webTitle": "Only a title", "fields": {}})
    assert article.description == "Only a title"


def test_missing_thumbnail_uses_placeholder() -> None:
    article = adapt_result({"webTitle": "No image", "fields": {"trailText": "x"}})
    assert article.image_url == PLACEHOLDER_IMAGE


def test_missing_fields_object_is_tolerated() -> None:
    article = adapt_result({"webTitle": "Bare", "webUrl": "https://example.com"})
    assert article.description == "Bare"
    assert article.image_url == PLACEHOLDER_IMAGE
    assert article.category is None


def test_empty_item_does_not_raise() -> None:
    article = adapt_result({})
    assert article.title == ""
    assert article.url == ""
    assert article.author == STAFF_AUTHOR
