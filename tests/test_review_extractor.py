import pytest
from playwright.async_api import Error as PlaywrightError

from review_harvester.core.models import Reviewer
from review_harvester.extractors.review_extractor import ReviewExtractor
from review_harvester.sources import get_source

from fakes import FakeElement, load_fixture, page_from_html


@pytest.mark.asyncio
async def test_g2_page_fields():
    page = page_from_html(
        load_fixture("g2", "slack_reviews_page1.html"),
        "https://www.g2.com/products/slack/reviews",
    )
    reviews = await ReviewExtractor(get_source("g2")).extract_page(page)

    assert [r.title for r in reviews] == [
        "Great Team Collaboration Tool",
        "Efficient Communication Platform",
        "Good but Has Limitations",
    ]
    assert [r.rating for r in reviews] == [4.5, 5.0, 3.5]
    assert [r.date for r in reviews] == ["June 15, 2025", "May 22, 2025", "April 3, 2025"]
    assert reviews[0].reviewer == Reviewer(name="John D.", info="Mid-Market (51-1000 emp.)")
    assert reviews[2].reviewer == Reviewer(name="Anonymous", info="")
    assert {r.source for r in reviews} == {"G2"}


@pytest.mark.asyncio
async def test_capterra_joins_pros_and_cons():
    page = page_from_html(load_fixture("capterra", "trello_reviews.html"))
    first, second = await ReviewExtractor(get_source("capterra")).extract_page(page)

    assert first.description == (
        "We run every sprint on Trello.\n\n"
        "Pros: Easy to learn\n\n"
        "Cons: Gets slow with huge boards"
    )
    assert first.rating == 4.0
    assert first.reviewer.name == "Priya S."

    assert second.title == "No Title"
    assert second.description == "Pros: Free tier is generous"
    assert second.rating == 3.0
    assert second.reviewer.name == "Anonymous"
    assert second.source == "Capterra"


@pytest.mark.asyncio
async def test_trustradius_counts_filled_stars():
    page = page_from_html(load_fixture("trustradius", "teams_reviews.html"))
    first, second = await ReviewExtractor(get_source("trustradius")).extract_page(page)

    assert first.rating == 4.0
    assert first.date == "3/4/2025"
    assert first.reviewer == Reviewer(name="Dana R.", info="IT Manager, Healthcare")
    assert second.rating == 0.0
    assert second.description == "Works, but notifications are noisy."


@pytest.mark.asyncio
async def test_empty_review_gets_defaults():
    page = page_from_html("<div class='review'></div>")
    (review,) = await ReviewExtractor(get_source("capterra")).extract_page(page)

    assert review.title == "No Title"
    assert review.description == "No review content available"
    assert review.rating == 0.0
    assert review.date == ""
    assert review.reviewer == Reviewer()


@pytest.mark.asyncio
async def test_page_without_containers():
    page = page_from_html("<html><body><p>Nothing to see</p></body></html>")
    assert await ReviewExtractor(get_source("g2")).extract_page(page) == []


@pytest.mark.asyncio
async def test_detached_rating_element_only_loses_the_rating(monkeypatch):
    get_attribute = FakeElement.get_attribute
    inner_text = FakeElement.inner_text

    def is_rating(element):
        return "stars-snapshot" in (element.tag.get("class") or [])

    async def flaky_get_attribute(self, name):
        if is_rating(self):
            raise PlaywrightError("Element is not attached to the DOM")
        return await get_attribute(self, name)

    async def flaky_inner_text(self):
        if is_rating(self):
            raise PlaywrightError("Element is not attached to the DOM")
        return await inner_text(self)

    monkeypatch.setattr(FakeElement, "get_attribute", flaky_get_attribute)
    monkeypatch.setattr(FakeElement, "inner_text", flaky_inner_text)

    page = page_from_html(load_fixture("g2", "slack_reviews_page1.html"))
    reviews = await ReviewExtractor(get_source("g2")).extract_page(page)

    assert [r.title for r in reviews] == [
        "Great Team Collaboration Tool",
        "Efficient Communication Platform",
        "Good but Has Limitations",
    ]
    assert [r.rating for r in reviews] == [0.0, 0.0, 0.0]
