import os

import pytest
from fastapi.testclient import TestClient

from review_harvester import api
from review_harvester.core.pipeline import ReviewPipeline
from review_harvester.core.site_scraper import SiteScraper
from review_harvester.storage.json_storage import JSONStorage

from fakes import FakeEngine, FakePage, load_fixture


@pytest.fixture
def client(config, normalizer, g2_slack_pages):
    pages = dict(g2_slack_pages)
    pages["https://blog.example.com/"] = load_fixture("generic", "listing.html")
    engine = FakeEngine(FakePage(pages, failing=["https://down.example.com/"]))

    api.app.dependency_overrides[api.get_config] = lambda: config
    api.app.dependency_overrides[api.get_site_scraper] = lambda: SiteScraper(config, engine=engine)
    api.app.dependency_overrides[api.get_review_pipeline] = (
        lambda: ReviewPipeline(config, engine=engine, normalizer=normalizer)
    )
    yield TestClient(api.app)
    api.app.dependency_overrides.clear()


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["sources"] == ["g2", "capterra", "trustradius"]


def test_scrape_requires_url(client):
    response = client.post("/scrape", json={"selectors": {"root": "article"}})
    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "URL is required"}


def test_scrape_with_selectors(client):
    response = client.post("/scrape", json={
        "url": "https://blog.example.com/",
        "selectors": {"root": "article.post", "title": ".post-title", "description": ".post-summary"},
    })
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert [item["title"] for item in body["data"]] == ["Scaling our queue workers", "", "Retiring the legacy API"]


def test_scrape_nothing_found(client):
    response = client.post("/scrape", json={
        "url": "https://blog.example.com/",
        "selectors": {"root": ".comments"},
    })
    assert response.status_code == 404
    assert response.json()["success"] is False


def test_scrape_navigation_failure(client):
    response = client.post("/scrape", json={"url": "https://down.example.com/", "selectors": {"root": "p"}})
    assert response.status_code == 500
    assert response.json()["error"].startswith("Failed to load https://down.example.com/")


@pytest.mark.parametrize("payload, message", [
    ({"startDate": "2025-01-01", "endDate": "2025-06-30", "source": "g2"}, "Company name is required"),
    ({"companyName": "Slack", "endDate": "2025-06-30", "source": "g2"}, "Start date and end date are required"),
    ({"companyName": "Slack", "startDate": "2025-01-01", "endDate": "2025-06-30"}, "Source is required"),
    ({"companyName": "Slack", "startDate": "yesterday-ish", "endDate": "2025-06-30", "source": "g2"}, "Invalid date format"),
    ({"companyName": "Slack", "startDate": "2025-01-01", "endDate": "2025-06-30", "source": "yelp"}, "Invalid source"),
])
def test_scrape_reviews_validation(client, payload, message):
    response = client.post("/scrape-reviews", json=payload)
    assert response.status_code == 400
    assert response.json()["error"].startswith(message)


def test_scrape_reviews_success_writes_file(client, config):
    response = client.post("/scrape-reviews", json={
        "companyName": "Slack",
        "startDate": "2025-01-01",
        "endDate": "2025-06-30",
        "source": "G2",
    })

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["count"] == 5
    assert body["data"][0]["reviewer"] == {"name": "John D.", "info": "Mid-Market (51-1000 emp.)"}
    assert os.path.dirname(body["filePath"]) == config.output_dir
    assert os.path.basename(body["filePath"]).startswith("Slack_g2_")
    assert JSONStorage.load(body["filePath"]) == body["data"]


def test_scrape_reviews_empty_range(client):
    response = client.post("/scrape-reviews", json={
        "companyName": "Slack",
        "startDate": "2020-01-01",
        "endDate": "2020-12-31",
        "source": "g2",
    })
    assert response.status_code == 404
    assert response.json()["error"].startswith("No reviews found for Slack on g2")


def test_scrape_reviews_not_found_is_server_error(client):
    response = client.post("/scrape-reviews", json={
        "companyName": "Trello",
        "startDate": "2025-01-01",
        "endDate": "2025-06-30",
        "source": "capterra",
    })
    assert response.status_code == 500
    assert response.json() == {"success": False, "error": 'Company "Trello" not found on Capterra'}


def test_scrape_reviews_fixture_mode_includes_note(client, config):
    config.use_fixture_data = True
    response = client.post("/scrape-reviews", json={
        "companyName": "Slack",
        "startDate": "2025-01-01",
        "endDate": "2025-06-30",
        "source": "g2",
    })
    assert response.status_code == 200
    body = response.json()
    assert body["count"] == 5
    assert "note" in body


def test_validate_review_request_parses_dates():
    request = api.ReviewScrapeRequest(
        company_name="Slack", start_date="2025-01-01", end_date="June 30, 2025", source="g2"
    )
    dates = api.validate_review_request(request)
    assert (dates.start.month, dates.end.month, dates.end.day) == (1, 6, 30)
