"""
FastAPI wrapper for the page and review scrapers.

Endpoints:
    POST /scrape          - one page, caller selectors or auto-extraction
    POST /scrape-reviews  - company reviews from g2 / capterra / trustradius
    GET  /health          - status and supported sources
"""

import os
import traceback
from typing import Any, Dict, Optional

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from . import __version__
from .core.config import ScraperConfig
from .core.errors import NavigationError, ValidationError
from .core.models import DateRange
from .core.pipeline import ReviewPipeline
from .core.site_scraper import SiteScraper
from .sources import get_source, supported_sources
from .storage.json_storage import JSONStorage
from .utils.date_utils import parse_date


# ============================================================
# APP INITIALIZATION
# ============================================================

app = FastAPI(
    title="Review Harvester API",
    description="Extract structured items and company reviews from rendered web pages",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

config = ScraperConfig()


def get_config() -> ScraperConfig:
    return config


def get_site_scraper(config: ScraperConfig = Depends(get_config)) -> SiteScraper:
    return SiteScraper(config)


def get_review_pipeline(config: ScraperConfig = Depends(get_config)) -> ReviewPipeline:
    return ReviewPipeline(config)


# ============================================================
# REQUEST MODELS
# ============================================================

class ScrapeRequest(BaseModel):
    url: Optional[str] = None
    selectors: Optional[Dict[str, Any]] = None

    class Config:
        json_schema_extra = {
            "example": {
                "url": "https://example.com/blog",
                "selectors": {
                    "root": "article",
                    "title": "h2",
                    "description": ".summary",
                    "date": "time",
                },
            }
        }


class ReviewScrapeRequest(BaseModel):
    company_name: Optional[str] = Field(None, alias="companyName")
    start_date: Optional[str] = Field(None, alias="startDate")
    end_date: Optional[str] = Field(None, alias="endDate")
    source: Optional[str] = None

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "companyName": "Slack",
                "startDate": "2025-01-01",
                "endDate": "2025-06-30",
                "source": "g2",
            }
        }


def error_response(status_code: int, error: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": error})


def validate_review_request(request: ReviewScrapeRequest) -> DateRange:
    """
    Check fields before any browser work.

    Returns:
        The requested date range

    Raises:
        ValidationError: Missing field, bad date, or unsupported source
    """
    if not request.company_name or not request.company_name.strip():
        raise ValidationError("Company name is required")
    if not request.start_date or not request.end_date:
        raise ValidationError("Start date and end date are required")
    if not request.source:
        raise ValidationError(f"Source is required ({', '.join(supported_sources())})")

    start = parse_date(request.start_date)
    end = parse_date(request.end_date)
    if start is None or end is None:
        raise ValidationError("Invalid date format")

    get_source(request.source)
    return DateRange(start=start, end=end)


# ============================================================
# API ENDPOINTS
# ============================================================

@app.get("/health")
def health_check(config: ScraperConfig = Depends(get_config)):
    """Health check endpoint"""
    return {
        "status": "healthy",
        "version": __version__,
        "sources": supported_sources(),
        "fixture_data": config.use_fixture_data,
        "max_pages": config.max_pages,
    }


@app.post("/scrape")
async def scrape(request: ScrapeRequest, scraper: SiteScraper = Depends(get_site_scraper)):
    """Scrape one page with the given selectors, or auto-extract text blocks."""
    if not request.url or not request.url.strip():
        return error_response(400, "URL is required")

    try:
        print(f"Scraping URL: {request.url}")
        items = await scraper.scrape(request.url.strip(), request.selectors)
    except NavigationError as e:
        print(f"✗ Scraping error: {e}")
        return error_response(500, str(e))
    except Exception as e:
        print(f"✗ Scraping error: {e}")
        traceback.print_exc()
        return error_response(500, str(e))

    if not items:
        return error_response(
            404,
            "No content found. Please check the URL or try different selectors."
        )

    return {"success": True, "data": [item.to_dict() for item in items]}


@app.post("/scrape-reviews")
async def scrape_reviews(
    request: ReviewScrapeRequest,
    pipeline: ReviewPipeline = Depends(get_review_pipeline),
    config: ScraperConfig = Depends(get_config)
):
    """Scrape a company's reviews from one source within a date range."""
    try:
        dates = validate_review_request(request)
    except ValidationError as e:
        return error_response(400, str(e))

    company_name = request.company_name.strip()
    source = request.source.strip().lower()

    try:
        result = await pipeline.run(company_name, dates.start, dates.end, source)
    except Exception as e:
        print(f"✗ Scraping error: {e}")
        traceback.print_exc()
        return error_response(500, str(e))

    if not result.success:
        return JSONResponse(status_code=500, content=result.to_dict())

    if not result.data:
        return error_response(
            404,
            f"No reviews found for {company_name} on {source}. "
            f"Please check the company name or try a different date range."
        )

    payload = result.to_dict()
    filename = JSONStorage.review_filename(company_name, source)
    file_path = os.path.join(config.ensure_output_dir(), filename)
    JSONStorage.save(payload["data"], file_path)

    payload["count"] = len(result.data)
    payload["filePath"] = file_path
    return payload
