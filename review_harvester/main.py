"""Command line entry point."""

import argparse
import asyncio
import json
import os
import sys

from .core.config import ScraperConfig
from .core.errors import ScraperError
from .core.pipeline import ReviewPipeline
from .core.site_scraper import SiteScraper
from .sources import supported_sources
from .storage.json_storage import JSONStorage
from .utils.date_utils import parse_date


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='review-harvester',
        description='Extract structured items and company reviews from web pages',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  review-harvester scrape https://example.com/blog --root article --title h2
  review-harvester scrape https://example.com/about          # auto-extract
  review-harvester reviews Slack --start 2025-01-01 --end 2025-06-30 --source g2
  review-harvester reviews Slack --start 2025-01-01 --end 2025-06-30 --source g2 --fixtures
        """
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    scrape = subparsers.add_parser('scrape', help='Scrape a single page')
    scrape.add_argument('url', help='Page URL')
    for name in ('root', 'title', 'description', 'date', 'rating'):
        scrape.add_argument(f'--{name}', help=f'CSS selector for {name}')
    scrape.add_argument('--output', help='Write results to this JSON file')

    reviews = subparsers.add_parser('reviews', help='Scrape company reviews')
    reviews.add_argument('company', help='Company / product name')
    reviews.add_argument('--start', required=True, help='Start date (YYYY-MM-DD)')
    reviews.add_argument('--end', required=True, help='End date (YYYY-MM-DD)')
    reviews.add_argument('--source', required=True, choices=supported_sources())
    reviews.add_argument(
        '--max-pages',
        type=int,
        default=None,
        help='Maximum review pages to scrape (default: 10)'
    )
    reviews.add_argument('--fixtures', action='store_true', help='Use demo data where available')

    for sub in (scrape, reviews):
        sub.add_argument('--headful', action='store_true', help='Show the browser window')

    return parser


async def run_scrape(args, config: ScraperConfig) -> int:
    selectors = {
        name: getattr(args, name)
        for name in ('root', 'title', 'description', 'date', 'rating')
        if getattr(args, name)
    }

    items = await SiteScraper(config).scrape(args.url, selectors)
    data = [item.to_dict() for item in items]

    if not data:
        print("\n❌ No content found. Please check the URL or try different selectors.")
        return 1

    if args.output:
        JSONStorage.save(data, args.output)
    else:
        print(json.dumps(data, indent=2, ensure_ascii=False))
    return 0


async def run_reviews(args, config: ScraperConfig) -> int:
    start = parse_date(args.start)
    end = parse_date(args.end)
    if start is None or end is None:
        print("❌ Invalid date format")
        return 2

    result = await ReviewPipeline(config).run(args.company, start, end, args.source)

    if not result.success:
        print(f"\n❌ {result.error}")
        return 1
    if not result.data:
        print(f"\n❌ No reviews found for {args.company} on {args.source}.")
        return 1

    filename = JSONStorage.review_filename(args.company, args.source)
    JSONStorage.save(result.to_dict()['data'], os.path.join(config.ensure_output_dir(), filename))

    if result.note:
        print(f"ℹ {result.note}")
    print(f"\n✅ Done! {len(result.data)} reviews saved.\n")
    return 0


def main(argv=None) -> int:
    """Main function to run the scraper."""
    args = build_parser().parse_args(argv)

    config = ScraperConfig()
    if args.headful:
        config.headless = False
    if getattr(args, 'max_pages', None):
        config.max_pages = args.max_pages
    if getattr(args, 'fixtures', False):
        config.use_fixture_data = True

    if not config.validate():
        print("⚠ Warning: Configuration validation failed, continuing anyway...")

    handler = run_scrape if args.command == 'scrape' else run_reviews
    try:
        return asyncio.run(handler(args, config))
    except ScraperError as e:
        print(f"\n❌ {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
