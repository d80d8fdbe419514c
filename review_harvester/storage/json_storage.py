"""JSON storage for scrape results."""

import json
import os
import re
from datetime import datetime, timezone
from typing import Any


class JSONStorage:
    """Save and load scrape results as JSON."""

    @staticmethod
    def save(data: Any, filepath: str) -> str:
        """
        Save data to a JSON file.

        Args:
            data: JSON-serializable results
            filepath: Path to save the file

        Returns:
            The path written
        """
        directory = os.path.dirname(filepath)
        if directory:
            os.makedirs(directory, exist_ok=True)

        with open(filepath, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

        print(f"✓ Saved results to {filepath}")
        return filepath

    @staticmethod
    def load(filepath: str) -> Any:
        """
        Load results from a JSON file.

        Args:
            filepath: Path to the JSON file

        Returns:
            Parsed data
        """
        with open(filepath, 'r', encoding='utf-8') as f:
            return json.load(f)

    @staticmethod
    def review_filename(company_name: str, source: str, when: datetime = None) -> str:
        """
        '<company>_<source>_<timestamp>.json'.

        Whitespace and path separators in the company name become '_'; the
        timestamp is the UTC ISO instant with ':' and '.' replaced by '-'.
        """
        when = when or datetime.now(timezone.utc)
        if when.tzinfo is not None:
            when = when.astimezone(timezone.utc).replace(tzinfo=None)

        timestamp = when.isoformat(timespec='milliseconds') + 'Z'
        timestamp = timestamp.replace(':', '-').replace('.', '-')
        company = re.sub(r'[\s/\\]+', '_', company_name.strip())
        return f"{company}_{source.lower()}_{timestamp}.json"
