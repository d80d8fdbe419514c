"""
HTTP entry point for the Review Harvester API.

Run with `python app.py` or `uvicorn app:app`.
"""

import os

import uvicorn

from review_harvester.api import app


if __name__ == "__main__":
    uvicorn.run(
        "app:app",
        host=os.environ.get("HOST", "0.0.0.0"),
        port=int(os.environ.get("PORT", 5001)),
        reload=False,
    )
