"""Setup file for the package."""

from setuptools import setup, find_packages

setup(
    name="review-harvester",
    version="1.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["app"],
    install_requires=[
        "playwright>=1.40.0",
        "fastapi>=0.100.0",
        "pydantic>=2.0",
        "uvicorn>=0.23.0",
        "python-dotenv>=1.0.0",
        "python-dateutil>=2.8.2",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.21",
            "beautifulsoup4>=4.12",
            "httpx>=0.24",
        ],
    },
    entry_points={
        'console_scripts': [
            'review-harvester=review_harvester.main:main',
        ],
    },
    description="Extract structured items and company reviews from rendered web pages",
    python_requires='>=3.8',
)
