# setup.py
from setuptools import setup, find_packages

setup(
    name="gitbook_crawler",
    version="0.1.0",
    description="Sidebar-driven documentation site crawler built on Playwright",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "click>=8.1",
        "pydantic>=2.0",
        "PyYAML>=6.0",
        "beautifulsoup4>=4.12",
        "playwright>=1.40",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.23",
        ],
    },
    entry_points={
        "console_scripts": [
            "gitbook-crawler=gitbook_crawler.cli:cli",
        ],
    },
    python_requires=">=3.11",
)
