# gitbook_crawler/crawler/__init__.py
"""Link discovery, page registry, materialization and the browser fetcher."""
