"""HTTP endpoints for story ingestion.

Endpoints:
    - GET /health: Service health status
    - POST /upload/pdf: Validate a PDF and extract its narrative text
    - POST /upload/pdf/info: Page count and size preview
"""

from story_ingest.api.app import app, create_app

__all__ = ["app", "create_app"]
