"""Story ingestion - PDF stories to clean prose for language learning.

Combines pypdf for text extraction, Pydantic for data validation and
FastAPI for the upload endpoints.

Components:
    - api: Upload endpoints
    - parsing: Extraction, layout filtering, paragraph and punctuation repair
    - models: Pipeline and API schemas
"""

__version__ = "0.1.0"
