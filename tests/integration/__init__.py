"""Integration tests for components working together as a system.

Coverage:
    - Upload endpoints with real HTTP requests through ASGITransport
    - Extraction with generated PDFs parsed by pypdf
"""
