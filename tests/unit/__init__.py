"""Unit tests for individual components in isolation.

Coverage:
    - parsing/: Validation, layout filtering, paragraphs, punctuation, facade
    - loader: pypdf adapter against generated PDFs
    - config: Environment-driven settings

The PDF engine is replaced by synthetic documents where positions matter.
Leverages pytest-check for multiple assertions per test.
"""
