"""Test package for story ingestion.

Structure:
    - unit/: Individual function and class tests
    - integration/: Upload endpoints end to end
    - fakes.py: Synthetic PDF engine and a small PDF writer

PDFs are generated in-test, so no binary fixtures are checked in.
Leverages pytest with pytest-check for soft assertions.
"""
