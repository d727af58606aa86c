# digestkit Test Suite
"""
Test suite including:
- Unit tests for the compression engine
- Provider and dispatcher tests
- Command line tests

Run with: pytest
"""
