# shacore Test Suite
"""
Test suite including:
- Unit tests for every stage of the SHA-256 pipeline
- Integration tests for the hex line codec, self-test and CLI
- Security tests (invalid inputs, avalanche behaviour)

Run with: pytest
Coverage: coverage run -m pytest && coverage report
"""
