"""Test suite for Struct Slot Layout.

Test Structure:
- application/: Tests for the generator orchestrator
- config/: Tests for configuration management
- domain/: Tests for models, services and repositories
- infrastructure/: Tests for logging utilities
- performance/: Caching and parallel layout tests

Run tests with pytest:
    pytest                    # Run all tests
    pytest -m unit            # Run unit tests only
    pytest -m performance     # Run performance tests only
"""
