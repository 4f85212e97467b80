"""Test suite for Typed Reflection.

Test Structure:
- domain/: Tests for reflection models, type bridging, accessors and lookup caching
- config/: Tests for configuration management
- infrastructure/: Tests for logging and the mod metadata repository
- test_main.py: Tests for the command-line entry point

Run tests with pytest:
    pytest                    # Run all tests
    pytest -m unit            # Run unit tests only
    pytest -m integration     # Run integration tests only
"""
