"""Test suite for the storefront.

Organized into three categories:

1. core/: Unit tests for core business functions
   - No external dependencies, fast execution
   - Uses in-memory fakes for ports

2. adapters/: Tests for the default adapter implementations

3. fakes/: Port implementations for testing
   - In-memory implementations of every port that record their calls
   - Used by core unit tests
"""
