"""
Shared pytest fixtures for the upgrades offers test suite.

Fixtures here are available to every test package. Browser fixtures live
in ``tests/e2e/conftest.py``.
"""

import os

import pytest

# Set testing environment before importing the demo site
os.environ.setdefault("FLASK_ENV", "testing")

from upgrades_site import create_app


# -----------------------------------------------------------------------------
# Application Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture(scope="session")
def app():
    """
    Create the demo site instance for the test session.

    Yields:
        Flask application instance configured for testing.
    """
    application = create_app("testing")
    yield application


@pytest.fixture(scope="function")
def client(app):
    """
    Create a test client for making HTTP requests to the demo site.

    Yields:
        Flask test client for making HTTP requests.
    """
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture
def record_uuid() -> str:
    """Record identifier used in demo site URLs."""
    return "ABC123"
