"""
Smoke-test fixtures for the upgrades offers page.

Provides the ``smoke_page_url`` session-scoped fixture: the absolute URL of
the page under test on the external target (``BASE_URL`` + ``UUID``) or on
the bundled demo site served for the session.
"""

from __future__ import annotations

from collections.abc import Generator

import pytest

from config import get_config
from shared.live_site import live_target_url
from tests.e2e.utils.url_builder import build_page_url, resolve_url


@pytest.fixture(scope="session")
def smoke_page_url() -> Generator[str, None, None]:
    """Yield the absolute URL of the upgrades offers page."""
    settings = get_config("testing")
    record_id = settings.UUID if settings.BASE_URL else (settings.UUID or "smoke")
    with live_target_url(settings.BASE_URL, host=settings.LIVE_SERVER_HOST) as base_url:
        yield resolve_url(base_url, build_page_url(record_id))
