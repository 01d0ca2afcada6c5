"""Unit tests for LoggingAnalyticsAdapter."""

import logging

import pytest

from storefront.adapters.analytics.logging_tracker import LoggingAnalyticsAdapter
from storefront.core.pages import PageRenderer


@pytest.mark.asyncio
async def test_page_views_are_logged_and_counted(caplog: pytest.LogCaptureFixture) -> None:
    adapter = LoggingAnalyticsAdapter()
    renderer = PageRenderer(analytics=adapter)

    with caplog.at_level(logging.INFO, logger="storefront.adapters.analytics.logging_tracker"):
        await renderer.render_page()
        await renderer.render_page()

    assert adapter.view_counts == {"/home": 2}
    assert "Page view: /home" in caplog.text
