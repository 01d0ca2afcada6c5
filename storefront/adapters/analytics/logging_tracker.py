"""Logging analytics adapter.

Implements AnalyticsPort by writing each page view to the application log.
"""

import logging

from storefront.core.ports import AnalyticsPort

logger = logging.getLogger(__name__)


class LoggingAnalyticsAdapter(AnalyticsPort):
    """Records page views as log lines and keeps per-path counts."""

    def __init__(self) -> None:
        self.view_counts: dict[str, int] = {}

    def track_page_view(self, path: str) -> None:
        self.view_counts[path] = self.view_counts.get(path, 0) + 1
        logger.info(f"Page view: {path}", extra={"path": path})
