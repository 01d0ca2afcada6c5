"""Page rendering with view tracking."""

from .ports import AnalyticsPort

HOME_PATH = "/home"
HOME_CONTENT = "<div>content</div>"


class PageRenderer:
    """Renders pages and records a view for each render."""

    def __init__(self, analytics: AnalyticsPort):
        self.analytics = analytics

    async def render_page(self) -> str:
        """Render the home page.

        The page view is tracked once per call, before the content is
        returned.
        """
        self.analytics.track_page_view(HOME_PATH)
        return HOME_CONTENT
