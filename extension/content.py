# content.py
"""Content script: owns one page snapshot and answers scrapeProfile for it."""

import logging
from typing import Optional

from .errors import ReceivingEndMissing
from .messaging import BACKGROUND, CONTENT, MessageBus
from .page import PageSnapshot
from .platform import detect_platform, is_profile_page
from .profile_scraper import scrape_current_profile

logger = logging.getLogger(__name__)


class ContentScript:
    def __init__(self, bus: MessageBus, page: PageSnapshot):
        self.bus = bus
        self.page = page
        self.platform = detect_platform(page.hostname)

    def attach(self):
        self.bus.register(CONTENT, self.on_message)
        if self.is_profile_page():
            try:
                self.bus.send(BACKGROUND, {
                    "action": "pageLoaded",
                    "platform": self.platform.value,
                    "isProfile": True,
                })
            except ReceivingEndMissing:
                logger.debug("Background relay not listening yet; skipped pageLoaded")

    def is_profile_page(self) -> bool:
        return is_profile_page(self.platform, self.page.url)

    def on_message(self, request: dict) -> Optional[dict]:
        if request.get("action") == "scrapeProfile":
            profile = scrape_current_profile(self.page)
            return {"success": True, "data": profile.to_wire()}
        return None
