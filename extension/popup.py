# popup.py
"""
Popup surface: gates the current tab, asks the content script for the
profile and the background relay for the analysis.

The analyzeProfile send is retried only while the relay has no listener
registered (service worker still starting). Two retries, fixed wait.
"""

import logging
import time
from typing import Callable, Optional

from tenacity import RetryError, Retrying, retry_if_exception_type, stop_after_attempt, wait_fixed

from .config import ExtensionConfig
from .errors import AnalysisFailed, ExtensionDisconnected, ReceivingEndMissing, UnsupportedPage
from .messaging import BACKGROUND, CONTENT, MessageBus
from .models import AnalysisResult, Platform
from .platform import classify_url
from .settings_store import SettingsStore

logger = logging.getLogger(__name__)

# analyzeProfile send: first try plus two retries, fixed wait
SEND_ATTEMPTS = 3
SEND_RETRY_WAIT_SECONDS = 1.0

PLATFORM_LABELS = {Platform.LINKEDIN: "LinkedIn", Platform.INSTAGRAM: "Instagram"}


class Popup:
    def __init__(
        self,
        bus: MessageBus,
        page_url: str,
        config: Optional[ExtensionConfig] = None,
        settings: Optional[SettingsStore] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.bus = bus
        self.page_url = page_url
        self.config = config or ExtensionConfig()
        self.settings = settings or SettingsStore(self.config.settings_path)
        self._sleep = sleep
        self.is_analyzing = False

    def _log_retry(self, retry_state):
        logger.warning(
            "Message sending error (attempt %d): %s. Retrying in %.0f second(s)...",
            retry_state.attempt_number,
            retry_state.outcome.exception(),
            SEND_RETRY_WAIT_SECONDS,
        )

    def send_to_background(self, message: dict) -> Optional[dict]:
        retryer = Retrying(
            stop=stop_after_attempt(SEND_ATTEMPTS),
            wait=wait_fixed(SEND_RETRY_WAIT_SECONDS),
            retry=retry_if_exception_type(ReceivingEndMissing),
            before_sleep=self._log_retry,
            sleep=self._sleep,
        )
        try:
            return retryer(self.bus.send, BACKGROUND, message)
        except RetryError as e:
            raise ExtensionDisconnected() from e.last_attempt.exception()

    def check_page(self) -> Platform:
        platform, is_profile = classify_url(self.page_url)
        if platform == Platform.UNKNOWN or not is_profile:
            raise UnsupportedPage("Open a LinkedIn or Instagram profile page to analyze it.")
        if not self.settings.is_enabled(platform):
            raise UnsupportedPage(f"{PLATFORM_LABELS[platform]} analysis is turned off in settings.")
        return platform

    def analyze_profile(self) -> AnalysisResult:
        if self.is_analyzing:
            raise AnalysisFailed("An analysis is already running.")
        self.is_analyzing = True
        try:
            self.check_page()

            profile_result = self.bus.send(CONTENT, {"action": "scrapeProfile"})
            if not profile_result or not profile_result.get("success"):
                raise AnalysisFailed("Failed to scrape profile data")

            logger.info("Sending analyzeProfile message to background")
            analysis = self.send_to_background({
                "action": "analyzeProfile",
                "profileData": profile_result.get("data"),
            })
            if not analysis:
                raise AnalysisFailed("No response from background script. Try reloading the extension.")
            if not analysis.get("success"):
                raise AnalysisFailed(analysis.get("error") or "Analysis failed")

            return AnalysisResult.model_validate(analysis.get("data"))
        finally:
            self.is_analyzing = False

    def backend_status(self) -> str:
        try:
            result = self.bus.send(BACKGROUND, {"action": "checkBackendStatus"})
        except ReceivingEndMissing:
            result = None
        if result and result.get("success") and result.get("status") == "connected":
            return "Backend connected"
        return "Backend offline - Start the server"
