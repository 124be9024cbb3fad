# relay.py
"""
Background relay: the long-lived surface that bridges the page scraper and
the backend HTTP service.

  popup --analyzeProfile--> BackgroundRelay --POST /analyze--> backend
        <----- envelope ---                 <---- envelope ----

It also answers checkBackendStatus and runs a keep-alive heartbeat so the
host does not tear it down between requests.
"""

import logging
import threading
from typing import Optional

import requests
from pydantic import ValidationError

from .config import ExtensionConfig
from .errors import RelayError, TransportError
from .messaging import BACKGROUND, MessageBus
from .models import AnalysisResult, Envelope, ProfileData

logger = logging.getLogger(__name__)

UNSUCCESSFUL = "Backend returned unsuccessful response"
ANALYSIS_FAILED = "Failed to analyze profile. Please try again."


# -------------------------------------------------------------------
# Backend HTTP client
# -------------------------------------------------------------------
class BackendRelay:
    def __init__(self, backend_url: str, session: Optional[requests.Session] = None):
        self.backend_url = backend_url.rstrip("/")
        self.session = session or requests.Session()

    def analyze(self, profile: ProfileData) -> AnalysisResult:
        try:
            resp = self.session.post(
                f"{self.backend_url}/analyze",
                json={"profileData": profile.to_wire()},
                headers={"Content-Type": "application/json"},
            )
        except requests.ConnectionError as e:
            logger.error("Network error calling backend: %s", e)
            raise TransportError(
                f"Cannot connect to Findn AI backend. Make sure the server is running on {self.backend_url}"
            ) from e

        if not resp.ok:
            raise RelayError(_error_from_body(resp) or f"Backend API error: {resp.status_code}")

        try:
            envelope = Envelope.model_validate(resp.json())
        except ValueError:
            raise RelayError(UNSUCCESSFUL)
        if not envelope.success:
            raise RelayError(envelope.error or UNSUCCESSFUL)
        try:
            return AnalysisResult.model_validate(envelope.data)
        except ValidationError:
            raise RelayError(UNSUCCESSFUL)

    def check_status(self) -> str:
        """connected | error | offline. Never raises."""
        try:
            resp = self.session.get(f"{self.backend_url}/health")
        except Exception as e:
            logger.debug("Health probe failed: %s", e)
            return "offline"
        return "connected" if resp.ok else "error"


def _error_from_body(resp: requests.Response) -> Optional[str]:
    try:
        body = resp.json()
    except ValueError:
        return None
    if isinstance(body, dict) and isinstance(body.get("error"), str):
        return body["error"]
    return None


# -------------------------------------------------------------------
# Keep-alive heartbeat
# -------------------------------------------------------------------
class KeepAlive:
    """Fixed-interval no-op tick. Touches no shared state."""

    def __init__(self, interval: float = 30.0):
        self.interval = interval
        self.ticks = 0
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    def _run(self):
        while not self._stop.wait(self.interval):
            self.ticks += 1
            logger.debug("Background relay keepalive")

    def start(self):
        if self._thread and self._thread.is_alive():
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, name="relay-keepalive", daemon=True)
        self._thread.start()

    def stop(self):
        self._stop.set()
        if self._thread:
            self._thread.join(timeout=self.interval + 1)
            self._thread = None

    @property
    def running(self) -> bool:
        return bool(self._thread and self._thread.is_alive())


# -------------------------------------------------------------------
# Background surface
# -------------------------------------------------------------------
class BackgroundService:
    def __init__(self, bus: MessageBus, relay: BackendRelay, keepalive: Optional[KeepAlive] = None):
        self.bus = bus
        self.relay = relay
        self.keepalive = keepalive or KeepAlive()

    @classmethod
    def from_config(cls, bus: MessageBus, config: ExtensionConfig) -> "BackgroundService":
        return cls(bus, BackendRelay(config.backend_url), KeepAlive(config.keepalive_seconds))

    def start(self):
        self.bus.register(BACKGROUND, self.on_message)
        self.keepalive.start()
        logger.info("Background relay started (backend: %s)", self.relay.backend_url)

    def stop(self):
        self.bus.unregister(BACKGROUND)
        self.keepalive.stop()

    def on_message(self, request: dict) -> Optional[dict]:
        action = request.get("action")
        if action == "analyzeProfile":
            return self.handle_profile_analysis(request.get("profileData"))
        if action == "checkBackendStatus":
            return self.handle_check_status()
        if action == "pageLoaded":
            logger.info("Profile page loaded: %s", request.get("platform"))
            return {"success": True}
        logger.debug("Unhandled message action: %s", action)
        return None

    def handle_profile_analysis(self, profile_data) -> dict:
        try:
            profile = ProfileData.model_validate(profile_data or {})
            result = self.relay.analyze(profile)
            return Envelope.ok(result.to_wire())
        except Exception as e:
            logger.error("Profile analysis error: %s", e)
            return Envelope.fail(str(e) or ANALYSIS_FAILED)

    def handle_check_status(self) -> dict:
        status = self.relay.check_status()
        return {"success": status == "connected", "status": status}
