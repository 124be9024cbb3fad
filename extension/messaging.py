# messaging.py
"""
In-process message bus between the extension surfaces.

Surfaces register a listener under a target name ("content", "background")
and exchange plain dict messages keyed by ``action``. Sending to a target
nobody listens on raises ReceivingEndMissing, the same way the browser
does while a service worker is still starting up.
"""

import logging
from typing import Callable, Dict, Optional

from .errors import ReceivingEndMissing

logger = logging.getLogger(__name__)

CONTENT = "content"
BACKGROUND = "background"

Listener = Callable[[dict], Optional[dict]]


class MessageBus:
    def __init__(self):
        self._listeners: Dict[str, Listener] = {}

    def register(self, target: str, listener: Listener) -> None:
        self._listeners[target] = listener

    def unregister(self, target: str) -> None:
        self._listeners.pop(target, None)

    def is_listening(self, target: str) -> bool:
        return target in self._listeners

    def send(self, target: str, message: dict) -> Optional[dict]:
        listener = self._listeners.get(target)
        if listener is None:
            raise ReceivingEndMissing("Could not establish connection. Receiving end does not exist.")
        logger.debug("-> %s %s", target, message.get("action"))
        return listener(message)
