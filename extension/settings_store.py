# settings_store.py
"""
The two platform toggles from the popup settings panel, kept in a small
JSON file. A toggle that was never saved counts as enabled.
"""

import json
import logging
import os
from typing import Dict

from .models import Platform

logger = logging.getLogger(__name__)

KEYS = {
    Platform.LINKEDIN: "linkedinEnabled",
    Platform.INSTAGRAM: "instagramEnabled",
}


def _read_json(path: str, fallback):
    try:
        with open(path, "r") as f:
            return json.load(f)
    except (OSError, ValueError):
        return fallback


def _write_json(path: str, data):
    with open(path, "w") as f:
        json.dump(data, f, indent=2)


class SettingsStore:
    def __init__(self, path: str):
        self.path = path

    def load(self) -> Dict[str, bool]:
        raw = _read_json(self.path, {})
        if not isinstance(raw, dict):
            logger.warning("Ignoring malformed settings file %s", self.path)
            raw = {}
        # anything but an explicit false means enabled
        return {key: raw.get(key) is not False for key in KEYS.values()}

    def save(self, linkedin_enabled: bool, instagram_enabled: bool) -> Dict[str, bool]:
        data = {
            KEYS[Platform.LINKEDIN]: bool(linkedin_enabled),
            KEYS[Platform.INSTAGRAM]: bool(instagram_enabled),
        }
        parent = os.path.dirname(os.path.abspath(self.path))
        os.makedirs(parent, exist_ok=True)
        _write_json(self.path, data)
        return data

    def is_enabled(self, platform: Platform) -> bool:
        key = KEYS.get(platform)
        if key is None:
            return False
        return self.load()[key]
