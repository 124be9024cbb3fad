from __future__ import annotations

import json

from extension.models import Platform
from extension.settings_store import SettingsStore


def test_defaults_to_enabled_when_missing(tmp_path):
    store = SettingsStore(str(tmp_path / "missing.json"))
    assert store.load() == {"linkedinEnabled": True, "instagramEnabled": True}


def test_save_and_reload(tmp_path):
    path = tmp_path / "nested" / "settings.json"
    store = SettingsStore(str(path))
    store.save(linkedin_enabled=True, instagram_enabled=False)
    assert json.loads(path.read_text()) == {"linkedinEnabled": True, "instagramEnabled": False}
    assert store.is_enabled(Platform.LINKEDIN) is True
    assert store.is_enabled(Platform.INSTAGRAM) is False
    assert store.is_enabled(Platform.UNKNOWN) is False


def test_malformed_file_falls_back_to_enabled(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("[1, 2")
    assert SettingsStore(str(path)).load() == {"linkedinEnabled": True, "instagramEnabled": True}
    path.write_text('{"linkedinEnabled": "no"}')
    assert SettingsStore(str(path)).load()["linkedinEnabled"] is True
