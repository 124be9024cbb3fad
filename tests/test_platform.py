from __future__ import annotations

from extension.models import Platform
from extension.platform import classify_url, detect_platform, is_profile_page, is_supported_url


def test_detect_platform_by_hostname():
    assert detect_platform("www.linkedin.com") == Platform.LINKEDIN
    assert detect_platform("de.linkedin.com") == Platform.LINKEDIN
    assert detect_platform("www.instagram.com") == Platform.INSTAGRAM
    assert detect_platform("example.com") == Platform.UNKNOWN
    assert detect_platform("") == Platform.UNKNOWN


def test_linkedin_profile_paths():
    assert is_profile_page(Platform.LINKEDIN, "https://www.linkedin.com/in/someone/") is True
    assert is_profile_page(Platform.LINKEDIN, "https://www.linkedin.com/profile/view?id=1") is True
    assert is_profile_page(Platform.LINKEDIN, "https://www.linkedin.com/feed/") is False


def test_instagram_profile_paths():
    assert is_profile_page(Platform.INSTAGRAM, "https://www.instagram.com/jane.codes/") is True
    assert is_profile_page(Platform.INSTAGRAM, "https://www.instagram.com/") is False
    assert is_profile_page(Platform.INSTAGRAM, "https://instagram.com") is False
    assert is_profile_page(Platform.INSTAGRAM, "https://www.instagram.com/explore/tags/x/") is False
    assert is_profile_page(Platform.INSTAGRAM, "https://www.instagram.com/reels/abc/") is False


def test_unknown_platform_is_never_a_profile():
    assert is_profile_page(Platform.UNKNOWN, "https://example.com/in/someone/") is False


def test_garbage_urls_do_not_raise():
    assert is_supported_url("not a url") is False
    assert classify_url("") == (Platform.UNKNOWN, False)
    assert classify_url("https://www.linkedin.com/in/jane/") == (Platform.LINKEDIN, True)
