# platform.py
"""
Classifies the current page by hostname/path.
Pure string checks, no network or DOM access.
"""

from urllib.parse import urlparse

from .models import Platform

PLATFORM_HOSTS = {
    "linkedin.com": Platform.LINKEDIN,
    "instagram.com": Platform.INSTAGRAM,
}

LINKEDIN_PROFILE_PATHS = ("/in/", "/profile/")
INSTAGRAM_NON_PROFILE_PATHS = ("/explore", "/reels")


def detect_platform(hostname: str) -> Platform:
    host = (hostname or "").lower()
    for needle, platform in PLATFORM_HOSTS.items():
        if needle in host:
            return platform
    return Platform.UNKNOWN


def _path_of(url: str) -> str:
    try:
        return urlparse(url or "").path
    except ValueError:
        return ""


def host_of(url: str) -> str:
    try:
        return urlparse(url or "").hostname or ""
    except ValueError:
        return ""


def is_profile_page(platform: Platform, url: str) -> bool:
    path = _path_of(url)
    if platform == Platform.LINKEDIN:
        return any(p in path for p in LINKEDIN_PROFILE_PATHS)
    if platform == Platform.INSTAGRAM:
        if path in ("", "/"):
            return False
        return not any(p in path for p in INSTAGRAM_NON_PROFILE_PATHS)
    return False


def is_supported_url(url: str) -> bool:
    return detect_platform(host_of(url)) != Platform.UNKNOWN


def classify_url(url: str) -> tuple:
    """Return (platform, is_profile) for a full page URL."""
    platform = detect_platform(host_of(url))
    return platform, is_profile_page(platform, url)
