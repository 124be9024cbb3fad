# page.py
"""
Page snapshot handed to the content script: the URL it was loaded from
plus the HTML, parsed once into a BeautifulSoup document.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

import requests
from bs4 import BeautifulSoup

from .platform import host_of

logger = logging.getLogger(__name__)

HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/122.0.0.0 Safari/537.36"
    )
}


@dataclass
class PageSnapshot:
    url: str
    html: str
    _document: Optional[BeautifulSoup] = field(default=None, init=False, repr=False)

    @property
    def hostname(self) -> str:
        return host_of(self.url)

    @property
    def document(self) -> BeautifulSoup:
        if self._document is None:
            self._document = BeautifulSoup(self.html or "", "html.parser")
        return self._document

    @classmethod
    def from_file(cls, path: str, url: str) -> "PageSnapshot":
        with open(path, "r", encoding="utf-8") as f:
            return cls(url=url, html=f.read())


def normalize_url(url: str) -> str:
    if not url:
        return ""
    u = url.strip()
    if not u.startswith("http://") and not u.startswith("https://"):
        u = "https://" + u.lstrip("/")
    return u


def fetch_page(url: str, timeout: int = 12) -> str:
    """Fetch a public page. Returns "" on any failure; most profiles need a logged-in browser."""
    try:
        resp = requests.get(normalize_url(url), headers=HEADERS, timeout=timeout)
        if resp.status_code != 200:
            logger.warning("Fetch of %s returned HTTP %s", url, resp.status_code)
            return ""
        return resp.text
    except requests.RequestException as e:
        logger.warning("Fetch of %s failed: %s", url, e)
        return ""
