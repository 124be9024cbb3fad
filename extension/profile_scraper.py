# profile_scraper.py
"""
Selector-based profile extraction for LinkedIn and Instagram pages.

Each single-valued field has a ranked list of CSS selectors, ordered from
the current site markup down to older fallbacks. The first selector whose
first match has non-empty trimmed text wins. List-valued fields (skills,
stats, post captions) collect every match across their selectors, dedupe
and cap.

Every field is extracted inside its own guard, so a broken selector or odd
markup only blanks that one field.
"""

import logging
import re
from typing import Callable, Dict, List, NamedTuple, Optional

from bs4 import BeautifulSoup
from bs4.element import Tag

from .models import Platform, ProfileData
from .page import PageSnapshot
from .platform import detect_platform

logger = logging.getLogger(__name__)

Matcher = Callable[[BeautifulSoup], Optional[str]]

# -------------------------------------------------------------------
# Selectors
# -------------------------------------------------------------------
LINKEDIN_SELECTORS: Dict[str, List[str]] = {
    "name": [
        "h1.text-heading-xlarge",
        ".pv-text-details__left-panel h1",
        ".ph5 h1",
        "[data-anonymize='person-name']",
    ],
    "headline": [
        ".text-body-medium.break-words",
        ".pv-text-details__left-panel .text-body-medium",
        ".ph5 .text-body-medium",
    ],
    "job_title": [
        ".pv-text-details__left-panel .pvs-list__item--line-separated .mr1.t-bold span[aria-hidden='true']",
        ".experience-section .pv-entity__summary-info h3",
        ".pv-top-card .pv-top-card__list-bullet-entity",
    ],
    "company": [
        ".pv-text-details__left-panel .pvs-list__item--line-separated .t-14.t-normal span[aria-hidden='true']",
        ".experience-section .pv-entity__secondary-title",
        ".pv-top-card .pv-top-card__list-bullet-entity-item",
    ],
    "location": [
        ".pv-text-details__left-panel .text-body-small.inline.t-black--light.break-words",
        ".pv-top-card__list-bullet-entity .t-16.t-black.t-normal",
    ],
    "recent_activity": [
        ".pv-recent-activity-section .pv-entity__summary-info p",
        ".feed-shared-text .break-words span[dir='ltr']",
    ],
}

LINKEDIN_SKILL_SELECTORS = [
    ".pvs-list__item--line-separated .mr1.hoverable-link-text.t-bold span[aria-hidden='true']",
    ".pv-skill-category-entity__name-text",
]

INSTAGRAM_SELECTORS: Dict[str, List[str]] = {
    "name": [
        "header section h2",
        "h1._7UhW9",
        "h2._7UhW9",
    ],
    "headline": [
        "header section div.-vDIg span",
        "div._aacl._aaco._aacw._aacx._aad7._aade",
    ],
}

INSTAGRAM_STAT_SELECTORS = [
    "header section ul li span",
    "header section ul li a span",
]

INSTAGRAM_POST_SELECTORS = [
    "article div img[alt]",
    "div._aagu img[alt]",
]

SKILLS_CAP = 5
STATS_CAP = 5
POSTS_CAP = 3
POST_CAPTION_MAX = 80

# Closed keyword set; anything else in a bio is ignored.
TITLE_KEYWORDS = [
    "CEO", "CTO", "Manager", "Engineer", "Designer", "Developer", "Director",
    "Co-founder", "Founder", "VP", "President", "Analyst", "Consultant",
    "Specialist", "Coordinator", "Lead", "Senior", "Junior", "Associate",
]
_KW = "|".join(re.escape(k) for k in TITLE_KEYWORDS)
JOB_PATTERN = re.compile(
    rf"((?:(?:{_KW})\s+)*(?:{_KW}))\s+(?:at|@)\s+([^|\n]+)",
    re.IGNORECASE,
)


# -------------------------------------------------------------------
# Matchers
# -------------------------------------------------------------------
class FieldResult(NamedTuple):
    name: str
    value: str
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def element_text(el: Tag) -> str:
    # Images carry their caption in alt; textContent of an <img> is empty.
    if el.name == "img":
        return (el.get("alt") or "").strip()
    return el.get_text().strip()


def css(selector: str) -> Matcher:
    def match(doc: BeautifulSoup) -> Optional[str]:
        el = doc.select_one(selector)
        if el is None:
            return None
        return element_text(el) or None
    return match


def first_match(doc: BeautifulSoup, matchers: List[Matcher]) -> str:
    for matcher in matchers:
        text = matcher(doc)
        if text:
            return text
    return ""


def text_by_selectors(doc: BeautifulSoup, selectors: List[str]) -> str:
    return first_match(doc, [css(s) for s in selectors])


def all_text_by_selectors(doc: BeautifulSoup, selectors: List[str]) -> List[str]:
    results: List[str] = []
    for selector in selectors:
        for el in doc.select(selector):
            text = element_text(el)
            if text and text not in results:
                results.append(text)
    return results


def extract_job(bio: str) -> tuple:
    """Best-effort (job_title, company) from free-text bio. ("", "") when nothing matches."""
    if not bio:
        return "", ""
    m = JOB_PATTERN.search(bio)
    if not m:
        return "", ""
    return m.group(1).strip(), m.group(2).strip()


def _field(name: str, fn: Callable[[], str]) -> FieldResult:
    try:
        return FieldResult(name, fn() or "")
    except Exception as e:
        logger.warning("Failed to extract %s: %s", name, e)
        return FieldResult(name, "", error=str(e))


def _merge(platform: Platform, results: List[FieldResult]) -> ProfileData:
    failed = [r.name for r in results if not r.ok]
    if failed:
        logger.info("Extraction degraded for %s fields: %s", platform.value, ", ".join(failed))
    return ProfileData(platform=platform, **{r.name: r.value for r in results})


# -------------------------------------------------------------------
# Platform extractors
# -------------------------------------------------------------------
def scrape_linkedin(doc: BeautifulSoup) -> ProfileData:
    results = [
        _field(name, lambda sels=sels: text_by_selectors(doc, sels))
        for name, sels in LINKEDIN_SELECTORS.items()
    ]
    results.append(_field(
        "interests",
        lambda: ", ".join(all_text_by_selectors(doc, LINKEDIN_SKILL_SELECTORS)[:SKILLS_CAP]),
    ))
    return _merge(Platform.LINKEDIN, results)


def scrape_instagram(doc: BeautifulSoup) -> ProfileData:
    name = _field("name", lambda: text_by_selectors(doc, INSTAGRAM_SELECTORS["name"]))
    headline = _field("headline", lambda: text_by_selectors(doc, INSTAGRAM_SELECTORS["headline"]))

    title, org = extract_job(headline.value)
    job_title, company = FieldResult("job_title", title), FieldResult("company", org)

    stats = _field(
        "interests",
        lambda: " • ".join(all_text_by_selectors(doc, INSTAGRAM_STAT_SELECTORS)[:STATS_CAP]),
    )
    posts = _field(
        "recent_activity",
        lambda: ", ".join(
            t[:POST_CAPTION_MAX]
            for t in all_text_by_selectors(doc, INSTAGRAM_POST_SELECTORS)[:POSTS_CAP]
        ),
    )
    return _merge(Platform.INSTAGRAM, [name, headline, job_title, company, stats, posts])


EXTRACTORS = {
    Platform.LINKEDIN: scrape_linkedin,
    Platform.INSTAGRAM: scrape_instagram,
}


def extract(document: BeautifulSoup, platform: Platform) -> ProfileData:
    extractor = EXTRACTORS.get(platform)
    if extractor is None:
        return ProfileData(platform=Platform.UNKNOWN)
    return extractor(document)


def scrape_current_profile(page: PageSnapshot) -> ProfileData:
    """Scrape whatever profile the page shows; unknown on any page-level failure."""
    platform = detect_platform(page.hostname)
    try:
        return extract(page.document, platform)
    except Exception as e:
        logger.error("Error scraping profile at %s: %s", page.url, e)
        return ProfileData(platform=Platform.UNKNOWN)
