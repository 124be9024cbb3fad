# prompts.py
from typing import Any, Dict, Union

from extension.models import ProfileData

NOT_AVAILABLE = "Not available"

SYSTEM_PROMPT = (
    "You are an AI assistant that analyzes social media profiles and provides networking insights. "
    "Always respond with valid JSON in the exact format requested."
)

RESPONSE_SCHEMA = """{
  "connections": [
    {"title": "Connection suggestion title", "subtitle": "Why this connection makes sense", "link": ""},
    {"title": "Another connection idea", "subtitle": "Reasoning for this connection", "link": ""},
    {"title": "Third connection suggestion", "subtitle": "Why they should connect", "link": ""}
  ],
  "communication_starters": [
    {"prompt": "Personalized conversation starter based on their profile"},
    {"prompt": "Another engaging way to start a conversation"},
    {"prompt": "Third conversation starter idea"}
  ],
  "interest_expansions": [
    {"topic": "Related interest or opportunity", "why": "Why this would be valuable for them"},
    {"topic": "Another expansion opportunity", "why": "How this connects to their current interests"},
    {"topic": "Third interest expansion", "why": "Why this would benefit their growth"}
  ]
}"""

PROMPT_TEMPLATE = """
Analyze this {platform} profile and provide networking insights:

Profile Data:
- Name: {name}
- Headline/Bio: {headline}
- Job Title: {jobTitle}
- Company: {company}
- Location: {location}
- Interests/Skills: {interests}
- Recent Activity: {recentActivity}

Please respond with ONLY valid JSON in this exact format:
{schema}
"""

FIELDS = ["name", "headline", "jobTitle", "company", "location", "interests", "recentActivity"]


def build_prompt(profile: Union[ProfileData, Dict[str, Any]]) -> str:
    data = profile.to_wire() if isinstance(profile, ProfileData) else dict(profile)
    values = {f: (str(data.get(f) or "").strip() or NOT_AVAILABLE) for f in FIELDS}
    return PROMPT_TEMPLATE.format(
        platform=data.get("platform") or "unknown",
        schema=RESPONSE_SCHEMA,
        **values,
    )
