from __future__ import annotations

from backend.prompts import NOT_AVAILABLE, build_prompt
from extension.models import Platform, ProfileData


def test_prompt_renders_fields_and_placeholders():
    profile = ProfileData(platform=Platform.LINKEDIN, name="Jane Doe", company="Acme Corp")
    prompt = build_prompt(profile)
    assert "Analyze this linkedin profile" in prompt
    assert "- Name: Jane Doe" in prompt
    assert "- Company: Acme Corp" in prompt
    assert f"- Job Title: {NOT_AVAILABLE}" in prompt
    assert f"- Recent Activity: {NOT_AVAILABLE}" in prompt
    assert '"communication_starters"' in prompt


def test_prompt_from_partial_dict_is_deterministic():
    data = {"platform": "instagram", "headline": "Founder @ Tiny Labs"}
    first = build_prompt(data)
    assert first == build_prompt(dict(data))
    assert "- Headline/Bio: Founder @ Tiny Labs" in first
    assert first.count(NOT_AVAILABLE) == 6
