from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from extension.models import AnalysisResult, Platform, ProfileData

RESULT_JSON = json.dumps({
    "connections": [
        {"title": "B", "subtitle": "second", "link": ""},
        {"title": "A", "subtitle": "first", "link": "https://example.com"},
    ],
    "communication_starters": [{"prompt": "z"}, {"prompt": "y"}, {"prompt": "x"}],
    "interest_expansions": [{"topic": "Rust", "why": "systems"}],
})


def test_analysis_result_round_trip_keeps_keys_and_order():
    result = AnalysisResult.model_validate(json.loads(RESULT_JSON))
    again = json.loads(json.dumps(result.to_wire()))
    assert list(again) == ["connections", "communication_starters", "interest_expansions"]
    assert [c["title"] for c in again["connections"]] == ["B", "A"]
    assert [s["prompt"] for s in again["communication_starters"]] == ["z", "y", "x"]
    assert again == json.loads(RESULT_JSON)


def test_analysis_result_fills_missing_item_fields_with_strings():
    result = AnalysisResult.model_validate({
        "connections": [{"title": "Only title", "link": None}],
        "communication_starters": [],
        "interest_expansions": [{"topic": 42}],
    })
    assert result.connections[0].subtitle == ""
    assert result.connections[0].link == ""
    assert result.interest_expansions[0].topic == "42"


def test_analysis_result_rejects_wrong_shape():
    with pytest.raises(ValidationError):
        AnalysisResult.model_validate({"connections": []})
    with pytest.raises(ValidationError):
        AnalysisResult.model_validate({
            "connections": [], "communication_starters": [], "interest_expansions": [], "extra": [],
        })


def test_profile_data_never_null_and_camel_case_on_the_wire():
    profile = ProfileData.model_validate({"platform": "myspace", "name": None, "jobTitle": "CTO"})
    assert profile.platform == Platform.UNKNOWN
    wire = profile.to_wire()
    assert wire["name"] == ""
    assert wire["jobTitle"] == "CTO"
    assert wire["recentActivity"] == ""
    assert len(wire) == 8
