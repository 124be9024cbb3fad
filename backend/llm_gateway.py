# llm_gateway.py
"""
Completion API call for profile analysis.

Model parameters are fixed policy. The OpenAI client's own retries are
switched off: a failed call surfaces straight to the /analyze handler.
"""

import json
import logging
import re
from typing import Optional

from openai import APIConnectionError, APIStatusError, OpenAI
from pydantic import ValidationError

from extension.models import AnalysisResult
from .errors import UpstreamFormatError, UpstreamTransportError, upstream_error_for
from .prompts import SYSTEM_PROMPT

logger = logging.getLogger(__name__)

MODEL = "gpt-3.5-turbo"
MAX_TOKENS = 1000
TEMPERATURE = 0.7

_FENCE = re.compile(r"^```(?:json)?\s*\n([\s\S]*?)\n```$")


def make_client(api_key: str) -> OpenAI:
    return OpenAI(
        api_key=api_key,
        max_retries=0,
        default_headers={"User-Agent": "FindnAI-Backend/1.0"},
    )


def parse_analysis(content: Optional[str]) -> AnalysisResult:
    text = (content or "").strip()
    m = _FENCE.match(text)
    if m:
        text = m.group(1)
    try:
        return AnalysisResult.model_validate(json.loads(text))
    except (ValueError, ValidationError) as e:
        logger.error("Failed to parse AI response as JSON: %r", content)
        raise UpstreamFormatError(f"Unparseable model output: {e}") from e


def call_completion_api(prompt: str, api_key: str, client: Optional[OpenAI] = None) -> AnalysisResult:
    client = client or make_client(api_key)
    logger.info("Calling OpenAI API with key: %s", f"{api_key[:7]}..." if api_key else "MISSING")

    try:
        resp = client.chat.completions.create(
            model=MODEL,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
            max_tokens=MAX_TOKENS,
            temperature=TEMPERATURE,
        )
    except APIStatusError as e:
        body = e.response.text if e.response is not None else str(e)
        logger.error("OpenAI API Error Response (%s): %s", e.status_code, body)
        raise upstream_error_for(e.status_code, body) from e
    except APIConnectionError as e:
        logger.error("Network error calling OpenAI: %s", e)
        raise UpstreamTransportError("Network error: Unable to reach OpenAI API") from e

    choices = getattr(resp, "choices", None)
    if not choices or getattr(choices[0], "message", None) is None:
        raise UpstreamFormatError("Invalid response format from OpenAI API")

    return parse_analysis(choices[0].message.content)
