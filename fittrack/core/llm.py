"""
LLM integration for calorie estimates.

Statistics ask an estimator for a short completion and pull the first integer
out of it. The OpenAI-backed estimator is used when an API key is configured;
otherwise a disabled estimator stands in so callers take their fallback path.
Estimators raise ``ExternalServiceError`` on any failure and never return junk.
"""
from __future__ import annotations

import logging
import re
from typing import Optional, Protocol

from openai import OpenAI

from .config import Settings
from .errors import ExternalServiceError

logger = logging.getLogger(__name__)

_INT_RE = re.compile(r"\d+")


class CalorieEstimator(Protocol):
    def complete(self, prompt: str) -> str: ...


def extract_first_int(text: Optional[str]) -> Optional[int]:
    """First run of digits in ``text`` as an int, or None."""
    if not text:
        return None
    m = _INT_RE.search(text)
    return int(m.group(0)) if m else None


class OpenAICalorieEstimator:
    def __init__(self, *, api_key: str, model: str = "gpt-4o", timeout: float = 10.0, max_tokens: int = 50):
        # One attempt, bounded by the timeout
        self.client = OpenAI(api_key=api_key, timeout=timeout, max_retries=0)
        self.model = model
        self.max_tokens = max_tokens

    def complete(self, prompt: str) -> str:
        try:
            resp = self.client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                max_tokens=self.max_tokens,
            )
            txt = resp.choices[0].message.content
        except Exception as exc:
            raise ExternalServiceError(f"LLM request failed: {exc}") from exc
        if not txt:
            raise ExternalServiceError("LLM returned an empty completion")
        return txt


class DisabledEstimator:
    def __init__(self, reason: str = "LLM disabled"):
        self.reason = reason

    def complete(self, prompt: str) -> str:
        raise ExternalServiceError(self.reason)


def build_estimator(settings: Settings) -> CalorieEstimator:
    if not settings.LLM_ENABLED:
        return DisabledEstimator("LLM disabled by configuration")
    if not settings.OPENAI_API_KEY:
        logger.info("OPENAI_API_KEY not set; calorie estimates will use fallbacks")
        return DisabledEstimator("OPENAI_API_KEY not set")
    return OpenAICalorieEstimator(
        api_key=settings.OPENAI_API_KEY,
        model=settings.LLM_MODEL,
        timeout=settings.LLM_TIMEOUT,
        max_tokens=settings.LLM_MAX_TOKENS,
    )


def estimate_calories(estimator: CalorieEstimator, prompt: str, *, fallback: int) -> int:
    """
    Ask the estimator and return a positive integer estimate, or ``fallback``.
    Never raises: enrichment must not break the caller.
    """
    try:
        reply = estimator.complete(prompt)
    except ExternalServiceError as exc:
        logger.warning("Calorie estimate unavailable, using fallback %s: %s", fallback, exc)
        return fallback
    except Exception:
        logger.exception("Calorie estimator crashed, using fallback %s", fallback)
        return fallback
    value = extract_first_int(reply)
    if value is None or value <= 0:
        logger.warning("No usable number in LLM reply %r, using fallback %s", reply, fallback)
        return fallback
    logger.debug("LLM estimated calories: %s", value)
    return value
