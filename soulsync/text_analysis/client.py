import json
import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence

import httpx
from tenacity import AsyncRetrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from soulsync.core.config import get_openai_settings
from soulsync.text_analysis.prompts import (
    CHAT_MAX_TOKENS,
    HEALING_RECOMMENDATION_PROMPT,
    JOURNAL_ANALYSIS_PROMPT,
    coach_temperature,
)

logger = logging.getLogger(__name__)

ANALYSIS_FALLBACK_SUMMARY = "Unable to analyze entry. Please try again later."
CHAT_FALLBACK_REPLY = "I'm having trouble connecting at the moment. Please try again in a little while."
NEUTRAL_SENTIMENT = 5


def fallback_analysis() -> Dict[str, Any]:
    return {
        "sentimentScore": NEUTRAL_SENTIMENT,
        "emotionTags": ["neutral"],
        "chakraTags": [],
        "summary": ANALYSIS_FALLBACK_SUMMARY,
    }


def fallback_recommendations() -> Dict[str, Any]:
    return {
        "ritualTypes": ["meditation"],
        "focusChakras": [],
        "primaryEmotion": "neutral",
        "customAdvice": "Consider taking some quiet time for yourself today.",
    }


def _clamp_sentiment(value: Any) -> int:
    try:
        score = int(round(float(value)))
    except (TypeError, ValueError, OverflowError):
        return NEUTRAL_SENTIMENT
    return max(1, min(10, score))


def _string_list(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [str(item) for item in value if item]


class TextAnalysisError(Exception):
    """Raised internally when the completion endpoint returns something unusable."""
    pass


class TextAnalysisClient:
    """
    Async client for an OpenAI-compatible chat completions endpoint.

    Every public method returns a usable result: transport errors are retried,
    and anything that still fails is logged and replaced with a fallback.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: str = "https://api.openai.com/v1",
        model: str = "gpt-4o",
        timeout: float = 30.0,
        max_retries: int = 3,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.timeout = timeout
        self.max_retries = max(1, max_retries)

    @property
    def enabled(self) -> bool:
        return bool(self.api_key)

    async def _post_completion(self, payload: Dict[str, Any]) -> str:
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            response = await client.post(
                f"{self.base_url}/chat/completions",
                headers=headers,
                json=payload,
            )
            response.raise_for_status()
            data = response.json()

        choices = data.get("choices") or []
        if not choices:
            raise TextAnalysisError("Completion response missing choices field")
        content = ((choices[0] or {}).get("message") or {}).get("content")
        if content is None:
            raise TextAnalysisError("Completion response missing message content")
        return content

    async def complete(self, messages: Sequence[Mapping[str, Any]], **params: Any) -> str:
        """Sends one chat completion request, retrying transport failures."""
        payload: Dict[str, Any] = {"model": self.model, "messages": list(messages)}
        payload.update(params)

        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(self.max_retries),
            wait=wait_exponential(multiplier=0.5, min=0.5, max=4),
            retry=retry_if_exception_type(httpx.TransportError),
            reraise=True,
        ):
            with attempt:
                if attempt.retry_state.attempt_number > 1:
                    logger.info(f"Retrying completion request, attempt {attempt.retry_state.attempt_number}")
                return await self._post_completion(payload)

    async def _complete_json(self, system_prompt: str, user_content: str) -> Dict[str, Any]:
        content = await self.complete(
            [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_content},
            ],
            response_format={"type": "json_object"},
        )
        try:
            result = json.loads(content)
        except json.JSONDecodeError as e:
            raise TextAnalysisError(f"Completion content is not valid JSON: {e}")
        if not isinstance(result, dict):
            raise TextAnalysisError("Completion JSON is not an object")
        return result

    async def analyze(self, text: str) -> Dict[str, Any]:
        """Sentiment (1-10), emotion tags, chakra tags and a summary for a journal entry."""
        if not self.enabled:
            logger.warning("Text analysis API key not configured; returning fallback analysis")
            return fallback_analysis()
        try:
            result = await self._complete_json(JOURNAL_ANALYSIS_PROMPT, text)
        except (httpx.HTTPError, TextAnalysisError) as e:
            logger.error(f"Failed to analyze journal entry: {e}")
            return fallback_analysis()

        return {
            "sentimentScore": _clamp_sentiment(result.get("sentimentScore", NEUTRAL_SENTIMENT)),
            "emotionTags": _string_list(result.get("emotions", result.get("emotionTags"))),
            "chakraTags": _string_list(result.get("chakras", result.get("chakraTags"))),
            "summary": result.get("summary") or "No insights detected.",
        }

    async def chat(self, messages: Sequence[Mapping[str, Any]], coach_type: str) -> str:
        if not self.enabled:
            logger.warning("Text analysis API key not configured; returning fallback coach reply")
            return CHAT_FALLBACK_REPLY
        try:
            return await self.complete(
                messages,
                temperature=coach_temperature(coach_type),
                max_tokens=CHAT_MAX_TOKENS,
            )
        except (httpx.HTTPError, TextAnalysisError) as e:
            logger.error(f"Failed to generate {coach_type} chat response: {e}")
            return CHAT_FALLBACK_REPLY

    async def healing_recommendations(
        self, chakra_profile: Mapping[str, float], recent_emotions: List[str]
    ) -> Dict[str, Any]:
        if not self.enabled:
            logger.warning("Text analysis API key not configured; returning fallback recommendations")
            return fallback_recommendations()
        user_content = json.dumps({"chakraProfile": dict(chakra_profile), "recentEmotions": list(recent_emotions)})
        try:
            result = await self._complete_json(HEALING_RECOMMENDATION_PROMPT, user_content)
        except (httpx.HTTPError, TextAnalysisError) as e:
            logger.error(f"Failed to generate healing recommendations: {e}")
            return fallback_recommendations()

        return {
            "ritualTypes": _string_list(result.get("ritualTypes")) or ["meditation"],
            "focusChakras": _string_list(result.get("focusChakras")),
            "primaryEmotion": result.get("primaryEmotion") or "neutral",
            "customAdvice": result.get("customAdvice") or "Take time for self-care today.",
        }


def get_text_analysis_client() -> TextAnalysisClient:
    """FastAPI dependency building a client from the OPENAI_ settings."""
    settings = get_openai_settings()
    return TextAnalysisClient(
        api_key=settings.api_key,
        base_url=settings.base_url,
        model=settings.model,
        timeout=settings.timeout,
        max_retries=settings.max_retries,
    )
