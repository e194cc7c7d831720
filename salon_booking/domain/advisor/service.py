"""Style advisor - suggests catalog services for a free-text request using Gemini"""

import logging
from typing import Optional

import httpx

from ...config import GEMINI_API_KEY, GEMINI_API_URL, GEMINI_MODEL, GEMINI_TIMEOUT_SECONDS
from ..catalog.schemas import Service

logger = logging.getLogger(__name__)

ADVISOR_UNAVAILABLE_MESSAGE = "API key not configured. The AI style advisor is unavailable right now."
ADVISOR_EMPTY_MESSAGE = "Sorry, I could not process your request."
ADVISOR_ERROR_MESSAGE = "An error occurred while consulting the AI advisor."


def build_prompt(query: str, services: list[Service]) -> str:
    service_list = ", ".join(f"{s.name} ({s.durationMinutes} min)" for s in services)
    return (
        "You are the style consultant of a premium barbershop.\n"
        f'The client asked: "{query}".\n\n'
        f"Our available services are: {service_list}.\n\n"
        "Answer briefly and elegantly and suggest which of our services best fits the request.\n"
        "Do not use complex markdown, only plain text and line breaks."
    )


def extract_text(payload: dict) -> Optional[str]:
    """Pull the first text part out of a generateContent response"""
    for candidate in payload.get("candidates") or []:
        for part in (candidate.get("content") or {}).get("parts") or []:
            text = part.get("text")
            if text:
                return text.strip()
    return None


class StyleAdvisorService:
    """Gemini-backed consultant; every failure degrades to a fixed message"""

    def __init__(
        self,
        api_key: Optional[str] = GEMINI_API_KEY,
        model: str = GEMINI_MODEL,
        base_url: str = GEMINI_API_URL,
        timeout: float = GEMINI_TIMEOUT_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    async def get_style_advice(self, query: str, services: list[Service]) -> str:
        if not self.api_key:
            return ADVISOR_UNAVAILABLE_MESSAGE

        url = f"{self.base_url}/{self.model}:generateContent"
        body = {"contents": [{"parts": [{"text": build_prompt(query, services)}]}]}

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(url, params={"key": self.api_key}, json=body)
            if response.status_code != 200:
                logger.error(f"❌ Gemini API error: HTTP {response.status_code}")
                return ADVISOR_ERROR_MESSAGE
            return extract_text(response.json()) or ADVISOR_EMPTY_MESSAGE
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"❌ Gemini API request failed: {str(e)}")
            return ADVISOR_ERROR_MESSAGE
