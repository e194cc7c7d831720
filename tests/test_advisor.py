"""Tests for the Gemini style advisor"""

import json

import httpx
import pytest

from salon_booking.domain.advisor.router import get_advisor_service
from salon_booking.domain.advisor.service import (
    ADVISOR_EMPTY_MESSAGE,
    ADVISOR_ERROR_MESSAGE,
    ADVISOR_UNAVAILABLE_MESSAGE,
    StyleAdvisorService,
    build_prompt,
)
from salon_booking.domain.catalog.repository import ServiceRepository
from salon_booking.main import app


def gemini_reply(text):
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


def advisor_with(handler):
    return StyleAdvisorService(
        api_key="test-key",
        model="gemini-test",
        base_url="https://gemini.test/v1beta/models",
        transport=httpx.MockTransport(handler),
    )


class TestStyleAdvisor:
    @pytest.mark.asyncio
    async def test_missing_api_key_returns_unavailable_message(self, catalog):
        advisor = StyleAdvisorService(api_key=None)

        advice = await advisor.get_style_advice("beard trim", ServiceRepository.get_services(catalog))

        assert advice == ADVISOR_UNAVAILABLE_MESSAGE

    @pytest.mark.asyncio
    async def test_successful_reply(self, catalog):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json=gemini_reply("  Try the Barba Terapia.  "))

        advice = await advisor_with(handler).get_style_advice(
            "my beard is a mess", ServiceRepository.get_services(catalog)
        )

        assert advice == "Try the Barba Terapia."
        assert seen["url"].startswith("https://gemini.test/v1beta/models/gemini-test:generateContent")
        assert "key=test-key" in seen["url"]
        prompt = seen["body"]["contents"][0]["parts"][0]["text"]
        assert "my beard is a mess" in prompt
        assert "Barba Terapia (30 min)" in prompt

    @pytest.mark.asyncio
    async def test_http_error_status_degrades(self):
        advisor = advisor_with(lambda request: httpx.Response(500, json={"error": "boom"}))

        assert await advisor.get_style_advice("help", []) == ADVISOR_ERROR_MESSAGE

    @pytest.mark.asyncio
    async def test_network_failure_degrades(self):
        def handler(request):
            raise httpx.ConnectError("unreachable", request=request)

        assert await advisor_with(handler).get_style_advice("help", []) == ADVISOR_ERROR_MESSAGE

    @pytest.mark.asyncio
    async def test_reply_without_text(self):
        advisor = advisor_with(lambda request: httpx.Response(200, json={"candidates": []}))

        assert await advisor.get_style_advice("help", []) == ADVISOR_EMPTY_MESSAGE


def test_prompt_lists_every_service(catalog):
    prompt = build_prompt("fade", ServiceRepository.get_services(catalog))

    assert '"fade"' in prompt
    for name in ["Corte Clássico", "Barba Terapia", "Corte + Barba (Combo)", "Pezinho / Acabamento"]:
        assert name in prompt


def test_advisor_endpoint(seeded_client):
    app.dependency_overrides[get_advisor_service] = lambda: advisor_with(
        lambda request: httpx.Response(200, json=gemini_reply("Corte Clássico."))
    )

    response = seeded_client.post("/advisor", json={"query": "something classic"})

    assert response.status_code == 200
    assert response.json() == {"advice": "Corte Clássico."}
