"""Advisor router - AI style consultant endpoint"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from ...store import RecordStore, get_store
from ..catalog.repository import ServiceRepository
from .service import StyleAdvisorService

router = APIRouter(prefix="/advisor", tags=["Advisor"])


class AdviceRequest(BaseModel):
    query: str = Field(min_length=1, max_length=1000)


class AdviceResponse(BaseModel):
    advice: str


def get_advisor_service() -> StyleAdvisorService:
    """Dependency injection for StyleAdvisorService"""
    return StyleAdvisorService()


@router.post("", response_model=AdviceResponse)
async def get_style_advice(
    data: AdviceRequest,
    store: RecordStore = Depends(get_store),
    advisor: StyleAdvisorService = Depends(get_advisor_service),
):
    """Suggest catalog services for a free-text request"""
    services = ServiceRepository.get_services(store)
    advice = await advisor.get_style_advice(data.query, services)
    return AdviceResponse(advice=advice)
