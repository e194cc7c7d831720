"""Catalog domain schemas - Pydantic models for validation"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from ...shared.validators import validate_image_url


class Service(BaseModel):
    """A bookable offering as stored in the catalog"""

    id: str
    name: str
    price: float = Field(ge=0)
    durationMinutes: int = Field(gt=0)
    imageUrl: str
    description: Optional[str] = None


class ServiceCreate(BaseModel):
    """Schema for creating a new service"""

    name: str = Field(min_length=1, max_length=200)
    price: float = Field(ge=0)
    durationMinutes: int = Field(gt=0, le=24 * 60)
    imageUrl: Optional[str] = Field(None, validate_default=True)
    description: Optional[str] = Field(None, max_length=2000)

    @field_validator("imageUrl")
    @classmethod
    def validate_image(cls, v):
        return validate_image_url(v)


class ServiceUpdate(BaseModel):
    """Schema for partially updating an existing service"""

    name: Optional[str] = Field(None, min_length=1, max_length=200)
    price: Optional[float] = Field(None, ge=0)
    durationMinutes: Optional[int] = Field(None, gt=0, le=24 * 60)
    imageUrl: Optional[str] = None
    description: Optional[str] = Field(None, max_length=2000)

    @field_validator("imageUrl")
    @classmethod
    def validate_image(cls, v):
        if v is None:
            return v
        return validate_image_url(v)
