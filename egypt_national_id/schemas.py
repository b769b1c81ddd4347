"""
Pydantic schemas for national IDs.

This module defines the serialized view of a national ID and a string
field type that other Pydantic models can use to accept only valid IDs.
"""
from datetime import date
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field

from .demographics import Gender, Generation
from .governorates import Governorate, Region
from .validators import decode_national_id


def _validate_national_id(v: str) -> str:
    """Reject anything that is not a checksum-valid national ID"""
    # NationalIdValidationError is a ValueError, so Pydantic reports it as a field error
    decode_national_id(v)
    return v


EgyptianNationalIdStr = Annotated[str, AfterValidator(_validate_national_id)]


class NationalIdDetails(BaseModel):
    """
    Pydantic model for a decoded national ID.

    Used for serializing an ID and its derived attributes.
    """
    national_id: str = Field(..., description="National ID (14 digits)")
    formatted: str = Field(..., description="National ID grouped with dashes")
    birth_date: date = Field(..., description="Date of birth")
    gender: Gender = Field(..., description="Gender encoded by the serial")
    gender_name_ar: str = Field(..., description="Gender in Arabic")
    governorate: Governorate = Field(..., description="Two-digit governorate code")
    governorate_name: str = Field(..., description="Governorate name in English")
    governorate_name_ar: str = Field(..., description="Governorate name in Arabic")
    region: Region = Field(..., description="Region of the governorate")
    generation: Generation = Field(..., description="Generation band of the birth year")
    is_from_upper_egypt: bool = Field(..., description="Born in an Upper Egypt governorate")

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "national_id": "30101010123458",
                "formatted": "3-010101-01-2345-8",
                "birth_date": "2001-01-01",
                "gender": "Male",
                "gender_name_ar": "ذكر",
                "governorate": "01",
                "governorate_name": "Cairo",
                "governorate_name_ar": "القاهرة",
                "region": "GreaterCairo",
                "generation": "GenerationZ",
                "is_from_upper_egypt": False
            }
        }
    )
