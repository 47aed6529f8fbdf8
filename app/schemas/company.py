import re
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

CONTACT_NUMBER_PATTERN = re.compile(r"^[0-9]{2,3}-[0-9]{3,4}-[0-9]{4}$")


class CompanyCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    location: str = Field(min_length=1, max_length=255)
    industry: str = Field(min_length=1, max_length=255)
    website: Optional[str] = None
    contact_number: str

    @field_validator("contact_number")
    @classmethod
    def _check_contact_number(cls, value: str) -> str:
        if not CONTACT_NUMBER_PATTERN.match(value):
            raise ValueError("전화번호는 000-000-0000나 000-0000-0000 형식이어야 합니다.")
        return value


class CompanyResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    location: Optional[str] = None
    industry: Optional[str] = None
    website: Optional[str] = None
    contact_number: Optional[str] = None
    created_at: Optional[datetime] = None
