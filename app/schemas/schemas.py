"""
Pydantic Schemas - Request/Response Validation

All API request and response schemas in one file for simplicity.

Career record fields are snake_case in Python and camelCase on the wire and in
MongoDB (`start_date` <-> `startDate`), matching what the web client sends.
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel
from typing import Optional, List
from datetime import datetime
from enum import Enum


# ============================================================
# ENUMS
# ============================================================

class InternshipStatus(str, Enum):
    ongoing = "ongoing"
    completed = "completed"


class SkillCategory(str, Enum):
    technical = "technical"
    soft = "soft"
    tools = "tools"
    languages = "languages"
    other = "other"


class SkillStatus(str, Enum):
    learning = "learning"
    proficient = "proficient"
    expert = "expert"


# ============================================================
# AUTH SCHEMAS
# ============================================================

class RegisterRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=6)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name must not be blank")
        return v

class LoginRequest(BaseModel):
    email: EmailStr
    password: str

class UserResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id")
    name: str
    email: str
    created_at: Optional[datetime] = Field(None, alias="createdAt")

class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UserResponse


# ============================================================
# CAREER RECORD SCHEMAS
# Used for both create and update (PUT overwrites the whole record).
# Unknown keys such as owner, _id and createdAt are ignored.
# ============================================================

class RecordBase(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        use_enum_values=True,
        validate_default=True,
        extra="ignore",
    )


class InternshipCreate(RecordBase):
    company: str = Field(..., min_length=1)
    role: str = Field(..., min_length=1)
    start_date: datetime
    end_date: Optional[datetime] = None
    status: InternshipStatus = InternshipStatus.ongoing
    skills: List[str] = []
    notes: Optional[str] = None

    @field_validator("skills")
    @classmethod
    def drop_blank_skills(cls, v: List[str]) -> List[str]:
        return [s.strip() for s in v if s and s.strip()]


class SkillCreate(RecordBase):
    name: str = Field(..., min_length=1)
    proficiency: int = Field(1, ge=1, le=5)
    category: SkillCategory = SkillCategory.technical
    status: SkillStatus = SkillStatus.learning


class CertificationCreate(RecordBase):
    name: str = Field(..., min_length=1)
    platform: str = Field(..., min_length=1)
    completion_date: datetime
    certificate_link: Optional[str] = None
    credential_id: Optional[str] = None


# ============================================================
# GENERIC SCHEMAS
# ============================================================

class MessageResponse(BaseModel):
    message: str

class HealthResponse(BaseModel):
    status: str
    message: str

class ErrorResponse(BaseModel):
    message: str
    error: Optional[str] = None
