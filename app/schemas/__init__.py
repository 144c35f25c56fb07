"""
Schemas module - Request/Response schemas for API endpoints.
"""
from app.schemas.schemas import (
    CertificationCreate,
    InternshipCreate,
    SkillCreate,
    RegisterRequest,
    LoginRequest,
    TokenResponse,
    UserResponse,
    MessageResponse,
)

__all__ = [
    "CertificationCreate",
    "InternshipCreate",
    "SkillCreate",
    "RegisterRequest",
    "LoginRequest",
    "TokenResponse",
    "UserResponse",
    "MessageResponse",
]
