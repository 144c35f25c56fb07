"""
Authentication Routes

POST /auth/register - Register new user, returns JWT token
POST /auth/login - Login and get JWT token
GET /auth/me - Get current user info
"""

import logging

from fastapi import APIRouter, HTTPException, Depends
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError

from app.db.mongodb import get_mongo_db
from app.core.auth import hash_password, verify_password, create_access_token, get_current_user
from app.services.user_service import UserService, public_user
from app.schemas.schemas import RegisterRequest, LoginRequest, TokenResponse, UserResponse

router = APIRouter(prefix="/auth", tags=["Authentication"])
logger = logging.getLogger(__name__)


def _token_for(user: dict) -> TokenResponse:
    token = create_access_token(data={"sub": str(user["_id"])})
    return TokenResponse(access_token=token, user=UserResponse(**public_user(user)))


@router.post("/register", response_model=TokenResponse, status_code=201)
async def register(request: RegisterRequest, db: Database = Depends(get_mongo_db)):
    """
    Register a new user account.

    Returns an access token straight away, so no separate login is needed.
    """
    users = UserService(db)
    if users.get_by_email(request.email):
        raise HTTPException(status_code=400, detail="User already exists")

    try:
        user = users.create(request.name, request.email, hash_password(request.password))
    except DuplicateKeyError:
        # Lost a race with a concurrent registration for the same email
        raise HTTPException(status_code=400, detail="User already exists")

    logger.info("Registered user %s", user["_id"])
    return _token_for(user)


@router.post("/login", response_model=TokenResponse)
async def login(request: LoginRequest, db: Database = Depends(get_mongo_db)):
    """
    Login and receive JWT access token.

    Include token in requests: Authorization: Bearer <token>
    """
    user = UserService(db).get_by_email(request.email, with_password=True)
    if not user or not verify_password(request.password, user["password"]):
        raise HTTPException(status_code=401, detail="Invalid credentials")

    return _token_for(user)


@router.get("/me", response_model=UserResponse)
async def get_me(user: dict = Depends(get_current_user)):
    """Get current authenticated user's info."""
    return UserResponse(**public_user(user))
