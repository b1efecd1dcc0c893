from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status

from smartnotes.config import data_dir
from smartnotes.models.auth import LoginRequest, RegisterRequest, RegisterResponse, TokenResponse
from smartnotes.storage.users_store import UsersStore
from smartnotes.utils.auth_hash import hash_password, verify_password
from smartnotes.utils.jwt_auth import create_access_token

router = APIRouter(prefix="/auth", tags=["auth"])
logger = logging.getLogger(__name__)

DATA_DIR = data_dir()
users = UsersStore(DATA_DIR)


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
def register(req: RegisterRequest) -> RegisterResponse:
    if users.find_by_email(req.email) is not None:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="User exists")

    hpw = hash_password(req.password)  # never store plaintext
    try:
        rec = users.create(req.email, hpw, full_name=req.full_name)
    except FileExistsError:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="User exists")

    logger.info("user registered id=%s", rec.user_id)
    return RegisterResponse(user_id=rec.user_id, email=rec.email, full_name=rec.full_name)


@router.post("/login", response_model=TokenResponse)
def login(req: LoginRequest) -> TokenResponse:
    rec = users.find_by_email(req.email)
    if rec is None or not rec.is_active:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")

    if not verify_password(req.password, rec.hashed_password):
        logger.info("login rejected user=%s", rec.user_id)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")

    token = create_access_token(subject=rec.user_id, email=rec.email)
    return TokenResponse(access_token=token)
