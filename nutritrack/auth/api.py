# -*- coding: utf-8 -*-
"""Auth — roster login endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Response

from ..config import settings
from ..directory import UserDirectory
from ..preferences import PreferenceStore
from .models import AuthResponse, DisplayNameRequest, LoginRequest, UserIdsResponse, UserPublic
from .security import TOKEN_COOKIE_NAME, current_user, issue_session_token

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["Auth"])


def _user_public(user_id: str, store: PreferenceStore) -> UserPublic:
    return UserPublic(id=user_id, name=store.user_name)


def _set_auth_cookie(resp: Response, token: str) -> None:
    max_age = int(settings.token_ttl_days) * 24 * 60 * 60
    resp.set_cookie(
        TOKEN_COOKIE_NAME,
        token,
        httponly=True,
        secure=bool(settings.cookie_secure),
        samesite="lax",
        max_age=max_age,
        path="/",
    )


@router.get("/users", response_model=UserIdsResponse, summary="List roster user ids")
def list_users():
    return UserIdsResponse(user_ids=sorted(UserDirectory().list_user_ids()))


@router.post("/login", response_model=AuthResponse, summary="Login with user id + phone number")
def login(request: LoginRequest, response: Response):
    directory = UserDirectory()
    if not directory.validate(request.user_id, request.phone_number):
        logger.warning("Rejected login for user id %s", request.user_id.strip())
        raise HTTPException(status_code=401, detail="Invalid ID or Phone Number. Please try again.")

    user_id = request.user_id.strip()
    store = PreferenceStore(user_id)
    store.phone_number = request.phone_number
    entry = directory.lookup(user_id)
    if entry is not None and entry.sex:
        store.sex = entry.sex

    token = issue_session_token(user_id)
    _set_auth_cookie(response, token)
    logger.info("User %s logged in", user_id)
    return AuthResponse(user=_user_public(user_id, store), token=token)


@router.post("/logout", summary="Logout")
def logout(response: Response):
    response.delete_cookie(TOKEN_COOKIE_NAME, path="/")
    return {"status": "ok"}


@router.get("/me", response_model=UserPublic, summary="Get current user")
def me(user: dict = Depends(current_user)):
    return _user_public(user["id"], PreferenceStore(user["id"]))


@router.put("/me/name", response_model=UserPublic, summary="Set display name")
def set_display_name(request: DisplayNameRequest, user: dict = Depends(current_user)):
    name = request.name.strip()
    if not name:
        raise HTTPException(status_code=422, detail="Name must not be blank")
    store = PreferenceStore(user["id"])
    store.user_name = name
    return _user_public(user["id"], store)
