# -*- coding: utf-8 -*-
"""Auth — Pydantic models."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    user_id: str = Field(..., min_length=1, max_length=64)
    phone_number: str = Field(..., min_length=1, max_length=32)


class UserPublic(BaseModel):
    id: str
    name: str = ""


class AuthResponse(BaseModel):
    user: UserPublic
    token: str


class UserIdsResponse(BaseModel):
    user_ids: List[str]


class DisplayNameRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=64)
