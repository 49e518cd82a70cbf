"""Pydantic schemas for auth endpoints."""

from typing import Optional

from pydantic import BaseModel

from tenancy_engine.users.schemas import UserPublic


class RegisterRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None
    name: Optional[str] = None


class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class AuthResponse(BaseModel):
    user: UserPublic
    token: str


class MeResponse(BaseModel):
    user: UserPublic
