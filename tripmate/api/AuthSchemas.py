from pydantic import BaseModel
from typing import Optional


class SignupRequest(BaseModel):
    """Registration form. Fields are optional here so that missing ones get a 400, not a 422"""
    username: Optional[str] = None
    password: Optional[str] = None
    email: Optional[str] = None
    state: Optional[str] = None
    phone: Optional[str] = None
    dob: Optional[str] = None


class LoginRequest(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None


class MessageResponse(BaseModel):
    message: str


class LoginResponse(BaseModel):
    token: str
    message: str
