from typing import Any, Dict, Optional
from fastapi import APIRouter, Depends, Header, HTTPException
from pymongo.errors import PyMongoError

from .AuthSchemas import LoginRequest, LoginResponse, MessageResponse, SignupRequest
from ..services import auth
from ..services.mongoDB import DuplicateUserError, mongoDB
from ..settings.logging import app_logger
from ..utils.jsonify import parse_dob, serialize_user, transform_frontend_to_backend_format_signup

router = APIRouter(prefix="/api/auth", tags=["auth"])


def get_current_user(authorization: Optional[str] = Header(None)) -> Dict[str, Any]:
    """Resolve the bearer token in the Authorization header to its user claim"""
    token = (authorization or "").replace("Bearer ", "", 1).strip()
    if not token:
        raise HTTPException(status_code=401, detail="No token, authorization denied")
    try:
        return auth.decode_access_token(token)
    except auth.InvalidTokenError as e:
        app_logger.info("Rejected token: %s", e)
        raise HTTPException(status_code=401, detail="Token is not valid")


@router.post("/signup", status_code=201, response_model=MessageResponse)
def signup(payload: SignupRequest):
    data = payload.model_dump()
    if not all(data.get(field) for field in ("username", "password", "email", "state", "dob")):
        raise HTTPException(status_code=400, detail="Please fill in all required fields.")
    if parse_dob(data["dob"]) is None:
        raise HTTPException(status_code=400, detail="Please provide a valid date of birth.")

    try:
        if mongoDB.find_by_username_or_email(data["username"], data["email"]):
            raise HTTPException(status_code=400, detail="Username or email already exists")

        user = transform_frontend_to_backend_format_signup(data, auth.hash_password(data["password"]))
        mongoDB.insert_user(user)
    except DuplicateUserError:
        raise HTTPException(status_code=400, detail="Username or email already exists")
    except PyMongoError as e:
        app_logger.error("Error during signup: %s", e)
        raise HTTPException(status_code=500, detail="Server error during user registration.")

    app_logger.info("Registered user %s", data["username"])
    return {"message": "User registered successfully! Please log in."}


@router.post("/login", response_model=LoginResponse)
def login(payload: LoginRequest):
    if not payload.username or not payload.password:
        raise HTTPException(status_code=400, detail="Please provide a username and password.")

    try:
        user = mongoDB.find_by_username(payload.username)
    except PyMongoError as e:
        app_logger.error("Error during login: %s", e)
        raise HTTPException(status_code=500, detail="Server error during login.")

    if not user or not auth.verify_password(payload.password, user.get("password", "")):
        app_logger.info("Failed login attempt for %s", payload.username)
        raise HTTPException(status_code=400, detail="Invalid credentials")

    try:
        token = auth.create_access_token(str(user["_id"]))
    except RuntimeError as e:
        app_logger.error("Error during login: %s", e)
        raise HTTPException(status_code=500, detail="Server error during login.")

    return {"token": token, "message": "Login successful!"}


@router.get("/profile")
def profile(current_user: Dict[str, Any] = Depends(get_current_user)):
    try:
        user = mongoDB.find_by_id(current_user["id"])
    except PyMongoError as e:
        app_logger.error("Error fetching profile: %s", e)
        raise HTTPException(status_code=500, detail="Server Error")

    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return serialize_user(user)
