"""Auth API router. Validates requests and delegates to the service layer."""

from fastapi import APIRouter, Depends
from app.schemas.auth import AdminOut, LoginRequest, TokenResponse
from app.services.auth_service import authenticate_admin, create_access_token
from app.middleware.auth_middleware import get_current_admin

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/login", response_model=TokenResponse)
def login(request: LoginRequest):
    admin = authenticate_admin(request.username, request.password)
    token = create_access_token(admin.username)
    return TokenResponse(access_token=token, user=admin)


@router.post("/logout")
def logout(current_admin: AdminOut = Depends(get_current_admin)):
    return {"message": "Logged out."}


@router.get("/me", response_model=AdminOut)
def me(current_admin: AdminOut = Depends(get_current_admin)):
    return current_admin
