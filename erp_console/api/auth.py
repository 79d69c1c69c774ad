"""
Session endpoints: login, logout, registration, current user

The bearer token returned by the backend is kept in an HTTP-only cookie.
"""
import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from erp_console.api.deps import get_api
from erp_console.core.config import settings
from erp_console.core.errors import SessionExpiredError
from erp_console.domain.auth import LoginRequest, RegisterRequest
from erp_console.repositories.erp_api import ErpApi

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Session"])


@router.get("/login")
async def login_page():
    """Login prompt (where expired sessions are sent)"""
    return {
        "message": "Please log in",
        "fields": ["username", "password"],
        "action": settings.ERP_LOGIN_PATH,
    }


@router.post("/login")
async def login(form: LoginRequest, api: ErpApi = Depends(get_api)):
    try:
        result = await api.auth.login(form.username, form.password)
    except SessionExpiredError as e:
        # 401 here means bad credentials, not an expired session
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"error": e.body_message or "Invalid username or password"},
        )

    response = JSONResponse(content={
        "message": "Logged in successfully",
        "user": result.user.model_dump(mode="json") if result.user else None,
    })
    response.set_cookie(
        settings.ERP_TOKEN_COOKIE,
        result.token,
        httponly=True,
        samesite="lax",
    )
    return response


@router.post("/logout")
async def logout():
    response = JSONResponse(content={"message": "Logged out"})
    response.delete_cookie(settings.ERP_TOKEN_COOKIE)
    return response


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(form: RegisterRequest, api: ErpApi = Depends(get_api)):
    data = await api.auth.register(form.username, form.email, form.password, form.full_name)
    return {"message": "Registration successful, please log in", "data": data}


@router.get("/me")
async def me(api: ErpApi = Depends(get_api)):
    return await api.auth.me()
