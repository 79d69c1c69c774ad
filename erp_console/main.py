"""
ERP Console - web service
Page layer between the browser and the ERP REST backend
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse

from erp_console import __version__
from erp_console.api import (
    auth, commerce, credit, dashboard, finance, notifications, payments, resources,
)
from erp_console.core.config import settings
from erp_console.core.errors import (
    ErpApiError, FormValidationError, SessionExpiredError, UnknownResourceError, get_error_message,
)
from erp_console.core.logging_setup import setup_logging

setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.API_TITLE,
    version=__version__,
    description="Consola web para el backend ERP",
)
app.state.erp_transport = None

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_allowed_origins(),
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)


# ==================== ERROR HANDLERS ====================

@app.exception_handler(SessionExpiredError)
async def session_expired_handler(request: Request, exc: SessionExpiredError):
    """Any 401 from the backend: drop the session cookie and go to login"""
    logger.info(f"Session expired on {request.url.path}, redirecting to {exc.redirect_to}")
    response = RedirectResponse(url=exc.redirect_to, status_code=status.HTTP_303_SEE_OTHER)
    response.delete_cookie(settings.ERP_TOKEN_COOKIE)
    return response


@app.exception_handler(ErpApiError)
async def erp_api_error_handler(request: Request, exc: ErpApiError):
    return JSONResponse(
        status_code=exc.status_code or status.HTTP_502_BAD_GATEWAY,
        content={"error": get_error_message(exc, exc.message)},
    )


@app.exception_handler(FormValidationError)
async def form_validation_handler(request: Request, exc: FormValidationError):
    return JSONResponse(
        status_code=422,
        content={"error": str(exc)},
    )


@app.exception_handler(UnknownResourceError)
async def unknown_resource_handler(request: Request, exc: UnknownResourceError):
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"error": str(exc)})


# Page routers go before the generic resource routes
app.include_router(auth.router)
app.include_router(dashboard.router)
app.include_router(finance.router)
app.include_router(credit.router)
app.include_router(notifications.router)
app.include_router(commerce.router)
app.include_router(payments.router)
app.include_router(resources.router)


@app.get("/health")
async def health():
    """Health check endpoint para monitoreo"""
    return {
        "status": "online",
        "service": "erp-console",
        "version": __version__,
        "erp_api_url": settings.ERP_API_URL,
    }
