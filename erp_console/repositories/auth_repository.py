"""
Auth Repository - login, registration and the current user
"""
import logging
from typing import Any

from erp_console.domain.auth import LoginRequest, LoginResponse, RegisterRequest, User
from erp_console.repositories.module import ModuleRepository

logger = logging.getLogger(__name__)


class AuthRepository(ModuleRepository):
    """Endpoints under /auth (outside /api/v1)"""

    module = "auth"

    async def login(self, username: str, password: str) -> LoginResponse:
        """
        Log in and store the returned bearer token

        Returns:
            LoginResponse with the token and (when sent) the user
        """
        form = LoginRequest(username=username, password=password)
        data = await self.connector.post("/auth/login", json=form.model_dump())
        response = LoginResponse.model_validate(data)
        self.connector.token_store.set(response.token)
        logger.info(f"Logged in as {username}")
        return response

    async def register(self, username: str, email: str, password: str, full_name: str) -> Any:
        form = RegisterRequest(username=username, email=email, password=password, full_name=full_name)
        return await self.connector.post("/auth/register", json=form.model_dump())

    async def me(self) -> User:
        data = await self.connector.get("/auth/me")
        return User.model_validate(data)

    def logout(self) -> None:
        self.connector.token_store.clear()
        logger.info("Logged out")
