"""
Configuración centralizada de la consola ERP
"""
import json
from pathlib import Path
from typing import List, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Configuración de la consola"""

    # ERP backend
    ERP_API_URL: str = "http://localhost:3000"
    ERP_REQUEST_TIMEOUT: float = 30.0
    ERP_DEFAULT_PER_PAGE: int = 20

    # Session
    ERP_TOKEN_FILE: str = str(Path.home() / ".erp_console" / "token")
    ERP_TOKEN_COOKIE: str = "erp_token"
    ERP_LOGIN_PATH: str = "/login"

    # Widgets
    ERP_NOTIFICATION_POLL_SECONDS: float = 30.0
    ERP_SEARCH_DEBOUNCE_MS: int = 200

    # Console service
    API_TITLE: str = "ERP Console"
    API_VERSION: str = "1.0.0"
    LOG_LEVEL: str = "INFO"

    # CORS - Can be string (comma-separated) or JSON array
    # Example: "http://localhost:3000,https://erp.example.com" or '["http://localhost:3000"]'
    ALLOWED_ORIGINS: Optional[str] = "http://localhost:3000,http://localhost:5173"

    def get_allowed_origins(self) -> List[str]:
        """Parse ALLOWED_ORIGINS string into list"""
        if not self.ALLOWED_ORIGINS:
            return ["http://localhost:3000"]

        try:
            origins = json.loads(self.ALLOWED_ORIGINS)
            if isinstance(origins, list):
                return origins
        except (json.JSONDecodeError, ValueError):
            pass

        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",")]

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


settings = Settings()
