"""
Bearer token persistence.

The console service keeps the token in a cookie and hands each request a
MemoryTokenStore seeded from it; the CLI keeps it in a file.
"""
import logging
import os
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)


class TokenStore:
    """Interface for token storage"""

    def get(self) -> Optional[str]:
        raise NotImplementedError

    def set(self, token: str) -> None:
        raise NotImplementedError

    def clear(self) -> None:
        raise NotImplementedError


class MemoryTokenStore(TokenStore):
    """Token held in memory for the lifetime of the store"""

    def __init__(self, token: Optional[str] = None):
        self._token = token or None
        self.cleared = False
        self.changed = False

    def get(self) -> Optional[str]:
        return self._token

    def set(self, token: str) -> None:
        self._token = token
        self.cleared = False
        self.changed = True

    def clear(self) -> None:
        self._token = None
        self.cleared = True
        self.changed = True


class FileTokenStore(TokenStore):
    """Token persisted to a file readable only by the current user"""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path).expanduser()

    def get(self) -> Optional[str]:
        try:
            token = self.path.read_text(encoding="utf-8").strip()
        except FileNotFoundError:
            return None
        return token or None

    def set(self, token: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd = os.open(self.path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(token)
        logger.debug(f"Token saved to {self.path}")

    def clear(self) -> None:
        try:
            self.path.unlink()
            logger.debug(f"Token removed from {self.path}")
        except FileNotFoundError:
            pass
