"""
Bearer token storage for the API client.
"""
import logging
import os
from pathlib import Path
from typing import Optional

from ..config import get_config


logger = logging.getLogger(__name__)


class TokenStore:
    """
    Keeps the auth token in memory and, when a path is set, in a file
    readable only by the current user.
    """

    def __init__(self, path: Optional[Path] = None, persist: bool = True):
        self.path = Path(path) if path else get_config().token_file
        self.persist = persist
        self._token: Optional[str] = None

    def get(self) -> Optional[str]:
        """Return the current token, loading it from disk on first use."""
        if self._token is None and self.persist and self.path.exists():
            try:
                self._token = self.path.read_text(encoding="utf-8").strip() or None
            except OSError as e:
                logger.error(f"Error reading auth token: {e}")
                return None
        return self._token

    def set(self, token: str) -> None:
        """Keep the token; a failed write leaves it in memory only."""
        self._token = token
        if not self.persist:
            return
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            # Created owner-only so the token is never readable by others
            fd = os.open(self.path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(token)
            self.path.chmod(0o600)
        except OSError as e:
            logger.error(f"Error saving auth token: {e}")

    def clear(self) -> None:
        self._token = None
        if self.persist:
            try:
                self.path.unlink(missing_ok=True)
            except OSError as e:
                logger.error(f"Error removing auth token: {e}")
