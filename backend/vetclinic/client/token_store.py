"""Module: token_store."""

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

TOKEN_KEY = "authToken"


class TokenStore:
    """
    Persisted login state shared between client sessions.

    The file is a small JSON object, ``{"authToken": "..."}``, written by
    whatever performed the login. A missing or unreadable file means no token.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def get(self) -> str | None:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return None
        except (OSError, ValueError):
            logger.warning("Ignoring unreadable token file %s", self.path)
            return None
        token = data.get(TOKEN_KEY) if isinstance(data, dict) else None
        return token or None

    def set(self, token: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps({TOKEN_KEY: token}), encoding="utf-8")

    def clear(self) -> None:
        self.path.unlink(missing_ok=True)
