"""Logged-in user kept on disk between runs. No token, no expiry."""

import json
from pathlib import Path
from typing import Optional, Union

from hiresense.core.log import get_logger

logger = get_logger(__name__)

SESSION_FILE = "session.json"


class SessionStore:

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def save(self, user: dict) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(user, indent=2), encoding="utf-8")

    def load(self) -> Optional[dict]:
        if not self.path.exists():
            return None
        try:
            return json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Ignoring unreadable session %s: %s", self.path, e)
            return None

    def clear(self) -> None:
        self.path.unlink(missing_ok=True)
