"""Persistence of the last project URL that was queried."""

from __future__ import annotations

import logging
from os import environ
from pathlib import Path

from dotenv import get_key, set_key

logger = logging.getLogger(__name__)

PROJECT_URL_KEY = "PROJECT_URL"
STATE_FILE_ENV = "TAP_GITHUB_PROJECTS_STATE_FILE"
DEFAULT_STATE_FILE = Path.home() / ".tap-github-projects.env"


class LastProjectStore:
    """Key-value file holding the most recently queried project URL."""

    def __init__(self, path: str | Path | None = None) -> None:
        if path is None:
            path = environ.get(STATE_FILE_ENV) or DEFAULT_STATE_FILE
        self.path = Path(path)

    def load(self) -> str | None:
        if not self.path.exists():
            return None
        return get_key(self.path, PROJECT_URL_KEY)

    def save(self, project_url: str) -> None:
        self.path.touch(exist_ok=True)
        set_key(self.path, PROJECT_URL_KEY, project_url, quote_mode="always")
        logger.debug("Saved last project URL to %s", self.path)
