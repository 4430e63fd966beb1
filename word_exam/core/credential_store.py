"""Username/password lookup for the login windows."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_USER_FILE = Path(__file__).resolve().parent.parent / "data" / "user_info.txt"


class CredentialStore:
    """Plain-text credential table loaded from a ``username,password`` file."""

    def __init__(self, credentials: dict[str, str] | None = None) -> None:
        self._credentials = dict(credentials or {})

    @classmethod
    def from_file(cls, file_path: Path | None = None) -> "CredentialStore":
        path = Path(file_path or DEFAULT_USER_FILE)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.error("Failed to load user info file %s: %s", path, exc)
            return cls()

        credentials: dict[str, str] = {}
        for line in text.splitlines():
            parts = line.split(",")
            if len(parts) == 2:
                credentials[parts[0].strip()] = parts[1].strip()
        logger.info("Loaded %d user accounts from %s", len(credentials), path)
        return cls(credentials)

    def verify(self, username: str, password: str) -> bool:
        expected = self._credentials.get(username)
        return expected is not None and expected == password

    def usernames(self) -> list[str]:
        return sorted(self._credentials)

    def __contains__(self, username: object) -> bool:
        return username in self._credentials

    def __len__(self) -> int:
        return len(self._credentials)
