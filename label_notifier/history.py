"""Snapshot persistence: the matching issues seen on the last run."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Iterable, Protocol

from .config import DEFAULT_STORE_PATH
from .errors import ParseError, StorageWriteError
from .models import Issue, decode_issues

logger = logging.getLogger(__name__)


class IssueStore(Protocol):
    def load(self) -> list[Issue]: ...

    def save(self, issues: Iterable[Issue]) -> None: ...


class JsonIssueStore:
    """Load / save the snapshot as a pretty-printed JSON array."""

    def __init__(self, path: str | os.PathLike | None = None):
        self.path = Path(path or DEFAULT_STORE_PATH)

    # ── Persistence ─────────────────────────────────────────────

    def load(self) -> list[Issue]:
        """Return the stored issues; empty when the file is absent or unreadable."""
        if not self.path.exists():
            return []
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            return decode_issues(data)
        except (OSError, ValueError, ParseError) as e:
            logger.warning("Could not load previous issues from %s: %s", self.path, e)
            return []

    def save(self, issues: Iterable[Issue]) -> None:
        payload = [issue.to_dict() for issue in issues]
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(
                json.dumps(payload, indent=2) + "\n", encoding="utf-8"
            )
            os.replace(tmp_path, self.path)
        except (OSError, ValueError) as e:
            tmp_path.unlink(missing_ok=True)
            raise StorageWriteError(f"Could not save issues to {self.path}: {e}") from e
        logger.debug("Saved %d issues to %s", len(payload), self.path)


class MemoryIssueStore:
    """In-process store, for embedding and tests."""

    def __init__(self, issues: Iterable[Issue] | None = None):
        self.issues: list[Issue] = list(issues or [])
        self.saves = 0

    def load(self) -> list[Issue]:
        return list(self.issues)

    def save(self, issues: Iterable[Issue]) -> None:
        self.issues = list(issues)
        self.saves += 1
