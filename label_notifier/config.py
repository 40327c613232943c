"""Configuration for the label notifier."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from .errors import ConfigError

# Labels that qualify an issue for tracking (compared case-insensitively)
DEFAULT_TARGET_LABELS = ("help wanted", "external")

DEFAULT_STORE_PATH = "previous-issues.json"

GITHUB_API_URL = "https://api.github.com"
GITHUB_WEB_URL = "https://github.com"
USER_AGENT = "label-notifier"
ISSUES_PER_PAGE = 100

NTFY_SERVER = "https://ntfy.sh"
NTFY_TAGS = ("warning", "computer")
DEFAULT_PRIORITY = 4  # ntfy scale 1..5

REQUEST_TIMEOUT_S = 30.0


def parse_labels(raw: str | None) -> tuple[str, ...]:
    if not raw:
        return DEFAULT_TARGET_LABELS
    labels = tuple(item.strip() for item in raw.split(",") if item.strip())
    return labels or DEFAULT_TARGET_LABELS


@dataclass(frozen=True)
class Settings:
    token: str | None
    owner: str | None
    repo: str | None
    ntfy_topic: str | None = None
    target_labels: tuple[str, ...] = DEFAULT_TARGET_LABELS
    store_path: str = DEFAULT_STORE_PATH
    ntfy_server: str = NTFY_SERVER
    notification_title: str | None = None
    notification_priority: int = DEFAULT_PRIORITY
    click_url: str | None = None
    dry_run: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, **overrides) -> "Settings":
        env = os.environ if environ is None else environ
        raw_priority = env.get("NTFY_PRIORITY")
        try:
            priority = int(raw_priority) if raw_priority else DEFAULT_PRIORITY
        except ValueError:
            raise ConfigError(f"NTFY_PRIORITY must be an integer, got {raw_priority!r}")
        values = {
            "token": env.get("GITHUB_TOKEN") or None,
            "owner": env.get("REPO_OWNER") or None,
            "repo": env.get("REPO_NAME") or None,
            "ntfy_topic": env.get("NTFY_TOPIC") or None,
            "target_labels": parse_labels(env.get("TARGET_LABELS")),
            "store_path": env.get("ISSUE_STORE_PATH") or DEFAULT_STORE_PATH,
            "ntfy_server": env.get("NTFY_SERVER") or NTFY_SERVER,
            "notification_priority": priority,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    def validate(self) -> None:
        """Fail before any network call when required settings are missing."""
        if not self.token:
            raise ConfigError("GITHUB_TOKEN environment variable is required")
        if not self.owner or not self.repo:
            raise ConfigError("REPO_OWNER and REPO_NAME environment variables are required")
        if not 1 <= self.notification_priority <= 5:
            raise ConfigError(
                f"Notification priority must be between 1 and 5, got {self.notification_priority}"
            )
        if not self.target_labels:
            raise ConfigError("At least one target label is required")

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"

    @property
    def title(self) -> str:
        return self.notification_title or f"🆕 New {self.full_name} Issues"
