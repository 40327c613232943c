"""Push notifications through ntfy.sh."""

from __future__ import annotations

import logging
from typing import Iterable, Sequence
from urllib.parse import quote

import requests

from .config import GITHUB_WEB_URL, NTFY_SERVER, NTFY_TAGS, REQUEST_TIMEOUT_S
from .errors import RemoteAPIError
from .models import Issue

logger = logging.getLogger(__name__)

SERVICE = "ntfy"


def issues_view_url(owner: str, repo: str, labels: Iterable[str]) -> str:
    """Link to the repository's open issues filtered by every target label."""
    terms = ["is:issue", "state:open"]
    for label in labels:
        terms.append(f'label:"{label}"' if " " in label else f"label:{label}")
    return f"{GITHUB_WEB_URL}/{owner}/{repo}/issues?q={quote(' '.join(terms))}"


def build_message(new_issues: Sequence[Issue], description: str = "matching") -> str:
    blocks = [
        f"{index}. Issue #{issue.number}\n   {issue.title}\n   {issue.html_url}"
        for index, issue in enumerate(new_issues, start=1)
    ]
    return f"Found {len(new_issues)} new {description} issues:\n\n" + "\n\n".join(blocks)


class NtfyNotifier:
    def __init__(
        self,
        server: str = NTFY_SERVER,
        click_url: str = GITHUB_WEB_URL,
        tags: Sequence[str] = NTFY_TAGS,
        timeout: float = REQUEST_TIMEOUT_S,
        session: requests.Session | None = None,
    ):
        self.server = server
        self.click_url = click_url
        self.tags = list(tags)
        self.timeout = timeout
        self.session = session or requests.Session()

    def close(self) -> None:
        self.session.close()

    def notify(self, topic: str, title: str, message: str, priority: int = 3) -> None:
        """Publish one message; raises ``RemoteAPIError`` unless ntfy answers 200."""
        payload = {
            "topic": topic,
            "title": title,
            "message": message,
            "priority": priority,
            "tags": self.tags,
            "click": self.click_url,
        }
        try:
            response = self.session.post(self.server, json=payload, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise RemoteAPIError(SERVICE, None, str(e)) from e
        if response.status_code != 200:
            raise RemoteAPIError(SERVICE, response.status_code, response.text)
        logger.info("Notification published to topic %s", topic)
