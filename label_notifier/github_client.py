"""GitHub REST client for listing open issues."""

from __future__ import annotations

import logging

import requests

from .config import GITHUB_API_URL, ISSUES_PER_PAGE, REQUEST_TIMEOUT_S, USER_AGENT
from .errors import ParseError, RemoteAPIError
from .models import Issue, decode_issues

logger = logging.getLogger(__name__)

SERVICE = "GitHub API"


class GitHubClient:
    """Single-page, no-retry access to the issues endpoint."""

    def __init__(
        self,
        token: str,
        base_url: str = GITHUB_API_URL,
        user_agent: str = USER_AGENT,
        timeout: float = REQUEST_TIMEOUT_S,
        session: requests.Session | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            "User-Agent": user_agent,
            "Authorization": f"Bearer {token}",
            "Accept": "application/vnd.github.v3+json",
        })

    def close(self) -> None:
        self.session.close()

    def fetch_open_issues(self, owner: str, repo: str) -> list[Issue]:
        endpoint = f"/repos/{owner}/{repo}/issues"
        params = {"state": "open", "per_page": ISSUES_PER_PAGE}
        logger.debug("GET %s%s %s", self.base_url, endpoint, params)
        try:
            response = self.session.get(
                f"{self.base_url}{endpoint}", params=params, timeout=self.timeout
            )
        except requests.exceptions.RequestException as e:
            raise RemoteAPIError(SERVICE, None, str(e)) from e

        if response.status_code != 200:
            raise RemoteAPIError(SERVICE, response.status_code, response.text)

        try:
            payload = response.json()
        except ValueError as e:
            raise ParseError(f"Error parsing JSON: {e}") from e
        issues = decode_issues(payload)
        logger.debug("Fetched %d open issues from %s/%s", len(issues), owner, repo)
        return issues
