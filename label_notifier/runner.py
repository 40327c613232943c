"""One polling run: fetch, filter, diff, notify, persist."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Protocol

from . import display
from .config import Settings
from .errors import ConfigError, ParseError, RemoteAPIError, StorageWriteError
from .filters import filter_by_labels, find_new
from .github_client import GitHubClient
from .history import IssueStore, JsonIssueStore
from .models import Issue
from .notifier import NtfyNotifier, build_message, issues_view_url

logger = logging.getLogger(__name__)


class IssueSource(Protocol):
    def fetch_open_issues(self, owner: str, repo: str) -> list[Issue]: ...


class Notifier(Protocol):
    def notify(self, topic: str, title: str, message: str, priority: int = 3) -> None: ...


@dataclass
class RunResult:
    fetched: int = 0
    matched: list[Issue] = field(default_factory=list)
    new_issues: list[Issue] = field(default_factory=list)
    notified: bool = False
    saved: bool = False
    errors: list[str] = field(default_factory=list)


def _describe(labels) -> str:
    return "/".join(label.lower().replace(" ", "-") for label in labels)


def run(
    settings: Settings,
    *,
    source: IssueSource | None = None,
    store: IssueStore | None = None,
    notifier: Notifier | None = None,
) -> RunResult:
    """Execute a single run.

    Configuration, fetch and parse errors propagate to the caller. Failures
    to notify or to save the snapshot are logged and recorded on the result.
    """
    settings.validate()
    owned = []
    if source is None:
        source = GitHubClient(settings.token)
        owned.append(source)
    if notifier is None and settings.ntfy_topic:
        notifier = NtfyNotifier(
            server=settings.ntfy_server,
            click_url=settings.click_url
            or issues_view_url(settings.owner, settings.repo, settings.target_labels),
        )
        owned.append(notifier)
    store = store or JsonIssueStore(settings.store_path)
    try:
        return _run(settings, source, store, notifier)
    finally:
        for client in owned:
            client.close()


def _run(
    settings: Settings, source: IssueSource, store: IssueStore, notifier: Notifier | None
) -> RunResult:
    display.show_fetching(settings.full_name)
    issues = source.fetch_open_issues(settings.owner, settings.repo)
    result = RunResult(fetched=len(issues))

    result.matched = filter_by_labels(issues, settings.target_labels)
    display.show_counts(len(issues), len(result.matched), settings.target_labels)

    previous = store.load()
    result.new_issues = find_new(result.matched, previous)
    logger.info(
        "%d matching issues, %d previously seen, %d new",
        len(result.matched), len(previous), len(result.new_issues),
    )

    if result.new_issues:
        message = build_message(result.new_issues, _describe(settings.target_labels))
        if settings.ntfy_topic and notifier is not None and not settings.dry_run:
            try:
                notifier.notify(
                    settings.ntfy_topic, settings.title, message, settings.notification_priority
                )
                result.notified = True
                display.show_notified()
            except RemoteAPIError as e:
                logger.error("Failed to send notification: %s", e)
                result.errors.append(f"Failed to send notification: {e}")
        display.show_new_issues(result.new_issues)
    else:
        display.show_no_new_issues()

    if settings.dry_run:
        logger.info("Dry run: snapshot not written")
        return result

    try:
        store.save(result.matched)
        result.saved = True
        display.show_saved(len(result.matched))
    except StorageWriteError as e:
        logger.error("Error saving issues: %s", e)
        result.errors.append(str(e))
    return result


def main(settings: Settings, **collaborators) -> int:
    """Run and translate fatal errors into a one-line message and exit status 1."""
    try:
        run(settings, **collaborators)
    except (ConfigError, RemoteAPIError, ParseError) as e:
        display.show_error(str(e))
        return 1
    # Notification and storage problems never change the exit status.
    return 0
