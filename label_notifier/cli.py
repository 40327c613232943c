from __future__ import annotations

import logging

import click

from . import __version__
from .config import Settings
from .errors import ConfigError
from .display import show_error
from .runner import main as run_main


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--token", help="GitHub token. Defaults to $GITHUB_TOKEN.")
@click.option("--owner", help="Repository owner. Defaults to $REPO_OWNER.")
@click.option("--repo", help="Repository name. Defaults to $REPO_NAME.")
@click.option("--topic", "ntfy_topic", help="ntfy.sh topic; no push is sent without one. Defaults to $NTFY_TOPIC.")
@click.option(
    "--label", "labels", multiple=True,
    help="Target label (repeatable). Defaults to $TARGET_LABELS, then 'help wanted' and 'external'.",
)
@click.option("--store", "store_path", help="Snapshot file. Defaults to $ISSUE_STORE_PATH or previous-issues.json.")
@click.option("--ntfy-server", help="ntfy server URL. Defaults to $NTFY_SERVER or https://ntfy.sh.")
@click.option("--title", "notification_title", help="Notification title.")
@click.option("--priority", "notification_priority", type=click.IntRange(1, 5), help="Notification priority (1-5).")
@click.option("--click-url", help="Link opened when the notification is tapped.")
@click.option("--dry-run", is_flag=True, help="Report new issues without notifying or saving.")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.version_option(__version__)
def main(labels: tuple[str, ...], dry_run: bool, verbose: bool, **options) -> None:
    """Notify about newly labelled open issues in a GitHub repository."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        settings = Settings.from_env(
            target_labels=tuple(labels) or None, dry_run=dry_run or None, **options
        )
    except ConfigError as e:
        show_error(str(e))
        raise SystemExit(1)
    raise SystemExit(run_main(settings))


if __name__ == "__main__":
    main()
