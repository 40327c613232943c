"""Rich terminal output for run progress and new issues."""

from __future__ import annotations

from typing import Sequence

from rich.console import Console
from rich.markup import escape

from .models import Issue

console = Console()
err_console = Console(stderr=True)


def show_fetching(full_name: str) -> None:
    console.print(f"Fetching issues from [cyan]{escape(full_name)}[/cyan]...")


def show_counts(fetched: int, matched: int, labels: Sequence[str]) -> None:
    wanted = " or ".join(f'"{escape(label)}"' for label in labels)
    console.print(f"Found {fetched} open issues, {matched} with {wanted} labels")


def show_new_issues(new_issues: Sequence[Issue]) -> None:
    console.print(f"\n[bold green]🆕 Found {len(new_issues)} new issues:[/bold green]")
    for index, issue in enumerate(new_issues, start=1):
        console.print(f"{index}. [bold]#{issue.number}[/bold] - {escape(issue.title)}")
        console.print(f"   Created: {issue.created_display}")
        console.print(f"   Labels: {escape(issue.label_names)}")
        console.print(f"   URL: [cyan]{escape(issue.html_url)}[/cyan]")
        console.print()


def show_no_new_issues() -> None:
    console.print("\n[green]✅ No new issues found since last check[/green]")


def show_saved(count: int) -> None:
    console.print(f"Saved {count} issues for the next comparison")


def show_notified() -> None:
    console.print("📱 Notification sent successfully")


def show_error(message: str) -> None:
    err_console.print(f"[red]Error:[/red] {escape(message)}")
