"""Label matching and new-issue detection."""

from __future__ import annotations

from typing import Iterable

from .models import Issue


def normalize_labels(labels: Iterable[str]) -> frozenset[str]:
    return frozenset(label.strip().lower() for label in labels)


def has_target_label(issue: Issue, targets: frozenset[str]) -> bool:
    return any(name.lower() in targets for name in issue.labels)


def filter_by_labels(issues: Iterable[Issue], target_labels: Iterable[str]) -> list[Issue]:
    """Keep issues carrying at least one target label, in input order.

    Labels are compared case-insensitively, so ``"Help Wanted"`` matches a
    target of ``"help wanted"``.
    """
    targets = normalize_labels(target_labels)
    return [issue for issue in issues if has_target_label(issue, targets)]


def find_new(current: Iterable[Issue], previous: Iterable[Issue]) -> list[Issue]:
    """Return the issues of ``current`` whose number is absent from ``previous``.

    Issue numbers are assumed unique; order of ``current`` is preserved.
    """
    seen = {issue.number for issue in previous}
    return [issue for issue in current if issue.number not in seen]
