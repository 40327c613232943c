from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from .errors import ParseError


def _text(value: str) -> str:
    # Lone surrogates are valid in JSON but cannot be written as UTF-8.
    return value.encode("utf-8", "replace").decode("utf-8")


def _label_name(label: Any) -> str:
    if isinstance(label, str):
        return _text(label)
    if isinstance(label, dict) and isinstance(label.get("name"), str):
        return _text(label["name"])
    raise ParseError(f"Unrecognised label entry: {label!r}")


@dataclass(frozen=True)
class Issue:
    number: int
    title: str
    html_url: str
    created_at: str
    labels: tuple[str, ...] = ()

    @classmethod
    def from_api(cls, payload: Any) -> "Issue":
        """Decode an issue object, keeping only the fields used here.

        Extra keys are ignored. Missing or ill-typed required keys raise
        ``ParseError``.
        """
        if not isinstance(payload, dict):
            raise ParseError(f"Expected issue object, got {type(payload).__name__}")
        number = payload.get("number")
        if not isinstance(number, int) or isinstance(number, bool):
            raise ParseError(f"Issue is missing a numeric 'number': {number!r}")
        for key in ("title", "html_url", "created_at"):
            if not isinstance(payload.get(key), str):
                raise ParseError(f"Issue #{number} is missing '{key}'")
        raw_labels = payload.get("labels") or []
        if not isinstance(raw_labels, list):
            raise ParseError(f"Issue #{number} has malformed 'labels'")
        return cls(
            number=number,
            title=_text(payload["title"]),
            html_url=_text(payload["html_url"]),
            created_at=_text(payload["created_at"]),
            labels=tuple(_label_name(label) for label in raw_labels),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "number": self.number,
            "title": self.title,
            "html_url": self.html_url,
            "created_at": self.created_at,
            "labels": [{"name": name} for name in self.labels],
        }

    @property
    def created_display(self) -> str:
        try:
            created = datetime.fromisoformat(self.created_at.replace("Z", "+00:00"))
        except ValueError:
            return self.created_at
        if created.tzinfo is None:
            created = created.replace(tzinfo=timezone.utc)
        return created.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")

    @property
    def label_names(self) -> str:
        return ", ".join(self.labels) or "None"


def decode_issues(payload: Any) -> list[Issue]:
    if not isinstance(payload, list):
        raise ParseError(f"Expected a JSON array of issues, got {type(payload).__name__}")
    return [Issue.from_api(item) for item in payload]
