from __future__ import annotations

from unittest.mock import MagicMock

from label_notifier.models import Issue


def make_issue(number: int, *labels: str, title: str | None = None) -> Issue:
    return Issue(
        number=number,
        title=title or f"Issue {number}",
        html_url=f"https://github.com/acme/app/issues/{number}",
        created_at="2024-05-01T12:30:00Z",
        labels=tuple(labels),
    )


def api_issue(number: int, *labels: str, **extra) -> dict:
    payload = {
        "number": number,
        "title": f"Issue {number}",
        "html_url": f"https://github.com/acme/app/issues/{number}",
        "created_at": "2024-05-01T12:30:00Z",
        "labels": [{"id": i, "name": name, "color": "ffffff"} for i, name in enumerate(labels)],
        "state": "open",
    }
    payload.update(extra)
    return payload


def fake_response(status_code: int = 200, payload=None, text: str = "") -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    if isinstance(payload, Exception):
        response.json.side_effect = payload
    else:
        response.json.return_value = payload
    return response
