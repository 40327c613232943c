import json

import pytest

from label_notifier.errors import ParseError
from label_notifier.models import Issue, decode_issues

from .helpers import api_issue


class TestIssueFromApi:
    def test_reads_consumed_fields_and_ignores_extras(self):
        issue = Issue.from_api(api_issue(42, "Help Wanted", "bug", assignee=None, body="text"))
        assert issue.number == 42
        assert issue.title == "Issue 42"
        assert issue.html_url == "https://github.com/acme/app/issues/42"
        assert issue.created_at == "2024-05-01T12:30:00Z"
        assert issue.labels == ("Help Wanted", "bug")

    def test_accepts_plain_string_labels(self):
        payload = api_issue(1)
        payload["labels"] = ["External"]
        assert Issue.from_api(payload).labels == ("External",)

    def test_missing_labels_means_none(self):
        payload = api_issue(1)
        del payload["labels"]
        assert Issue.from_api(payload).labels == ()

    @pytest.mark.parametrize("key", ["number", "title", "html_url", "created_at"])
    def test_missing_required_field(self, key):
        payload = api_issue(1)
        del payload[key]
        with pytest.raises(ParseError):
            Issue.from_api(payload)

    def test_rejects_non_object(self):
        with pytest.raises(ParseError):
            Issue.from_api("not an issue")

    def test_rejects_malformed_label(self):
        payload = api_issue(1)
        payload["labels"] = [{"color": "fff"}]
        with pytest.raises(ParseError):
            Issue.from_api(payload)


class TestIssueHelpers:
    def test_to_dict_decodes_back(self):
        issue = Issue.from_api(api_issue(7, "External"))
        assert issue.to_dict() == {
            "number": 7,
            "title": "Issue 7",
            "html_url": "https://github.com/acme/app/issues/7",
            "created_at": "2024-05-01T12:30:00Z",
            "labels": [{"name": "External"}],
        }
        assert Issue.from_api(issue.to_dict()) == issue

    def test_created_display(self):
        issue = Issue.from_api(api_issue(1))
        assert issue.created_display == "2024-05-01T12:30:00.000Z"

    def test_created_display_falls_back_to_raw_text(self):
        issue = Issue(1, "t", "u", "yesterday")
        assert issue.created_display == "yesterday"

    def test_label_names(self):
        assert Issue(1, "t", "u", "c", ("A", "B")).label_names == "A, B"
        assert Issue(1, "t", "u", "c").label_names == "None"


class TestDecodeIssues:
    def test_decodes_list(self):
        issues = decode_issues([api_issue(1), api_issue(2)])
        assert [i.number for i in issues] == [1, 2]

    def test_rejects_non_list(self):
        with pytest.raises(ParseError):
            decode_issues({"message": "Not Found"})


class TestIssueTextCleanup:
    def test_lone_surrogate_is_replaced(self):
        payload = json.loads(
            '{"number": 1, "title": "bad \\ud83d title", "html_url": "u",'
            ' "created_at": "c", "labels": ["Help \\udc00 Wanted"]}'
        )
        issue = Issue.from_api(payload)
        assert issue.title == "bad ? title"
        assert issue.labels == ("Help ? Wanted",)
        issue.title.encode("utf-8")
