"""Tests for record collection, ordering and rendering."""

import json
import shutil
from pathlib import Path

import pytest

from git_ownership import report
from git_ownership.exceptions import SubprocessError
from git_ownership.models import AuthorRecord, EditStats, RepositoryScope
from git_ownership.report import (
    build_report,
    collect_records,
    format_record,
    render_json,
    render_report,
    sort_records,
)

requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")

SCOPE = RepositoryScope(Path("/srv/repo"))


def fake_repository(monkeypatch, stats):
    """Route the report through canned per-author results."""
    calls = []

    def fake_list_authors(scope, shell="bash"):
        calls.append(("authors", None))
        return sorted(stats)

    def fake_count(author, scope, shell="bash"):
        calls.append(("count", author))
        return stats[author][0]

    def fake_edits(author, scope, shell="bash"):
        calls.append(("edits", author))
        return EditStats(*stats[author][1:])

    monkeypatch.setattr(report, "list_authors", fake_list_authors)
    monkeypatch.setattr(report, "count_commits", fake_count)
    monkeypatch.setattr(report, "collect_edits", fake_edits)
    return calls


class TestFormatRecord:
    def test_zero_commits_has_no_line(self):
        assert format_record(AuthorRecord("Bob", 0, EditStats(3, 3))) is None

    def test_singular(self):
        line = format_record(AuthorRecord("Alice", 1, EditStats(10, 2)))
        assert line == "Alice has made 1 commit: 10 additions and 2 removals"

    def test_plural(self):
        line = format_record(AuthorRecord("Alice", 5, EditStats(1, 0)))
        assert line == "Alice has made 5 commits: 1 additions and 0 removals"


class TestSortRecords:
    def test_descending_by_commits(self):
        records = [AuthorRecord("a", 1), AuthorRecord("b", 9), AuthorRecord("c", 4)]
        assert [r.name for r in sort_records(records)] == ["b", "c", "a"]

    def test_ties_keep_incoming_order(self):
        records = [
            AuthorRecord("Alice", 2),
            AuthorRecord("Bob", 3),
            AuthorRecord("Carol", 2),
            AuthorRecord("Dan", 3),
        ]
        assert [r.name for r in sort_records(records)] == ["Bob", "Dan", "Alice", "Carol"]


class TestRender:
    def test_every_line_terminated(self):
        records = [AuthorRecord("A", 2, EditStats(1, 1)), AuthorRecord("B", 1, EditStats())]
        assert render_report(records) == (
            "A has made 2 commits: 1 additions and 1 removals\n"
            "B has made 1 commit: 0 additions and 0 removals\n"
        )

    def test_nothing_to_print(self):
        assert render_report([AuthorRecord("A", 0)]) == ""
        assert render_report([]) == ""

    def test_json_keeps_zero_commit_authors(self):
        records = [AuthorRecord("Alice", 3, EditStats(10, 2)), AuthorRecord("Bob", 0)]
        data = json.loads(render_json(records))
        assert data == [
            {"name": "Alice", "commits": 3, "additions": 10, "removals": 2},
            {"name": "Bob", "commits": 0, "additions": 0, "removals": 0},
        ]


class TestCollectRecords:
    def test_alice_and_bob(self, monkeypatch):
        fake_repository(monkeypatch, {"Alice": (3, 10, 2), "Bob": (0, 0, 0)})
        output = render_report(build_report(SCOPE))
        assert output == "Alice has made 3 commits: 10 additions and 2 removals\n"
        assert "Bob" not in output

    def test_one_record_per_author_in_call_order(self, monkeypatch):
        calls = fake_repository(monkeypatch, {"Bob": (1, 1, 1), "Alice": (2, 2, 2)})
        records = collect_records(SCOPE)
        assert [r.name for r in records] == ["Alice", "Bob"]
        assert calls == [
            ("authors", None),
            ("count", "Alice"),
            ("edits", "Alice"),
            ("count", "Bob"),
            ("edits", "Bob"),
        ]

    def test_first_failure_aborts(self, monkeypatch):
        calls = fake_repository(monkeypatch, {"Alice": (1, 1, 1), "Bob": (1, 1, 1)})

        def failing_count(author, scope, shell="bash"):
            raise SubprocessError(f"count {author}", 1)

        monkeypatch.setattr(report, "count_commits", failing_count)
        with pytest.raises(SubprocessError):
            collect_records(SCOPE)
        assert ("edits", "Alice") not in calls


@requires_git
class TestReportOnRepository:
    EXPECTED = (
        "Alice Smith has made 2 commits: 5 additions and 1 removals\n"
        "Bob Jones has made 1 commit: 1 additions and 0 removals\n"
        "Dan O'Brien; touch pwned has made 1 commit: 1 additions and 0 removals\n"
    )

    def test_end_to_end(self, git_repo):
        assert render_report(build_report(RepositoryScope(git_repo))) == self.EXPECTED

    def test_idempotent(self, git_repo):
        scope = RepositoryScope(git_repo)
        first = render_report(build_report(scope))
        second = render_report(build_report(scope))
        assert first == second

    def test_zero_commit_author_is_still_collected(self, git_repo):
        records = build_report(RepositoryScope(git_repo))
        carol = [r for r in records if r.name == "Carol White"]
        assert carol == [AuthorRecord("Carol White", 0, EditStats(1, 0))]
        assert records[-1].name == "Carol White"
