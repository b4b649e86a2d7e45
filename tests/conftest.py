"""Shared test fixtures for git-ownership tests."""

import subprocess

import pytest

ALICE = "Alice Smith <alice@example.com>"
BOB = "Bob Jones <bob@example.com>"
CAROL = "Carol White <carol@example.com>"
DAN = "Dan O'Brien; touch pwned <dan@example.com>"


def _git(repo, *args):
    subprocess.run(
        ["git", "-C", str(repo), "-c", "commit.gpgsign=false", *args],
        check=True,
        capture_output=True,
    )


def _commit(repo, author, message):
    _git(repo, "add", ".")
    _git(repo, "commit", f"--author={author}", "-m", message)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep user-level GIT_OWNERSHIP_* settings out of the tests."""
    for name in ("BRANCH", "SHELL", "OUTPUT_FORMAT", "VERBOSITY"):
        monkeypatch.delenv(f"GIT_OWNERSHIP_{name}", raising=False)


@pytest.fixture
def git_repo(tmp_path):
    """Repository with four authors.

    main:    Alice (2 commits, +5 -1), Bob (1 commit, +1 -0 and a binary
             file), Dan (1 commit, +1 -0)
    feature: Carol (1 commit, never merged, so 0 commits on main)
    """
    repo = tmp_path / "repo"
    repo.mkdir()

    _git(repo, "init")
    _git(repo, "symbolic-ref", "HEAD", "refs/heads/main")
    _git(repo, "config", "user.email", "committer@example.com")
    _git(repo, "config", "user.name", "Committer")

    (repo / "a.txt").write_text("1\n2\n3\n", encoding="utf-8")
    _commit(repo, ALICE, "initial")

    (repo / "a.txt").write_text("1\n2\nthree\n4\n", encoding="utf-8")
    _commit(repo, ALICE, "rework a")

    (repo / "b.txt").write_text("x\n", encoding="utf-8")
    (repo / "img.bin").write_bytes(b"\x00\x01\x02\x03")
    _commit(repo, BOB, "add b and an image")

    _git(repo, "checkout", "-b", "feature")
    (repo / "d.txt").write_text("d\n", encoding="utf-8")
    _commit(repo, CAROL, "feature work")
    _git(repo, "checkout", "main")

    (repo / "c.txt").write_text("c\n", encoding="utf-8")
    _commit(repo, DAN, "add c")

    return repo
