"""Collect per-author records for a repository and render them."""

import json
from typing import Iterable, Optional

from .authors import list_authors
from .logging_config import get_logger
from .metrics import collect_edits, count_commits
from .models import AuthorRecord, RepositoryScope
from .runner import DEFAULT_SHELL

logger = get_logger(__name__)


def collect_records(scope: RepositoryScope, shell: str = DEFAULT_SHELL) -> list[AuthorRecord]:
    """Query every author of ``scope`` one after another.

    The first failing git query aborts the whole collection.
    """
    logger.info("Getting a list of authors..")
    authors = list_authors(scope, shell=shell)

    logger.info("Compiling stats..")
    records = []
    for author in authors:
        commits = count_commits(author, scope, shell=shell)
        edits = collect_edits(author, scope, shell=shell)
        records.append(AuthorRecord(name=author, commits=commits, edits=edits))
    return records


def sort_records(records: Iterable[AuthorRecord]) -> list[AuthorRecord]:
    """Order by commit count, most first. Ties keep their incoming order."""
    return sorted(records, key=lambda r: r.commits, reverse=True)


def build_report(scope: RepositoryScope, shell: str = DEFAULT_SHELL) -> list[AuthorRecord]:
    return sort_records(collect_records(scope, shell=shell))


def format_record(record: AuthorRecord) -> Optional[str]:
    """Render one report line, or None for an author without commits."""
    if record.commits == 0:
        return None
    if record.commits == 1:
        ending = "1 commit"
    else:
        ending = f"{record.commits} commits"
    return f"{record.name} has made {ending}: {record.edits}"


def render_report(records: Iterable[AuthorRecord]) -> str:
    lines = [line for line in map(format_record, records) if line is not None]
    return "".join(f"{line}\n" for line in lines)


def render_json(records: Iterable[AuthorRecord]) -> str:
    """Machine-readable report; zero-commit authors are included."""
    return json.dumps([r.to_dict() for r in records], indent=2, ensure_ascii=False) + "\n"
