"""
git-ownership - who wrote this codebase?

Counts commits and added/removed lines per author of a git repository by
querying git and aggregating its output.
"""

__version__ = "0.1.0"

from .models import AuthorRecord, EditStats, RepositoryScope
from .report import build_report, render_report

__all__ = [
    "build_report",  # Main entry point
    "render_report",
    "AuthorRecord",
    "EditStats",
    "RepositoryScope",
]
