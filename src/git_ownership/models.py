"""Data models for per-author contribution statistics."""

from dataclasses import dataclass, field
from pathlib import Path

# Display name as attributed by git (may embed an email).
AuthorName = str


@dataclass(frozen=True)
class EditStats:
    additions: int = 0
    removals: int = 0

    def __add__(self, other: "EditStats") -> "EditStats":
        return EditStats(self.additions + other.additions, self.removals + other.removals)

    def __str__(self) -> str:
        return f"{self.additions} additions and {self.removals} removals"


@dataclass(frozen=True)
class AuthorRecord:
    name: AuthorName
    commits: int
    edits: EditStats = field(default_factory=EditStats)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "commits": self.commits,
            "additions": self.edits.additions,
            "removals": self.edits.removals,
        }


@dataclass(frozen=True)
class RepositoryScope:
    """Query context handed to every git invocation of a run."""

    target_dir: Path
    branch: str = "main"  # value for --branches=<pattern>
