"""Commit history walking and rendering."""

from datetime import datetime, timezone
from typing import List, Tuple

from tinyvcs.core.objects import Commit

DATE_FORMAT = "%a %b %d %H:%M:%S %Y"


def format_timestamp(timestamp: int) -> str:
    """Format Unix timestamp as a UTC date."""
    return datetime.fromtimestamp(int(timestamp), tz=timezone.utc).strftime(DATE_FORMAT)


def get_commit_history(repo, start_hash: str) -> List[Tuple[str, Commit]]:
    """
    Walk commit history from starting commit.

    History is linear, so this just follows parents. The root commit
    written by init is not part of the result.

    Returns:
        List of (commit_hash, commit) tuples, newest first
    """
    history = []
    commit_hash = start_hash
    commit = repo.read_commit(commit_hash)

    while not commit.is_root:
        history.append((commit_hash, commit))
        commit_hash = commit.parent
        commit = repo.read_commit(commit_hash)

    return history


def format_entry(commit_hash: str, commit: Commit) -> str:
    return f"Commit: {commit_hash}\nDate: {format_timestamp(commit.timestamp)}\n{commit.message}\n"
