"""Working-tree differ: compares working directory, index and HEAD."""

from dataclasses import dataclass, field
from typing import List

from tinyvcs.core.worktree import working_files


@dataclass
class WorkingTreeStatus:
    """Paths of interest, one list per category, each sorted by path."""
    staged_new: List[str] = field(default_factory=list)
    staged_modified: List[str] = field(default_factory=list)
    staged_deleted: List[str] = field(default_factory=list)
    unstaged_modified: List[str] = field(default_factory=list)
    untracked: List[str] = field(default_factory=list)

    @property
    def has_staged(self) -> bool:
        return bool(self.staged_new or self.staged_modified or self.staged_deleted)

    @property
    def is_clean(self) -> bool:
        return not (self.has_staged or self.unstaged_modified or self.untracked)

    def staged_lines(self) -> List[str]:
        """Staged changes labelled the way status prints them."""
        return (
            [f"deleted: {p}" for p in self.staged_deleted]
            + [f"modified: {p}" for p in self.staged_modified]
            + [f"new file: {p}" for p in self.staged_new]
        )


class StatusEngine:
    """
    Classifies paths by comparing working directory, index and head tree.

    Supports:
    - Staged changes (index vs HEAD): new file, modified, deleted
    - Unstaged modifications (working file vs index, or vs HEAD)
    - Untracked files
    """

    def __init__(self, repo):
        """
        Initialize status engine.

        Args:
            repo: Repository instance
        """
        self.repo = repo

    def compute(self) -> WorkingTreeStatus:
        head_files = self.repo.head_files()
        index = self.repo.load_index()
        status = WorkingTreeStatus()

        for path, digest in index.additions().items():
            if path in head_files:
                status.staged_modified.append(path)
            else:
                status.staged_new.append(path)
        status.staged_deleted.extend(index.removals())

        for path, digest in working_files(self.repo).items():
            entry = index.get_entry(path)
            if entry is None:
                if path not in head_files:
                    status.untracked.append(path)
                elif head_files[path] != digest:
                    status.unstaged_modified.append(path)
            elif entry.is_removal:
                # Staged for removal but back on disk
                status.unstaged_modified.append(path)
            elif entry.digest != digest:
                status.unstaged_modified.append(path)

        for category in (status.staged_new, status.staged_modified, status.staged_deleted,
                         status.unstaged_modified, status.untracked):
            category.sort()
        return status


def format_status(head, status: WorkingTreeStatus) -> str:
    """
    Render status as plain text.

    Args:
        head: HeadState of the repository
        status: Computed WorkingTreeStatus
    """
    output = [head.describe()]

    if status.has_staged:
        output.append("Changes to be committed:\n\t" + "\n\t".join(status.staged_lines()) + "\n")

    if status.unstaged_modified:
        lines = [f"modified: {p}" for p in status.unstaged_modified]
        output.append("Changes not staged for commit:\n\t" + "\n\t".join(lines) + "\n")

    if status.untracked:
        output.append("Untracked files:\n\t" + "\n\t".join(status.untracked) + "\n")

    if status.is_clean:
        output.append("nothing to commit\n")

    return "\n".join(output)
