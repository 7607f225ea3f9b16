"""Index (staging area) implementation."""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Dict, Mapping, Optional

from tinyvcs.exceptions import CorruptIndexError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IndexEntry:
    """
    A single pending change.

    An entry either stages new content for a path (``digest`` is the blob
    digest) or stages the path for removal (``digest`` is None).
    """
    path: str
    digest: Optional[str] = None

    @property
    def is_removal(self) -> bool:
        return self.digest is None

    def serialize(self) -> str:
        if self.is_removal:
            return f'rm {self.path}'
        return f'blob {self.digest} {self.path}'

    @classmethod
    def parse(cls, line: str) -> 'IndexEntry':
        """
        Parse one index record.

        Raises:
            CorruptIndexError: If the line is neither a blob nor an rm record
        """
        kind, _, rest = line.partition(' ')
        if kind == 'blob':
            digest, _, path = rest.partition(' ')
            if digest and path:
                return cls(path, digest)
        elif kind == 'rm' and rest:
            return cls(rest)
        raise CorruptIndexError(f"Expected either `blob` or `rm` record, got {line!r}")

    def __repr__(self) -> str:
        if self.is_removal:
            return f"IndexEntry(rm {self.path})"
        return f"IndexEntry(blob {self.digest[:7]} {self.path})"


class RemoveOutcome(Enum):
    """What stage_remove did with a path."""
    UNSTAGED = 'unstaged'   # a pending add of an untracked file was dropped
    STAGED = 'staged'       # a removal was staged for a tracked file
    NOTHING = 'nothing'     # path neither staged nor tracked


class Index:
    """
    Staging area layered over the head commit's snapshot.

    Holds at most one entry per path. Entries that would not change the
    head snapshot are never kept, so an index equal to HEAD is empty.
    """

    def __init__(self):
        self.entries: Dict[str, IndexEntry] = {}

    def stage_add(self, path: str, digest: str, head_files: Mapping[str, str]) -> None:
        """
        Stage content for path.

        Staging the digest HEAD already records for path clears any pending
        entry instead of adding one. Otherwise an add entry replaces whatever
        was pending for the path, including a removal.

        Args:
            path: Path relative to the repository root
            digest: Blob digest of the new content
            head_files: Flattened tree of the head commit
        """
        if head_files.get(path) == digest:
            self.entries.pop(path, None)
            logger.debug("Unchanged %s, cleared from index", path)
            return
        self.entries[path] = IndexEntry(path, digest)
        logger.debug("Staged %s as %s", path, digest[:7])

    def stage_remove(self, path: str, head_files: Mapping[str, str]) -> RemoveOutcome:
        """
        Stage removal of path.

        Args:
            path: Path relative to the repository root
            head_files: Flattened tree of the head commit

        Returns:
            RemoveOutcome.UNSTAGED if a pending add of an untracked file was
            dropped, RemoveOutcome.STAGED if a removal entry now exists (the
            caller is responsible for deleting the working file), and
            RemoveOutcome.NOTHING if there was nothing to remove.
        """
        if path in head_files:
            self.entries[path] = IndexEntry(path)
            logger.debug("Staged removal of %s", path)
            return RemoveOutcome.STAGED

        if path in self.entries:
            del self.entries[path]
            logger.debug("Unstaged new file %s", path)
            return RemoveOutcome.UNSTAGED

        return RemoveOutcome.NOTHING

    def get_entry(self, path: str) -> Optional[IndexEntry]:
        """Get entry by path."""
        return self.entries.get(path)

    def additions(self) -> Dict[str, str]:
        """Pending adds as {path: digest}."""
        return {e.path: e.digest for e in self.entries.values() if not e.is_removal}

    def removals(self) -> list:
        """Paths pending removal, sorted."""
        return sorted(e.path for e in self.entries.values() if e.is_removal)

    def clear(self) -> None:
        """Clear all entries from index."""
        self.entries.clear()

    def serialize(self) -> str:
        """One record per line, sorted by path."""
        return '\n'.join(self.entries[path].serialize() for path in sorted(self.entries))

    def write(self, index_path) -> None:
        """
        Write index to disk.

        Args:
            index_path: Path to index file
        """
        Path(index_path).write_text(self.serialize())

    def read(self, index_path) -> None:
        """
        Read index from disk. A missing file reads as an empty index.

        Raises:
            CorruptIndexError: If any record cannot be parsed
        """
        self.entries.clear()
        index_path = Path(index_path)
        if not index_path.exists():
            return

        for line in index_path.read_text().split('\n'):
            if not line:
                continue
            entry = IndexEntry.parse(line)
            self.entries[entry.path] = entry

    def __len__(self) -> int:
        """Number of entries in index."""
        return len(self.entries)

    def __repr__(self) -> str:
        return f"Index(entries={len(self.entries)})"
