"""Object model for tinyvcs: blobs, trees and commits."""

from abc import ABC, abstractmethod
from typing import Dict, Optional

from tinyvcs.core.hash import hash_object
from tinyvcs.exceptions import CorruptObjectError


BLOB_HEADER = b'blob\n'
TREE_HEADER = b'Trees\n'
COMMIT_HEADER = b'Parent\n'

# Parent recorded by the root commit written at init time
NO_PARENT = 'none'


class VcsObject(ABC):
    """Base class for all stored objects."""

    def __init__(self):
        self._hash: Optional[str] = None

    @abstractmethod
    def serialize(self) -> bytes:
        """
        Serialize object to its canonical byte form.

        Returns:
            bytes: Serialized object data, header included
        """
        pass

    @abstractmethod
    def deserialize(self, data: bytes) -> None:
        """
        Load object state from its canonical byte form.

        Args:
            data: Serialized object data

        Raises:
            CorruptObjectError: If data is not a valid object of this type
        """
        pass

    @property
    def type(self) -> str:
        """Object type name (blob, tree, commit)."""
        return self.__class__.__name__.lower()

    def compute_hash(self) -> str:
        """
        Compute and cache object hash.

        The digest is the SHA-256 of the serialized form. Every serialized
        form starts with a type-specific header, so a blob and a tree with
        the same payload never share a digest.

        Returns:
            str: 64-character hex digest
        """
        if self._hash is None:
            self._hash = hash_object(self.serialize())
        return self._hash

    @property
    def hash(self) -> str:
        """Object digest."""
        return self.compute_hash()


class Blob(VcsObject):
    """
    Represents file content.

    A blob stores the raw content of one file version, without its name.
    """

    def __init__(self, data: Optional[bytes] = None):
        super().__init__()
        self.data = data or b''

    def serialize(self) -> bytes:
        return BLOB_HEADER + self.data

    def deserialize(self, data: bytes) -> None:
        if not data.startswith(BLOB_HEADER):
            raise CorruptObjectError("Blob is missing its header")
        self.data = data[len(BLOB_HEADER):]
        self._hash = None

    @classmethod
    def from_file(cls, filepath) -> 'Blob':
        """
        Create blob from file.

        Args:
            filepath: Path to file

        Returns:
            Blob: New blob containing file content
        """
        with open(filepath, 'rb') as f:
            return cls(f.read())

    def __repr__(self) -> str:
        return f"Blob(hash={self.hash[:7]}, size={len(self.data)})"


class Tree(VcsObject):
    """
    Snapshot of the tracked files of one commit.

    Trees are flat: ``blobs`` maps a full relative path (``dir/file.txt``)
    to a blob digest. ``trees`` maps a directory name to a subtree digest;
    trees written by this engine never use it, but it is read and
    traversed so nested trees stay loadable.

    Serialized form::

        Trees
        <name>: <digest>      (one line per subtree, sorted)
        Blobs
        <path>: <digest>      (one line per blob, sorted)

    The empty tree serializes to exactly ``Trees\\nBlobs``.
    """

    def __init__(self, blobs: Optional[Dict[str, str]] = None,
                 trees: Optional[Dict[str, str]] = None):
        super().__init__()
        self.blobs: Dict[str, str] = dict(blobs or {})
        self.trees: Dict[str, str] = dict(trees or {})

    def add_blob(self, path: str, digest: str) -> None:
        """Add or replace the blob recorded for path."""
        if '\n' in path or ': ' in path:
            raise ValueError(f"Unsupported path name: {path!r}")
        self.blobs[path] = digest
        self._hash = None

    def serialize(self) -> bytes:
        """
        Serialize tree in canonical order.

        Entries are sorted by name, so any construction order of the same
        entries yields the same bytes and therefore the same digest.
        """
        text = 'Trees\n'
        for name in sorted(self.trees):
            text += f'{name}: {self.trees[name]}\n'
        text += 'Blobs'
        for path in sorted(self.blobs):
            text += f'\n{path}: {self.blobs[path]}'
        return text.encode()

    def deserialize(self, data: bytes) -> None:
        try:
            lines = data.decode().split('\n')
        except UnicodeDecodeError as e:
            raise CorruptObjectError(f"Tree is not valid text: {e}")

        if not lines or lines[0] != 'Trees' or 'Blobs' not in lines:
            raise CorruptObjectError("Tree is missing its section headers")

        blobs_at = lines.index('Blobs')
        self.trees = self._parse_entries(lines[1:blobs_at])
        self.blobs = self._parse_entries(lines[blobs_at + 1:])
        self._hash = None

    @staticmethod
    def _parse_entries(lines) -> Dict[str, str]:
        entries = {}
        for line in lines:
            name, sep, digest = line.rpartition(': ')
            if not sep or not name:
                raise CorruptObjectError(f"Malformed tree entry: {line!r}")
            entries[name] = digest
        return entries

    def __repr__(self) -> str:
        return f"Tree(blobs={len(self.blobs)}, trees={len(self.trees)})"


class Commit(VcsObject):
    """
    Represents a commit.

    A commit records:
    - the parent commit digest (``NO_PARENT`` for the root commit)
    - a timestamp in seconds since the epoch
    - the digest of a complete tree snapshot
    - the commit message

    History is linear: every commit has exactly one parent, except the root.
    """

    def __init__(self):
        super().__init__()
        self.parent: str = NO_PARENT
        self.timestamp: int = 0
        self.tree: str = ''
        self.message: str = ''

    def serialize(self) -> bytes:
        """
        Serialize commit in fixed field order.

        Format:
        Parent
        <parent-hash>
        Time
        <timestamp>
        Tree Hash
        <tree-hash>
        Message
        <commit message, may span several lines>
        """
        return (
            f'Parent\n{self.parent}\n'
            f'Time\n{self.timestamp}\n'
            f'Tree Hash\n{self.tree}\n'
            f'Message\n{self.message}'
        ).encode()

    def deserialize(self, data: bytes) -> None:
        try:
            fields = data.decode().split('\n', 7)
        except UnicodeDecodeError as e:
            raise CorruptObjectError(f"Commit is not valid text: {e}")

        if len(fields) != 8 or fields[0:7:2] != ['Parent', 'Time', 'Tree Hash', 'Message']:
            raise CorruptObjectError("Commit fields are missing or out of order")

        try:
            timestamp = int(fields[3])
        except ValueError:
            raise CorruptObjectError(f"Invalid commit timestamp: {fields[3]!r}")

        self.parent = fields[1]
        self.timestamp = timestamp
        self.tree = fields[5]
        self.message = fields[7]
        self._hash = None

    @property
    def is_root(self) -> bool:
        """True for the commit written by init."""
        return self.parent == NO_PARENT

    @classmethod
    def create(cls, tree_hash: str, parent_hash: str, message: str,
               timestamp: Optional[int] = None) -> 'Commit':
        """
        Create a new commit.

        Args:
            tree_hash: Hash of tree object
            parent_hash: Parent commit hash, or NO_PARENT
            message: Commit message
            timestamp: Unix timestamp (defaults to current time)

        Returns:
            Commit: New commit object
        """
        import time

        commit = cls()
        commit.tree = tree_hash
        commit.parent = parent_hash
        commit.message = message
        commit.timestamp = int(time.time()) if timestamp is None else int(timestamp)
        return commit

    def __repr__(self) -> str:
        msg_preview = self.message.split('\n')[0][:50]
        return f"Commit(hash={self.hash[:7]}, parent={self.parent[:7]}, msg='{msg_preview}')"


def parse_object(data: bytes) -> VcsObject:
    """
    Build the right object type from serialized bytes.

    Raises:
        CorruptObjectError: If the header matches no known object type
    """
    if data.startswith(BLOB_HEADER):
        obj = Blob()
    elif data.startswith(TREE_HEADER):
        obj = Tree()
    elif data.startswith(COMMIT_HEADER):
        obj = Commit()
    else:
        raise CorruptObjectError(f"Unknown object header: {data[:16]!r}")
    obj.deserialize(data)
    return obj
