"""Repository management and object store for tinyvcs."""

import logging
import re
from pathlib import Path
from typing import Dict, Optional

from tinyvcs.core.objects import VcsObject, Tree, Commit, NO_PARENT, parse_object
from tinyvcs.exceptions import (
    CorruptObjectError,
    NotInRepositoryError,
    ObjectNotFoundError,
    RepositoryExistsError,
)

logger = logging.getLogger(__name__)

VCS_DIR_NAME = '.vcs'
DEFAULT_BRANCH = 'main'
INITIAL_COMMIT_MESSAGE = 'initial commit'

DIGEST_PATTERN = re.compile(r'[0-9a-f]{64}')


def is_valid_digest(digest) -> bool:
    """True for a 64 character lowercase hex string."""
    return isinstance(digest, str) and DIGEST_PATTERN.fullmatch(digest) is not None


class Repository:
    """
    Represents a tinyvcs repository.

    A repository manages the .vcs directory structure and is the object
    store: every blob, tree and commit lives in ``objects/`` under a file
    named after its digest.
    """

    def __init__(self, path='.'):
        """
        Initialize repository.

        Args:
            path: Path to repository root (defaults to current directory)
        """
        self.work_tree = Path(path).resolve()
        self.vcs_dir = self.work_tree / VCS_DIR_NAME
        self.objects_dir = self.vcs_dir / 'objects'
        self.branches_dir = self.vcs_dir / 'branches'
        self.head_file = self.vcs_dir / 'HEAD'
        self.index_file = self.vcs_dir / 'index'
        self.config_file = self.vcs_dir / 'config'

        self._ref_manager = None
        self._config = None

    @property
    def refs(self):
        """Get RefManager instance."""
        if self._ref_manager is None:
            from tinyvcs.core.refs import RefManager
            self._ref_manager = RefManager(self)
        return self._ref_manager

    @property
    def config(self):
        """Get Config instance bound to this repository."""
        if self._config is None:
            from tinyvcs.core.config import Config
            self._config = Config(self.config_file)
        return self._config

    def init(self) -> 'Repository':
        """
        Initialize a new repository.

        Creates the .vcs directory structure:
        .vcs/
        ├── objects/       # Object database
        ├── branches/      # One file per branch, holding a commit digest
        ├── HEAD           # Current branch name, or a commit digest
        ├── index          # Staging area
        └── config         # Repository configuration

        The empty tree and a root commit pointing at it are written, and
        ``main`` is created on that commit. The root commit has a fixed
        timestamp, so its digest is the same in every repository.

        Returns:
            Repository: self for method chaining

        Raises:
            RepositoryExistsError: If a repository already exists here
        """
        if self.vcs_dir.exists():
            raise RepositoryExistsError()

        self.work_tree.mkdir(parents=True, exist_ok=True)
        self.vcs_dir.mkdir()
        self.objects_dir.mkdir()
        self.branches_dir.mkdir()

        tree_hash = self.write_object(Tree())
        root = Commit.create(
            tree_hash=tree_hash,
            parent_hash=NO_PARENT,
            message=INITIAL_COMMIT_MESSAGE,
            timestamp=0
        )
        root_hash = self.write_object(root)

        (self.branches_dir / DEFAULT_BRANCH).write_text(root_hash)
        self.head_file.write_text(DEFAULT_BRANCH)
        self.index_file.write_text('')
        self.config_file.write_text('[core]\n\trepositoryformatversion = 0\n')

        logger.info("Initialized repository at %s (root commit %s)", self.vcs_dir, root_hash[:7])
        return self

    @classmethod
    def find_repository(cls, path='.') -> Optional['Repository']:
        """
        Find repository by searching up the directory tree.

        Args:
            path: Starting path for search

        Returns:
            Repository if found, None otherwise
        """
        current = Path(path).resolve()

        while True:
            if (current / VCS_DIR_NAME).is_dir():
                return cls(str(current))

            if current == current.parent:
                return None

            current = current.parent

    @classmethod
    def require(cls, path='.') -> 'Repository':
        """Like find_repository, but raise NotInRepositoryError when none is found."""
        repo = cls.find_repository(path)
        if repo is None:
            raise NotInRepositoryError()
        return repo

    # Object store

    def object_path(self, digest: str) -> Path:
        """
        Get filesystem path for an object.

        Objects are sharded by the first 2 characters of the digest, with the
        remaining characters as the filename.
        """
        return self.objects_dir / digest[:2] / digest[2:]

    def put(self, digest: str, content: bytes) -> None:
        """
        Store content under digest.

        Objects are immutable, so rewriting an existing digest is a no-op.
        """
        path = self.object_path(digest)
        if path.exists():
            return
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)

    def get(self, digest: str) -> bytes:
        """
        Read the raw content stored under digest.

        Raises:
            ObjectNotFoundError: If no object has this digest
        """
        if not is_valid_digest(digest):
            raise ObjectNotFoundError(digest)
        path = self.object_path(digest)
        if not path.is_file():
            raise ObjectNotFoundError(digest)
        return path.read_bytes()

    def exists(self, digest: str) -> bool:
        """Check if an object with this digest is stored."""
        return is_valid_digest(digest) and self.object_path(digest).is_file()

    def write_object(self, obj: VcsObject) -> str:
        """
        Write object to the store.

        Args:
            obj: Blob, Tree or Commit

        Returns:
            str: Digest of the object
        """
        digest = obj.hash
        self.put(digest, obj.serialize())
        logger.debug("Wrote %s %s", obj.type, digest[:7])
        return digest

    def read_object(self, digest: str) -> VcsObject:
        """
        Read object from the store.

        Raises:
            ObjectNotFoundError: If object not found
            CorruptObjectError: If the stored bytes are not a valid object
        """
        return parse_object(self.get(digest))

    def read_commit(self, digest: str) -> Commit:
        """Read an object that must be a commit."""
        obj = self.read_object(digest)
        if not isinstance(obj, Commit):
            raise CorruptObjectError(f"Object {digest} is a {obj.type}, not a commit")
        return obj

    def read_tree(self, digest: str) -> Tree:
        """Read an object that must be a tree."""
        obj = self.read_object(digest)
        if not isinstance(obj, Tree):
            raise CorruptObjectError(f"Object {digest} is a {obj.type}, not a tree")
        return obj

    def is_commit(self, digest: str) -> bool:
        """True if digest names a stored commit."""
        if not self.exists(digest):
            return False
        return self.get(digest).startswith(b'Parent\n')

    def tree_files(self, tree_hash: str, prefix: str = '') -> Dict[str, str]:
        """
        Flatten a tree into a {path: blob_digest} mapping.

        Subtrees are walked recursively with ``name/`` prefixes.
        """
        tree = self.read_tree(tree_hash)
        files = {f'{prefix}{path}': digest for path, digest in tree.blobs.items()}
        for name, subtree_hash in tree.trees.items():
            files.update(self.tree_files(subtree_hash, f'{prefix}{name}/'))
        return files

    def commit_files(self, commit_hash: str) -> Dict[str, str]:
        """Flatten the tree of a commit."""
        return self.tree_files(self.read_commit(commit_hash).tree)

    def head_files(self) -> Dict[str, str]:
        """Flatten the tree of the commit HEAD points to."""
        return self.commit_files(self.refs.resolve_head())

    # Index

    def load_index(self):
        """Read the staging index from disk."""
        from tinyvcs.core.index import Index

        index = Index()
        index.read(self.index_file)
        return index

    def save_index(self, index) -> None:
        index.write(self.index_file)

    def __repr__(self) -> str:
        return f"Repository(path={self.work_tree})"
