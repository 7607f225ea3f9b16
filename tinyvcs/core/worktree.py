"""Helpers for reading the working directory."""

from pathlib import Path
from typing import Dict, Iterator, Optional

from tinyvcs.core.objects import Blob
from tinyvcs.core.repository import VCS_DIR_NAME
from tinyvcs.exceptions import InvalidArgumentsError


def relative_path(repo, path, cwd: Optional[Path] = None) -> str:
    """
    Turn a user supplied path into a repository-relative posix path.

    The path does not need to exist. Relative paths are taken from cwd
    (defaults to the process working directory).

    Raises:
        InvalidArgumentsError: If path points outside the work tree or into .vcs,
            or its name contains a line break or ": "
    """
    path = Path(path)
    if not path.is_absolute():
        path = Path(cwd or Path.cwd()) / path
    path = path.resolve()

    try:
        rel = path.relative_to(repo.work_tree)
    except ValueError:
        raise InvalidArgumentsError(f"{path} is outside the repository.")

    if not rel.parts or rel.parts[0] == VCS_DIR_NAME:
        raise InvalidArgumentsError("Incorrect operands.")
    if any(bad in rel.as_posix() for bad in ('\n', '\r', ': ')):
        raise InvalidArgumentsError(f"Unsupported file name: {rel.as_posix()!r}")
    return rel.as_posix()


def file_digest(filepath) -> str:
    """Digest the blob a file would be stored as, without writing it."""
    return Blob.from_file(filepath).hash


def iter_files(repo) -> Iterator[str]:
    """Yield every working file as a relative posix path, skipping .vcs."""
    for path in sorted(repo.work_tree.rglob('*')):
        rel = path.relative_to(repo.work_tree)
        if rel.parts[0] == VCS_DIR_NAME:
            continue
        if path.is_file():
            yield rel.as_posix()


def top_level_files(repo) -> set:
    """Names of the regular files directly under the work tree root."""
    return {p.name for p in repo.work_tree.iterdir() if p.is_file()}


def working_files(repo) -> Dict[str, str]:
    """Get all files in working directory with their blob hashes."""
    return {rel: file_digest(repo.work_tree / rel) for rel in iter_files(repo)}
