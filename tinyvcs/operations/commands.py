"""
Command surface of tinyvcs.

Every command locates the repository from ``cwd``, performs one operation
and returns a CommandResult. Recoverable conditions (bad operands, missing
branch, empty index, detached HEAD...) come back as the result's output
with ``error`` set; corruption and I/O failures propagate as exceptions.
"""

import functools
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from tinyvcs.core.index import RemoveOutcome
from tinyvcs.core.objects import Blob
from tinyvcs.core.repository import Repository
from tinyvcs.core.worktree import relative_path
from tinyvcs.exceptions import (
    InvalidArgumentsError,
    ReferenceNotFoundError,
    RepositoryExistsError,
    UserError,
    WorkingFileNotFoundError,
)
from tinyvcs.operations.checkout import CheckoutEngine
from tinyvcs.operations.commit import CommitBuilder
from tinyvcs.operations.log import format_entry, get_commit_history
from tinyvcs.operations.status import StatusEngine, format_status

logger = logging.getLogger(__name__)


@dataclass
class CommandResult:
    """
    Outcome of a command.

    Attributes:
        output: Text to show the user (may be empty)
        digest: Object created by the command, if any
        error: True when the command was refused
    """
    output: str = ''
    digest: Optional[str] = None
    error: bool = False


def reports_user_errors(func):
    """Turn UserError raised by a command into an error CommandResult."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except UserError as e:
            logger.debug("%s refused: %s", func.__name__, e)
            return CommandResult(str(e), error=True)
    return wrapper


@reports_user_errors
def init(path: str = '.', cwd='.') -> CommandResult:
    """Create a repository in path (created if missing)."""
    target = Path(cwd) / path
    if Repository.find_repository(target) is not None:
        raise RepositoryExistsError()

    repo = Repository(str(target)).init()
    return CommandResult(digest=repo.refs.resolve_head())


@reports_user_errors
def add(path: str, cwd='.') -> CommandResult:
    """Stage the current content of a file."""
    repo = Repository.require(cwd)
    repo.refs.require_attached()

    rel_path = relative_path(repo, path, cwd)
    full_path = repo.work_tree / rel_path
    if not full_path.is_file():
        raise WorkingFileNotFoundError()

    blob_hash = repo.write_object(Blob.from_file(full_path))
    index = repo.load_index()
    index.stage_add(rel_path, blob_hash, repo.head_files())
    repo.save_index(index)
    return CommandResult(digest=blob_hash)


@reports_user_errors
def remove(path: str, cwd='.') -> CommandResult:
    """
    Stage a file for removal.

    A tracked file is staged for removal and deleted from the work tree.
    A staged file that HEAD does not track is only unstaged.
    """
    repo = Repository.require(cwd)
    repo.refs.require_attached()

    rel_path = relative_path(repo, path, cwd)
    index = repo.load_index()
    outcome = index.stage_remove(rel_path, repo.head_files())

    if outcome is RemoveOutcome.NOTHING:
        return CommandResult("No reason to remove the file.")

    if outcome is RemoveOutcome.STAGED:
        full_path = repo.work_tree / rel_path
        if full_path.is_file():
            full_path.unlink()
    repo.save_index(index)
    return CommandResult()


@reports_user_errors
def commit(message: str, timestamp: Optional[int] = None, cwd='.') -> CommandResult:
    """Record the staged changes on the current branch."""
    repo = Repository.require(cwd)
    head = repo.refs.require_attached()

    index = repo.load_index()
    commit_hash = CommitBuilder(repo).build(head.commit, index, message, timestamp)

    repo.refs.update_branch(head.branch, commit_hash)
    index.clear()
    repo.save_index(index)
    return CommandResult(digest=commit_hash)


@reports_user_errors
def branch(name: Optional[str] = None, delete: Optional[str] = None, cwd='.') -> CommandResult:
    """
    List, create or delete branches.

    With no arguments lists branches, the current one marked with ``*``.
    With name creates a branch at HEAD. With delete removes a branch
    other than the current one.
    """
    repo = Repository.require(cwd)
    refs = repo.refs

    if name is not None and delete is not None:
        raise InvalidArgumentsError()

    if delete is not None:
        if delete == refs.get_current_branch():
            return CommandResult(
                f"Cannot delete branch {delete}. Switch to a different branch to delete.",
                error=True
            )
        if not refs.delete_branch(delete):
            raise ReferenceNotFoundError(f"Branch {delete} was not found.")
        return CommandResult(f"Deleted branch {delete}.")

    if name is not None:
        if refs.branch_exists(name):
            return CommandResult(f"A branch named {name} already exists.", error=True)
        refs.create_branch(name, refs.resolve_head())
        return CommandResult()

    current = refs.get_current_branch()
    lines = [f"{b} *" if b == current else b for b, _ in refs.list_branches()]
    return CommandResult("\n".join(lines))


@reports_user_errors
def checkout(target: Optional[str] = None, path: Optional[str] = None, cwd='.') -> CommandResult:
    """
    Switch branches, detach at a commit, or restore a single file.

    ``checkout(target)`` switches to a branch, or detaches HEAD when target
    is a commit digest. ``checkout(target, path)`` restores path from the
    given commit, and ``checkout(path=path)`` restores it from HEAD.
    """
    repo = Repository.require(cwd)
    refs = repo.refs
    engine = CheckoutEngine(repo)

    if path is not None:
        if target is None:
            commit_hash = refs.resolve_head()
        elif repo.is_commit(target):
            commit_hash = target
        else:
            raise ReferenceNotFoundError(f"No commit with ID {target} exists.")
        rel_path = relative_path(repo, path, cwd)
        blob_hash = engine.checkout_single_file(commit_hash, rel_path)
        return CommandResult(digest=blob_hash)

    if not target:
        raise InvalidArgumentsError()

    head = refs.read_head()
    if target == head.branch or (head.detached and target == head.commit):
        return CommandResult(f"Already on {target}.")

    if refs.branch_exists(target):
        engine.checkout_branch(target)
        return CommandResult(f"Switched to branch {target}.")

    if repo.is_commit(target):
        engine.checkout_commit(target)
        return CommandResult(f"Switched to commit {target}.")

    raise ReferenceNotFoundError(f"{target} does not exist.")


@reports_user_errors
def log(cwd='.') -> CommandResult:
    """Show the history of HEAD, newest first."""
    repo = Repository.require(cwd)
    head = repo.refs.read_head()

    history = get_commit_history(repo, head.commit)
    if not history:
        where = head.branch if not head.detached else head.commit
        return CommandResult(f"Your current branch {where} has no commits yet.")

    return CommandResult("\n".join(format_entry(h, c) for h, c in history))


@reports_user_errors
def status(cwd='.') -> CommandResult:
    """Describe staged, unstaged and untracked changes."""
    repo = Repository.require(cwd)
    head = repo.refs.read_head()
    return CommandResult(format_status(head, StatusEngine(repo).compute()))
