"""
Custom exceptions for tinyvcs.

Errors are split in two families:

- UserError: recoverable conditions caused by how a command was invoked
  (missing branch, empty index, detached HEAD...). They are detected before
  anything is written and are reported back as plain result strings.
- InternalError: the repository itself is damaged (missing object, malformed
  index line, unparseable tree). These are fatal and are never converted into
  a result string.
"""


class VcsError(Exception):
    """Base exception for all tinyvcs errors."""
    pass


class UserError(VcsError):
    """Raised for recoverable, user-facing conditions."""
    pass


class NotInRepositoryError(UserError):
    """Raised when no .vcs directory can be found."""

    def __init__(self, message: str = "Not in an initialized vcs directory."):
        super().__init__(message)


class RepositoryExistsError(UserError):
    """Raised when init runs inside an existing repository."""

    def __init__(self, message: str = "Already in a vcs directory."):
        super().__init__(message)


class InvalidArgumentsError(UserError):
    """Raised when a command is called with the wrong operands."""

    def __init__(self, message: str = "Incorrect operands."):
        super().__init__(message)


class ReferenceNotFoundError(UserError):
    """Raised when a branch or commit cannot be resolved."""
    pass


class NothingToCommitError(UserError):
    """Raised when committing with an empty index."""

    def __init__(self, message: str = "No changes added to the commit"):
        super().__init__(message)


class EmptyMessageError(UserError):
    """Raised when committing without a message."""

    def __init__(self, message: str = "Please enter a commit message."):
        super().__init__(message)


class DetachedHeadError(UserError):
    """Raised when add, rm or commit is attempted with a detached HEAD."""

    def __init__(
        self,
        message: str = "Currently in a detached HEAD state. "
                       "Check out a branch to modify the directory."
    ):
        super().__init__(message)


class WorkingFileNotFoundError(UserError):
    """Raised when a path given to a command is not a file in the work tree."""

    def __init__(self, message: str = "File does not exist."):
        super().__init__(message)


class InternalError(VcsError):
    """Raised when the repository is corrupted."""
    pass


class ObjectNotFoundError(InternalError):
    """Raised when an object digest has no file in the object store."""

    def __init__(self, digest: str):
        super().__init__(f"No object with hash of {digest} exists.")
        self.digest = digest


class CorruptObjectError(InternalError):
    """Raised when a stored object cannot be parsed."""
    pass


class CorruptIndexError(InternalError):
    """Raised when the index file contains an unparseable record."""
    pass
