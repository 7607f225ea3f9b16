"""Shared pytest fixtures for tinyvcs tests."""

import os
import pytest
import tempfile
import shutil
from pathlib import Path

from click.testing import CliRunner

from tinyvcs.core.config import Config
from tinyvcs.core.objects import Blob, Tree, Commit
from tinyvcs.core.repository import Repository


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep tests away from the user's ~/.vcsconfig and VCS_* variables."""
    monkeypatch.setattr(Config, 'GLOBAL_CONFIG_PATH', tmp_path / 'global.vcsconfig')
    for name in list(os.environ):
        if name.startswith('VCS_'):
            monkeypatch.delenv(name)
    return tmp_path / 'global.vcsconfig'


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    yield Path(tmpdir).resolve()
    shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture
def repo(temp_dir):
    """Create an initialized repository."""
    return Repository(str(temp_dir)).init()


@pytest.fixture
def in_repo(repo, monkeypatch):
    """Initialized repository that is also the current directory."""
    monkeypatch.chdir(repo.work_tree)
    return repo


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def write_file(repo):
    """Write a file inside the work tree, creating parent directories."""
    def _write(rel_path, content=''):
        path = repo.work_tree / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content)
        return path
    return _write


@pytest.fixture
def sample_blob():
    """Create a sample blob object."""
    return Blob(b"Hello, World!\n")


@pytest.fixture
def sample_tree(repo, sample_blob):
    """Create a sample tree with one blob."""
    blob_hash = repo.write_object(sample_blob)
    tree = Tree()
    tree.add_blob('test.txt', blob_hash)
    return tree


@pytest.fixture
def sample_commit(sample_tree, repo):
    """Sample commit on top of the root commit."""
    tree_hash = repo.write_object(sample_tree)
    return Commit.create(
        tree_hash=tree_hash,
        parent_hash=repo.refs.resolve_head(),
        message="Test commit",
        timestamp=1700000000
    )


@pytest.fixture
def commit_files(repo, write_file):
    """
    Stage and commit files through the command surface.

    Takes a {path: content} mapping and a message, returns the commit digest.
    """
    from tinyvcs.operations import commands

    cwd = str(repo.work_tree)

    def _commit(files, message="Test commit", timestamp=1700000000):
        for rel_path, content in files.items():
            write_file(rel_path, content)
            result = commands.add(rel_path, cwd=cwd)
            assert not result.error, result.output
        result = commands.commit(message, timestamp=timestamp, cwd=cwd)
        assert not result.error, result.output
        return result.digest
    return _commit
