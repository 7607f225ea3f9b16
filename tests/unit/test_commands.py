"""Command surface tests: result strings and digests."""

import pytest

from tinyvcs.core.hash import hash_object, hash_text
from tinyvcs.core.objects import Blob
from tinyvcs.core.repository import Repository
from tinyvcs.operations import commands

EMPTY_TREE = hash_text('Trees\nBlobs')
EMPTY_BLOB = hash_object(b'blob\n')
DETACHED = "Currently in a detached HEAD state. Check out a branch to modify the directory."


@pytest.fixture
def cwd(repo):
    return str(repo.work_tree)


def test_init_returns_root_commit(tmp_path):
    result = commands.init(cwd=str(tmp_path))

    assert result.output == ''
    assert not result.error
    repo = Repository(str(tmp_path))
    assert result.digest == repo.refs.resolve_head()
    assert repo.read_commit(result.digest).tree == EMPTY_TREE


def test_init_inside_repository(repo, cwd):
    (repo.work_tree / 'sub').mkdir()
    result = commands.init('sub', cwd=cwd)
    assert result.output == 'Already in a vcs directory.'
    assert result.error
    assert not (repo.work_tree / 'sub' / '.vcs').exists()


def test_commands_outside_repository(tmp_path):
    for result in (commands.add('a.txt', cwd=str(tmp_path)),
                   commands.status(cwd=str(tmp_path)),
                   commands.log(cwd=str(tmp_path))):
        assert result.output == 'Not in an initialized vcs directory.'
        assert result.error


def test_add_empty_file_then_commit(repo, cwd, write_file):
    """Adding an empty file and committing it."""
    root_hash = repo.refs.resolve_head()
    write_file('a.txt', '')

    result = commands.add('a.txt', cwd=cwd)
    assert result.digest == EMPTY_BLOB
    assert repo.index_file.read_text() == f'blob {EMPTY_BLOB} a.txt'

    result = commands.commit('msg', cwd=cwd)
    commit = repo.read_commit(result.digest)
    assert commit.parent == root_hash
    assert repo.tree_files(commit.tree) == {'a.txt': EMPTY_BLOB}
    assert repo.index_file.read_text() == ''
    assert repo.refs.read_branch('main') == result.digest


def test_add_missing_file(cwd):
    result = commands.add('nope.txt', cwd=cwd)
    assert result.output == 'File does not exist.'


def test_add_path_inside_vcs_dir(cwd):
    result = commands.add('.vcs/HEAD', cwd=cwd)
    assert result.output == 'Incorrect operands.'


def test_add_from_subdirectory(repo, write_file):
    write_file('src/mod.py', 'x = 1')
    result = commands.add('mod.py', cwd=str(repo.work_tree / 'src'))
    assert not result.error
    assert repo.load_index().get_entry('src/mod.py') is not None


def test_readd_unchanged_file_clears_index(repo, cwd, commit_files):
    commit_files({'a.txt': 'content'})
    commands.add('a.txt', cwd=cwd)
    assert len(repo.load_index()) == 0


def test_add_then_rm_new_file(repo, cwd, write_file):
    write_file('new.txt', 'n')
    commands.add('new.txt', cwd=cwd)

    result = commands.remove('new.txt', cwd=cwd)
    assert result.output == ''
    assert len(repo.load_index()) == 0
    assert (repo.work_tree / 'new.txt').exists()


def test_rm_tracked_file(repo, cwd, commit_files):
    commit_files({'a.txt': 'a'})

    result = commands.remove('a.txt', cwd=cwd)
    assert result.output == ''
    assert repo.index_file.read_text() == 'rm a.txt'
    assert not (repo.work_tree / 'a.txt').exists()


def test_rm_unknown_file(repo, cwd, write_file):
    write_file('x.txt', 'x')
    index_before = repo.index_file.read_text()

    result = commands.remove('x.txt', cwd=cwd)
    assert result.output == 'No reason to remove the file.'
    assert repo.index_file.read_text() == index_before
    assert (repo.work_tree / 'x.txt').exists()


def test_commit_messages(repo, cwd, write_file):
    assert commands.commit('msg', cwd=cwd).output == 'No changes added to the commit'

    write_file('a.txt', 'a')
    commands.add('a.txt', cwd=cwd)
    assert commands.commit('', cwd=cwd).output == 'Please enter a commit message.'
    assert len(repo.load_index()) == 1


def test_detached_head_blocks_writes(repo, cwd, commit_files, write_file):
    first = commit_files({'a.txt': '1'}, timestamp=1)
    commit_files({'a.txt': '2'}, timestamp=2)
    commands.checkout(first, cwd=cwd)
    write_file('b.txt', 'b')

    assert commands.add('b.txt', cwd=cwd).output == DETACHED
    assert commands.remove('a.txt', cwd=cwd).output == DETACHED
    assert commands.commit('msg', cwd=cwd).output == DETACHED


def test_branch_and_checkout_messages(repo, cwd):
    root_hash = repo.refs.resolve_head()

    assert commands.branch('feature', cwd=cwd).output == ''
    assert repo.refs.read_branch('feature') == root_hash
    assert commands.checkout('feature', cwd=cwd).output == 'Switched to branch feature.'
    assert commands.checkout('feature', cwd=cwd).output == 'Already on feature.'


def test_branch_already_exists(cwd):
    result = commands.branch('main', cwd=cwd)
    assert result.output == 'A branch named main already exists.'
    assert result.error


def test_branch_listing(repo, cwd):
    commands.branch('feature', cwd=cwd)
    commands.branch('alpha', cwd=cwd)
    assert commands.branch(cwd=cwd).output == 'alpha\nfeature\nmain *'


def test_branch_delete(repo, cwd):
    commands.branch('feature', cwd=cwd)

    assert commands.branch(delete='main', cwd=cwd).output == \
        'Cannot delete branch main. Switch to a different branch to delete.'
    assert commands.branch(delete='feature', cwd=cwd).output == 'Deleted branch feature.'
    assert commands.branch(delete='feature', cwd=cwd).output == 'Branch feature was not found.'


def test_branch_name_and_delete_together(cwd):
    assert commands.branch('a', delete='b', cwd=cwd).output == 'Incorrect operands.'


def test_checkout_commit_and_unknown_target(repo, cwd, commit_files):
    first = commit_files({'a.txt': '1'}, timestamp=1)

    assert commands.checkout(first, cwd=cwd).output == f'Switched to commit {first}.'
    assert repo.refs.is_detached_head()
    assert commands.checkout('nowhere', cwd=cwd).output == 'nowhere does not exist.'
    assert commands.checkout(cwd=cwd).output == 'Incorrect operands.'


def test_checkout_blob_digest_is_not_a_commit(repo, cwd):
    blob_hash = repo.write_object(Blob(b'x'))
    assert commands.checkout(blob_hash, cwd=cwd).output == f'{blob_hash} does not exist.'


def test_checkout_single_file(repo, cwd, commit_files, write_file):
    first = commit_files({'a.txt': 'v1'}, timestamp=1)
    commit_files({'a.txt': 'v2'}, timestamp=2)
    write_file('a.txt', 'dirty')

    assert commands.checkout(path='a.txt', cwd=cwd).output == ''
    assert (repo.work_tree / 'a.txt').read_text() == 'v2'

    assert commands.checkout(first, path='a.txt', cwd=cwd).output == ''
    assert (repo.work_tree / 'a.txt').read_text() == 'v1'
    assert repo.refs.get_current_branch() == 'main'

    result = commands.checkout('f' * 64, path='a.txt', cwd=cwd)
    assert result.output == f"No commit with ID {'f' * 64} exists."


def test_log(repo, cwd, commit_files):
    assert commands.log(cwd=cwd).output == 'Your current branch main has no commits yet.'

    first = commit_files({'a.txt': '1'}, message='first', timestamp=0)
    second = commit_files({'a.txt': '2'}, message='second', timestamp=86400)

    assert commands.log(cwd=cwd).output == (
        f'Commit: {second}\nDate: Fri Jan 02 00:00:00 1970\nsecond\n'
        f'\n'
        f'Commit: {first}\nDate: Thu Jan 01 00:00:00 1970\nfirst\n'
    )


def test_status_report(repo, cwd, commit_files, write_file):
    commit_files({'a.txt': 'a'})
    write_file('a.txt', 'edited')
    write_file('new.txt', 'n')

    assert commands.status(cwd=cwd).output == (
        'On branch main\n'
        'Changes not staged for commit:\n\tmodified: a.txt\n\n'
        'Untracked files:\n\tnew.txt\n'
    )

    commands.add('a.txt', cwd=cwd)
    assert commands.status(cwd=cwd).output == (
        'On branch main\n'
        'Changes to be committed:\n\tmodified: a.txt\n\n'
        'Untracked files:\n\tnew.txt\n'
    )


@pytest.mark.parametrize('name', ['a\nb.txt', 'a\rb.txt', 'a: b.txt'])
def test_add_rejects_unrecordable_file_names(repo, cwd, write_file, name):
    write_file(name, 'x')

    result = commands.add(name, cwd=cwd)
    assert result.error
    assert repo.index_file.read_text() == ''
    assert commands.status(cwd=cwd).output.startswith('On branch main\n')


def test_checkout_target_outside_object_store(repo, cwd, tmp_path):
    outside = tmp_path / 'evil'
    outside.write_text(f"Parent\nnone\nTime\n0\nTree Hash\n{EMPTY_TREE}\nMessage\nx")
    target = 'ab' + str(outside)

    assert not repo.is_commit(target)
    assert commands.checkout(target, cwd=cwd).output == f'{target} does not exist.'
    assert repo.head_file.read_text() == 'main'


def test_checkout_current_detached_commit(repo, cwd, commit_files, write_file):
    first = commit_files({'a.txt': '1'}, timestamp=1)
    commit_files({'a.txt': '2'}, timestamp=2)
    commands.checkout(first, cwd=cwd)
    write_file('a.txt', 'scribbled')

    assert commands.checkout(first, cwd=cwd).output == f'Already on {first}.'
    assert (repo.work_tree / 'a.txt').read_text() == 'scribbled'
