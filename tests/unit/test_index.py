"""Index tests."""

import pytest

from tinyvcs.core.hash import hash_object
from tinyvcs.core.index import Index, IndexEntry, RemoveOutcome
from tinyvcs.exceptions import CorruptIndexError

EMPTY_BLOB = hash_object(b'blob\n')


def test_index_creation():
    """Test creating empty index."""
    index = Index()
    assert len(index) == 0
    assert index.serialize() == ''


def test_entry_serialization():
    assert IndexEntry('a.txt', 'abc').serialize() == 'blob abc a.txt'
    assert IndexEntry('a.txt').serialize() == 'rm a.txt'


def test_entry_parse():
    entry = IndexEntry.parse('blob abc dir/my file.txt')
    assert entry.path == 'dir/my file.txt'
    assert entry.digest == 'abc'
    assert not entry.is_removal

    removal = IndexEntry.parse('rm old.txt')
    assert removal.path == 'old.txt'
    assert removal.is_removal


@pytest.mark.parametrize('line', ['tree abc a.txt', 'blob abc', 'rm', 'garbage'])
def test_entry_parse_rejects_malformed(line):
    with pytest.raises(CorruptIndexError):
        IndexEntry.parse(line)


def test_stage_add_new_file():
    index = Index()
    index.stage_add('a.txt', EMPTY_BLOB, {})
    assert index.serialize() == f'blob {EMPTY_BLOB} a.txt'


def test_stage_add_replaces_previous_entry():
    index = Index()
    index.stage_add('a.txt', 'one', {})
    index.stage_add('a.txt', 'two', {})
    assert len(index) == 1
    assert index.get_entry('a.txt').digest == 'two'


def test_stage_add_unchanged_tracked_file_clears_entry():
    head = {'a.txt': 'original'}
    index = Index()
    index.stage_add('a.txt', 'edited', head)
    assert len(index) == 1

    index.stage_add('a.txt', 'original', head)
    assert len(index) == 0


def test_stage_add_replaces_removal():
    head = {'a.txt': 'original'}
    index = Index()
    index.stage_remove('a.txt', head)
    index.stage_add('a.txt', 'new', head)
    assert index.get_entry('a.txt') == IndexEntry('a.txt', 'new')


def test_stage_remove_tracked_file():
    head = {'a.txt': 'original'}
    index = Index()
    assert index.stage_remove('a.txt', head) is RemoveOutcome.STAGED
    assert index.removals() == ['a.txt']


def test_stage_remove_tracked_file_with_pending_add():
    head = {'a.txt': 'original'}
    index = Index()
    index.stage_add('a.txt', 'edited', head)
    assert index.stage_remove('a.txt', head) is RemoveOutcome.STAGED
    assert index.get_entry('a.txt').is_removal
    assert len(index) == 1


def test_stage_remove_untracked_staged_file():
    """Add then rm of a new file leaves the index empty."""
    index = Index()
    index.stage_add('new.txt', 'abc', {})
    assert index.stage_remove('new.txt', {}) is RemoveOutcome.UNSTAGED
    assert len(index) == 0


def test_stage_remove_unknown_file():
    index = Index()
    assert index.stage_remove('x.txt', {}) is RemoveOutcome.NOTHING
    assert len(index) == 0


def test_additions_and_removals():
    index = Index()
    index.stage_add('b.txt', 'bb', {})
    index.stage_remove('z.txt', {'z.txt': 'zz'})
    index.stage_remove('c.txt', {'c.txt': 'cc'})
    assert index.additions() == {'b.txt': 'bb'}
    assert index.removals() == ['c.txt', 'z.txt']


def test_serialize_sorted_by_path():
    index = Index()
    index.stage_add('b.txt', 'bb', {})
    index.stage_remove('a.txt', {'a.txt': 'aa'})
    assert index.serialize() == 'rm a.txt\nblob bb b.txt'


def test_index_write_read(tmp_path):
    """Test writing and reading index."""
    index_path = tmp_path / 'index'
    index = Index()
    index.stage_add('a.txt', 'aa', {})
    index.stage_remove('old.txt', {'old.txt': 'oo'})
    index.write(index_path)

    loaded = Index()
    loaded.read(index_path)
    assert loaded.entries == index.entries


def test_index_read_missing_file(tmp_path):
    index = Index()
    index.read(tmp_path / 'missing')
    assert len(index) == 0


def test_index_read_corrupt(tmp_path):
    index_path = tmp_path / 'index'
    index_path.write_text('blob aa a.txt\nbogus line')
    with pytest.raises(CorruptIndexError):
        Index().read(index_path)


def test_clear():
    index = Index()
    index.stage_add('a.txt', 'aa', {})
    index.clear()
    assert len(index) == 0
