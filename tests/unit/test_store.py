"""Object store tests."""

import hashlib

import pytest

from rit.core.store import ObjectStore


def test_put_shards_by_three_hex_chars(repo):
    """Test blobs land under objects/<3 hex>/<rest>."""
    hex_digest = repo.objects.put(b'hello')

    assert hex_digest == hashlib.sha256(b'hello').hexdigest()
    path = repo.objects_dir / hex_digest[:3] / hex_digest[3:]
    assert path.read_bytes() == b'hello'
    assert repo.objects.path_for(hex_digest) == path


def test_put_twice_is_noop(repo):
    """Test storing identical content twice keeps one blob."""
    first = repo.objects.put(b'same content')
    second = repo.objects.put(b'same content')

    assert first == second
    shard = repo.objects_dir / first[:3]
    assert list(shard.iterdir()) == [repo.objects.path_for(first)]


def test_put_exclusive_reports_existing(repo):
    """Test exclusive writes surface the duplicate."""
    repo.objects.put(b'tree bytes', exclusive=True)
    with pytest.raises(FileExistsError):
        repo.objects.put(b'tree bytes', exclusive=True)


def test_put_into_existing_shard(repo):
    """Test an existing shard directory does not mean the blob exists."""
    hex_digest = hashlib.sha256(b'second').hexdigest()
    (repo.objects_dir / hex_digest[:3]).mkdir()

    assert repo.objects.put(b'second', exclusive=True) == hex_digest
    assert repo.objects.get(hex_digest) == b'second'


def test_get_roundtrip(repo):
    hex_digest = repo.objects.put(b'\x00binary\xff')
    assert repo.objects.get(hex_digest) == b'\x00binary\xff'
    assert repo.objects.exists(hex_digest)


def test_get_missing(repo):
    with pytest.raises(FileNotFoundError):
        repo.objects.get('0' * 64)


def test_delete(repo):
    hex_digest = repo.objects.put(b'temporary')
    repo.objects.delete(hex_digest)
    assert not repo.objects.exists(hex_digest)


def test_delete_missing(repo):
    with pytest.raises(FileNotFoundError):
        repo.objects.delete('0' * 64)


def test_missing_root(temp_dir):
    """Test the store never creates its own root."""
    store = ObjectStore(temp_dir / 'objects')

    with pytest.raises(FileNotFoundError):
        store.put(b'data')
    with pytest.raises(FileNotFoundError):
        store.delete('0' * 64)
    assert not (temp_dir / 'objects').exists()


def test_failed_write_leaves_no_partial_blob(repo, disk):
    """Test a write that runs out of space can be retried in full."""
    data = b'hello world content'
    hex_digest = hashlib.sha256(data).hexdigest()

    disk.full = True
    with pytest.raises(OSError):
        repo.objects.put(data)

    assert not repo.objects.exists(hex_digest)
    assert list((repo.objects_dir / hex_digest[:3]).iterdir()) == []

    disk.full = False
    assert repo.objects.put(data, exclusive=True) == hex_digest
    assert repo.objects.get(hex_digest) == data
