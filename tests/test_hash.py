"""Hashing tests."""

import hashlib

from tinyvcs.core.hash import hash_object, hash_text


def test_hash_object_is_sha256_hex():
    assert hash_object(b'hello') == hashlib.sha256(b'hello').hexdigest()


def test_hash_length():
    assert len(hash_object(b'')) == 64


def test_hash_text_encodes_utf8():
    assert hash_text('héllo') == hash_object('héllo'.encode('utf-8'))


def test_hash_is_stable():
    """Same input always yields the same digest."""
    assert hash_object(b'data') == hash_object(b'data')
    assert hash_object(b'data') != hash_object(b'data\n')
