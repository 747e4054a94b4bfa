"""
Tests for hash engines and factories.
"""

import hashlib

import pytest

from deviceid.core.errors import HashAlgorithmClosedError, UnsupportedHashAlgorithmError
from deviceid.core.hashing import (
    HASH_ALGORITHMS,
    HashlibAlgorithm,
    available_hash_algorithms,
    hash_algorithm_factory,
    md5,
    sha1,
    sha256,
    sha384,
    sha512,
)


@pytest.mark.parametrize(
    "factory,reference",
    [
        (md5, hashlib.md5),
        (sha1, hashlib.sha1),
        (sha256, hashlib.sha256),
        (sha384, hashlib.sha384),
        (sha512, hashlib.sha512),
    ],
)
def test_factories_match_hashlib(factory, reference):
    with factory() as algorithm:
        assert algorithm.compute_hash(b"device") == reference(b"device").digest()


def test_factory_returns_fresh_engine_each_call():
    assert sha256() is not sha256()


def test_engine_reusable_within_scope():
    """Each compute_hash starts from a clean state."""
    with sha256() as algorithm:
        first = algorithm.compute_hash(b"abc")
        second = algorithm.compute_hash(b"abc")

    assert first == second == hashlib.sha256(b"abc").digest()


def test_context_manager_closes_engine():
    with md5() as algorithm:
        assert not algorithm.closed

    assert algorithm.closed
    with pytest.raises(HashAlgorithmClosedError):
        algorithm.compute_hash(b"late")


def test_context_manager_closes_on_error():
    algorithm = md5()

    with pytest.raises(RuntimeError):
        with algorithm:
            raise RuntimeError("boom")

    assert algorithm.closed


def test_close_is_idempotent():
    algorithm = sha1()
    algorithm.close()
    algorithm.close()

    assert algorithm.closed


def test_digest_size_and_name():
    algorithm = HashlibAlgorithm("sha256")

    assert algorithm.name == "sha256"
    assert algorithm.digest_size == 32


def test_hash_algorithm_factory_by_name():
    factory = hash_algorithm_factory("blake2b")

    with factory() as algorithm:
        assert algorithm.compute_hash(b"x") == hashlib.blake2b(b"x").digest()


def test_unknown_algorithm_rejected_eagerly():
    with pytest.raises(UnsupportedHashAlgorithmError):
        hash_algorithm_factory("not-a-hash")


def test_variable_length_algorithm_rejected():
    with pytest.raises(UnsupportedHashAlgorithmError):
        HashlibAlgorithm("shake_128")


def test_available_algorithms_include_shortcuts():
    names = available_hash_algorithms()

    assert set(HASH_ALGORITHMS) <= set(names)
    assert not any(n.startswith("shake_") for n in names)
    assert names == sorted(names)
