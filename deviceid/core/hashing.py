"""
Hash engines and the factories that create them.

Formatters receive a factory, not an engine: each identifier is computed
with its own engine, closed when the computation ends.
"""

import hashlib
from abc import ABC, abstractmethod
from typing import Callable, Dict, List

from .errors import HashAlgorithmClosedError, UnsupportedHashAlgorithmError


class HashAlgorithm(ABC):
    """
    Stateful hash engine with scoped lifetime.

    Use as a context manager:

        with factory() as algorithm:
            digest = algorithm.compute_hash(data)
    """

    @abstractmethod
    def compute_hash(self, data: bytes) -> bytes:
        """Return the digest of data."""
        ...

    def close(self) -> None:
        """Release the engine. Safe to call more than once."""
        pass

    def __enter__(self) -> "HashAlgorithm":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class HashlibAlgorithm(HashAlgorithm):
    """
    HashAlgorithm backed by hashlib.

    Each compute_hash() starts from a copy of the pristine hashlib object,
    so the engine can hash several inputs inside one scope.
    """

    def __init__(self, name: str):
        try:
            self._initial = hashlib.new(name)
        except (ValueError, TypeError) as e:
            raise UnsupportedHashAlgorithmError(f"Unsupported hash algorithm: {name}") from e
        if self._initial.digest_size == 0:
            # shake_* have no fixed digest length
            raise UnsupportedHashAlgorithmError(f"Variable-length hash algorithm not supported: {name}")
        self.name = self._initial.name
        self.digest_size = self._initial.digest_size
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def compute_hash(self, data: bytes) -> bytes:
        if self._closed:
            raise HashAlgorithmClosedError(f"{self.name} hash engine is closed")
        h = self._initial.copy()
        h.update(data)
        return h.digest()

    def close(self) -> None:
        self._closed = True
        self._initial = None

    def __repr__(self) -> str:
        return f"HashlibAlgorithm({self.name!r})"


HashAlgorithmFactory = Callable[[], HashAlgorithm]


def hash_algorithm_factory(name: str) -> HashAlgorithmFactory:
    """
    Return a zero-argument factory producing fresh engines for name.

    The name is checked when the factory is created.

    Raises:
        UnsupportedHashAlgorithmError: If hashlib does not know the name
    """
    probe = HashlibAlgorithm(name)
    canonical_name = probe.name
    probe.close()

    def factory() -> HashAlgorithm:
        return HashlibAlgorithm(canonical_name)

    factory.__name__ = canonical_name
    return factory


def md5() -> HashAlgorithm:
    return HashlibAlgorithm("md5")


def sha1() -> HashAlgorithm:
    return HashlibAlgorithm("sha1")


def sha256() -> HashAlgorithm:
    return HashlibAlgorithm("sha256")


def sha384() -> HashAlgorithm:
    return HashlibAlgorithm("sha384")


def sha512() -> HashAlgorithm:
    return HashlibAlgorithm("sha512")


HASH_ALGORITHMS: Dict[str, HashAlgorithmFactory] = {
    "md5": md5,
    "sha1": sha1,
    "sha256": sha256,
    "sha384": sha384,
    "sha512": sha512,
}


def available_hash_algorithms() -> List[str]:
    """Names accepted by hash_algorithm_factory() on every platform, sorted."""
    return sorted(n for n in hashlib.algorithms_guaranteed if not n.startswith("shake_"))
