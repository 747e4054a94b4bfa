"""
Per-component value encoders used by StringDeviceIdFormatter.
"""

from abc import ABC, abstractmethod

from ..core.canonical import utf8_bytes
from ..core.encoders import ByteArrayEncoder
from ..core.errors import InvalidArgumentError
from ..core.hashing import HashAlgorithmFactory


class DeviceIdComponentEncoder(ABC):
    @abstractmethod
    def encode(self, value: str) -> str:
        ...


class HashDeviceIdComponentEncoder(DeviceIdComponentEncoder):
    """Hashes one component value with a fresh engine and encodes the digest."""

    def __init__(self, hash_algorithm: HashAlgorithmFactory, byte_array_encoder: ByteArrayEncoder):
        if hash_algorithm is None:
            raise InvalidArgumentError("hash_algorithm is required")
        if byte_array_encoder is None:
            raise InvalidArgumentError("byte_array_encoder is required")
        self._hash_algorithm = hash_algorithm
        self._byte_array_encoder = byte_array_encoder

    def encode(self, value: str) -> str:
        with self._hash_algorithm() as algorithm:
            digest = algorithm.compute_hash(utf8_bytes(value))
        return self._byte_array_encoder.encode(digest)


class PlainDeviceIdComponentEncoder(DeviceIdComponentEncoder):
    """Passes values through unchanged."""

    def encode(self, value: str) -> str:
        return value
