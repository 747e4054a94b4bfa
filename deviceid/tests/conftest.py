"""
Shared fixtures for deviceid tests.
"""

import pytest

from deviceid.core.hashing import HashAlgorithm, HashlibAlgorithm


class RecordingHashAlgorithm(HashAlgorithm):
    """HashAlgorithm that records its inputs and how often it was closed."""

    def __init__(self, name: str = "md5", fail: Exception = None):
        self.inner = HashlibAlgorithm(name)
        self.fail = fail
        self.inputs = []
        self.close_count = 0

    def compute_hash(self, data: bytes) -> bytes:
        self.inputs.append(data)
        if self.fail is not None:
            raise self.fail
        return self.inner.compute_hash(data)

    def close(self) -> None:
        self.close_count += 1
        self.inner.close()


class RecordingFactory:
    """Factory handing out RecordingHashAlgorithm instances."""

    def __init__(self, name: str = "md5", fail: Exception = None):
        self.name = name
        self.fail = fail
        self.created = []

    def __call__(self) -> RecordingHashAlgorithm:
        algorithm = RecordingHashAlgorithm(self.name, self.fail)
        self.created.append(algorithm)
        return algorithm


@pytest.fixture
def recording_factory():
    return RecordingFactory()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep DEVICEID_* variables from the outer environment out of tests."""
    for name in (
        "DEVICEID_HASH_ALGORITHM",
        "DEVICEID_ENCODING",
        "DEVICEID_LOG_LEVEL",
        "DEVICEID_LOG_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)
