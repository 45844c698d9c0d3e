"""
Simple wrapper around the hash functions approved for DSA, used by the
message-level signing helpers.
"""

import hashlib

SUPPORTED_ALGORITHMS = ('sha1', 'sha224', 'sha256', 'sha384', 'sha512')


class HashResult:
    """Container for hash results that can return bytes via as_ref()"""

    def __init__(self, hash_bytes: bytes):
        self._bytes = hash_bytes

    def as_ref(self) -> bytes:
        """Return the hash bytes"""
        return self._bytes

    def hex(self) -> str:
        return self._bytes.hex()

    def __len__(self) -> int:
        return len(self._bytes)


class Hasher:
    """Hash engine over the SHA-1 and SHA-2 family"""

    def __init__(self, algorithm: str):
        algorithm = algorithm.lower().replace('-', '')
        if algorithm not in SUPPORTED_ALGORITHMS:
            raise ValueError(f"Unsupported hash algorithm: {algorithm}")
        self.algorithm = algorithm
        self._hasher = hashlib.new(algorithm)

    def update(self, data: bytes) -> None:
        """Update the hasher with new data"""
        self._hasher.update(data)

    def finish(self) -> HashResult:
        """Finalize the hash and return the result"""
        return HashResult(self._hasher.digest())


def hash_message(message: bytes, algorithm: str = 'sha256') -> HashResult:
    """Hash a whole message in one call"""
    hasher = Hasher(algorithm)
    hasher.update(message)
    return hasher.finish()
