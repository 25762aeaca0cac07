"""Content hashing used to derive asset version tokens."""
import hashlib
from pathlib import Path
from typing import BinaryIO

CHUNK_SIZE = 65536


def hash_content(source: bytes | BinaryIO, length: int) -> str:
    """Compute a truncated SHA-256 hex digest of content.

    Args:
        source: Raw bytes or a binary file object, read to the end
        length: Number of hex characters to keep

    Returns:
        The first ``length`` hex characters of the digest, or an empty
        string when ``length`` is not positive (content is not read)
    """
    if length <= 0:
        return ""

    hasher = hashlib.sha256()
    if isinstance(source, (bytes, bytearray, memoryview)):
        hasher.update(source)
    else:
        for chunk in iter(lambda: source.read(CHUNK_SIZE), b""):
            hasher.update(chunk)

    return hasher.hexdigest()[:length]


def hash_file(path: str | Path, length: int) -> str:
    """Compute a truncated content hash of a file.

    The file is not opened at all when hashing is disabled.

    Raises:
        OSError: If the file cannot be opened or read
    """
    if length <= 0:
        return ""

    with open(path, "rb") as f:
        return hash_content(f, length)
