"""SHA-256 helpers for blob-stored part bodies.

Non-inline parts are identified in revisions by the SHA-256 of their
content instead of the content itself.
"""

from __future__ import annotations

import hashlib


def sha256_hex(data: bytes) -> str:
    """Return the hex-encoded SHA-256 digest of *data*.

    Parameters
    ----------
    data:
        Raw bytes to hash.

    Returns
    -------
    str
        A 64-character lowercase hexadecimal string.

    Examples
    --------
    >>> sha256_hex(b"")[:16]
    'e3b0c44298fc1c14'
    """
    return hashlib.sha256(data).hexdigest()
