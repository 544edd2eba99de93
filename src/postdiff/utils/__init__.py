from .hashing import sha256_hex

__all__ = [
    "sha256_hex",
]
