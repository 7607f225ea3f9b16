"""Hash utilities for tinyvcs."""

import hashlib


def hash_object(data: bytes) -> str:
    """
    Compute SHA-256 hash of data.
    
    Args:
        data: Bytes to hash
        
    Returns:
        64-character hex string
    """
    return hashlib.sha256(data).hexdigest()


def hash_text(text: str) -> str:
    """Compute SHA-256 hash of UTF-8 encoded text."""
    return hash_object(text.encode())
