"""Hash utilities for MiniGit."""

import hashlib
from pathlib import Path
from typing import Union


def hash_object(data: bytes) -> str:
    """
    Compute SHA-1 hash of data.
    
    Args:
        data: Bytes to hash
        
    Returns:
        40-character hex string
    """
    return hashlib.sha1(data).hexdigest()


def hash_file(filepath: Union[str, Path]) -> str:
    """
    Compute SHA-1 hash of file.
    
    Args:
        filepath: Path to file
        
    Returns:
        40-character hex string
    """
    with open(filepath, 'rb') as f:
        return hash_object(f.read())


def is_hash(value: str) -> bool:
    """Check whether value looks like a full 40-character hex digest."""
    return len(value) == 40 and all(c in '0123456789abcdef' for c in value)
