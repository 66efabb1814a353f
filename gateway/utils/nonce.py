"""
Random identifier generation.

Identifiers come from the ``secrets`` module and are safe to generate
from concurrent tasks without coordination.
"""

import secrets


def make_nonce(num_bytes: int) -> str:
    """
    Generate a random URL-safe identifier.

    Args:
        num_bytes: Bytes of entropy

    Returns:
        URL-safe base64 text without padding
    """
    if num_bytes <= 0:
        raise ValueError("num_bytes must be positive")
    return secrets.token_urlsafe(num_bytes)
