"""Correlation tokens for linking a request verdict to its response.

Two kinds of token are produced:

1. A content hash of the request body. Identical bodies share a token,
   which is what lets the hash-correlated matcher recognize a repeated body.
2. A random identifier. Every request gets its own token.
"""

import base64
import hashlib
import uuid


def compute_body_hash(body: bytes) -> str:
    """Compute a deterministic token for a request body.

    The token is the URL-safe base64 encoding of the SHA-256 digest of the
    body, so it can be carried in a header without escaping.

    Args:
        body: Request body as bytes

    Returns:
        44-character URL-safe base64 string

    Examples:
        >>> compute_body_hash(b"")
        '47DEQpj8HBSa-_TImW-5JCeuQeRkm5NMpJWZG3hSuFU='
    """
    digest = hashlib.sha256(body).digest()
    return base64.urlsafe_b64encode(digest).decode("ascii")


def generate_correlation_id() -> str:
    """Generate a fresh, globally unique correlation token (UUID4)."""
    return str(uuid.uuid4())
