"""Alert fingerprinting for duplicate suppression."""

import hashlib


def fingerprint(text: str) -> str:
    """Return the hex SHA-256 digest of the alert text."""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()
