"""
License key generation.
"""

import secrets
import string

LICENSE_KEY_ALPHABET = string.ascii_uppercase + string.digits
LICENSE_KEY_LENGTH = 16


def generate_license_key() -> str:
    """
    Generate a license key of 16 characters drawn from A-Z and 0-9.

    No uniqueness check is made against existing keys; creation is
    idempotent, so a caller wanting a fresh key retries on collision.

    Returns:
        Generated license key string
    """
    return "".join(secrets.choice(LICENSE_KEY_ALPHABET) for _ in range(LICENSE_KEY_LENGTH))
