"""Password hashing for stored user credentials.

New credentials are Werkzeug scrypt hashes (``scrypt:N:r:p$salt$hexkey``).
Credentials imported from the previous Node service use
``hexkey.salt`` (scrypt N=16384, r=8, p=1, 64-byte key) and still verify.
"""

import hashlib
import hmac
import logging

from werkzeug.security import check_password_hash, generate_password_hash

from errors import AuthUnavailable

logger = logging.getLogger(__name__)

HASH_METHOD = "scrypt"
SALT_LENGTH = 16

# Parameters of the legacy ``hexkey.salt`` format
LEGACY_N = 16384
LEGACY_R = 8
LEGACY_P = 1
LEGACY_KEY_LENGTH = 64

_WERKZEUG_METHODS = ("scrypt", "pbkdf2")


def hash_password(plaintext: str) -> str:
    """Return a salted scrypt credential for ``plaintext``. Salt is random per call."""
    try:
        return generate_password_hash(plaintext, method=HASH_METHOD, salt_length=SALT_LENGTH)
    except (MemoryError, ValueError):
        logger.exception("Password key derivation failed")
        raise AuthUnavailable()


def verify_password(plaintext: str, credential: str) -> bool:
    """Constant-time check of ``plaintext`` against a stored credential.

    Malformed credentials, including Werkzeug hashes with unparsable
    parameters, give ``False``. Only an out-of-memory key derivation raises
    ``AuthUnavailable``.
    """
    if not credential or not isinstance(credential, str):
        return False

    if "$" in credential:
        method = credential.split("$", 1)[0].split(":", 1)[0]
        if method not in _WERKZEUG_METHODS or credential.count("$") != 2:
            return False
        try:
            return check_password_hash(credential, plaintext)
        except MemoryError:
            logger.exception("Password key derivation failed")
            raise AuthUnavailable()
        except ValueError:
            # bad method parameters, e.g. "scrypt:abc" or an unknown digest
            logger.warning("Stored credential has malformed hash parameters")
            return False

    return _verify_legacy(plaintext, credential)


def _verify_legacy(plaintext: str, credential: str) -> bool:
    hashed, sep, salt = credential.partition(".")
    if not sep or not salt:
        return False
    try:
        expected = bytes.fromhex(hashed)
    except ValueError:
        return False
    if len(expected) != LEGACY_KEY_LENGTH:
        return False

    try:
        derived = hashlib.scrypt(
            plaintext.encode("utf-8"),
            salt=salt.encode("utf-8"),
            n=LEGACY_N,
            r=LEGACY_R,
            p=LEGACY_P,
            dklen=LEGACY_KEY_LENGTH,
        )
    except (MemoryError, ValueError):
        logger.exception("Legacy password key derivation failed")
        raise AuthUnavailable()
    return hmac.compare_digest(derived, expected)
