import base64

from cryptography.fernet import Fernet, InvalidToken
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC
from loguru import logger

from app.core.config import settings


def redact_token(token: str | None, visible_chars: int = 8) -> str:
    """
    Redact a token for logging purposes.
    Shows first few characters followed by *** for debugging.
    """
    if not token:
        return "None"
    if len(token) <= visible_chars:
        return "***"
    return f"{token[:visible_chars]}***"


def redact_email(email: str | None) -> str:
    """Keep the first character of the local part and the domain: e***@somemail.se"""
    if not email or "@" not in email:
        return "None"
    local, domain = email.split("@", 1)
    return f"{local[:1]}***@{domain}"


class SessionCodec:
    """Encrypts the signed-in user's id into the session cookie and back."""

    _SALT = b"f0L1o-s3ss10n-c00k1e-5alt-v1xQ9z"

    def __init__(self, secret: str | None = None, max_age: int | None = None):
        self.secret = secret or settings.SESSION_SECRET
        self.max_age = max_age if max_age is not None else settings.SESSION_MAX_AGE_SECONDS
        self._cipher: Fernet | None = None
        if self.secret == "change-me":
            logger.warning("SESSION_SECRET is using the default placeholder. Set a strong value to secure sessions.")

    def _get_cipher(self) -> Fernet:
        if self._cipher is None:
            kdf = PBKDF2HMAC(
                algorithm=hashes.SHA256(),
                length=32,
                salt=self._SALT,
                iterations=200_000,
            )
            key = base64.urlsafe_b64encode(kdf.derive(self.secret.encode("utf-8")))
            self._cipher = Fernet(key)
        return self._cipher

    def issue(self, user_id: str) -> str:
        return self._get_cipher().encrypt(user_id.encode("utf-8")).decode("utf-8")

    def resolve(self, token: str | None) -> str | None:
        """Return the user id carried by the cookie, or None for anonymous visitors."""
        if not token:
            return None
        try:
            ttl = self.max_age if self.max_age > 0 else None
            return self._get_cipher().decrypt(token.encode("utf-8"), ttl=ttl).decode("utf-8")
        except (InvalidToken, ValueError) as exc:
            logger.warning(f"Discarding invalid session cookie {redact_token(token)}: {exc!r}")
            return None


session_codec = SessionCodec()
