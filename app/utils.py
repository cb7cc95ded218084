import hashlib

from app.core.config import settings


def gravatar_url(email: str, size: int | None = None) -> str:
    """
    Build the Gravatar image url for an email address.

    Gravatar keys avatars by the md5 of the trimmed, lower-cased address.
    """
    digest = hashlib.md5(email.strip().lower().encode("utf-8")).hexdigest()
    return f"{settings.GRAVATAR_BASE_URL}/{digest}?s={size or settings.GRAVATAR_SIZE}&d=retro"
