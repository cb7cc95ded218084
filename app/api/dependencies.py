from fastapi import Request

from app.core.config import settings
from app.core.security import session_codec
from app.models.user import Viewer
from app.services.profile_view import ProfilePageService, ProfileViewRenderer
from app.services.timezone import timezone_service
from app.services.user_store import UserStore, user_store
from app.services.youtube import youtube_service

_profile_renderer = ProfileViewRenderer(resolver=timezone_service)


def get_user_store() -> UserStore:
    return user_store


def get_current_viewer(request: Request) -> Viewer | None:
    """Viewer from the session cookie; None for anonymous visitors."""
    user_id = session_codec.resolve(request.cookies.get(settings.SESSION_COOKIE_NAME))
    return Viewer(id=user_id) if user_id else None


def get_profile_page_service() -> ProfilePageService:
    return ProfilePageService(provider=user_store, renderer=_profile_renderer, videos=youtube_service)
