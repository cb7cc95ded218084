from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import HTMLResponse
from loguru import logger

from app.api.dependencies import get_current_viewer, get_profile_page_service, get_user_store
from app.models.user import Viewer
from app.services.profile_view import ProfilePageService
from app.services.user_store import UserStore

router = APIRouter(prefix="/users", tags=["profiles"])


@router.get("/{user_id}", response_class=HTMLResponse)
async def show_user(
    user_id: str,
    viewer: Viewer | None = Depends(get_current_viewer),
    store: UserStore = Depends(get_user_store),
    pages: ProfilePageService = Depends(get_profile_page_service),
):
    """Public profile page of a member."""
    user_id = user_id.strip()
    if not user_id:
        raise HTTPException(status_code=400, detail="Missing user id.")

    try:
        owner = await store.get_user(user_id)
    except Exception as exc:
        logger.error(f"User lookup failed for {user_id}: {exc}")
        raise HTTPException(status_code=503, detail="Storage temporarily unavailable.")

    if owner is None:
        raise HTTPException(status_code=404, detail="User not found.")

    html_content = await pages.render_page(owner, viewer)
    return HTMLResponse(content=html_content, media_type="text/html")
