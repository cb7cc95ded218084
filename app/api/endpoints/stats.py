from fastapi import APIRouter, Depends
from loguru import logger

from app.api.dependencies import get_user_store
from app.services.user_store import UserStore

router = APIRouter()


@router.get("/stats")
async def get_stats(store: UserStore = Depends(get_user_store)) -> dict:
    """Return lightweight public stats for the homepage."""
    try:
        total = await store.count_users()
    except Exception as exc:
        logger.warning(f"Failed to get total users: {exc}")
        total = 0
    return {"total_users": total}
