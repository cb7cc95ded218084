import asyncio

from loguru import logger

from app.models.user import User, Viewer
from app.services.profile_view.ports import ProfileDataProvider, VideoProvider
from app.services.profile_view.renderer import ProfileContext, ProfileViewRenderer


class ProfilePageService:
    """Gathers a member's collections from the collaborators and renders the profile page."""

    def __init__(
        self,
        provider: ProfileDataProvider,
        renderer: ProfileViewRenderer,
        videos: VideoProvider | None = None,
    ):
        self.provider = provider
        self.renderer = renderer
        self.videos = videos

    async def build_context(self, owner: User, viewer: Viewer | None = None) -> ProfileContext:
        commit_counts, following_projects, following_count, skills = await asyncio.gather(
            self.provider.commit_counts(owner),
            self.provider.following_projects(owner),
            self.provider.following_projects_count(owner),
            self.provider.skills(owner),
        )
        videos = None
        if self.videos is not None and owner.youtube_id:
            videos = await self.videos.get_videos(owner.youtube_id)

        return ProfileContext(
            owner=owner,
            viewer=viewer,
            commit_counts=commit_counts,
            following_projects=following_projects,
            following_projects_count=following_count,
            skills=skills,
            videos=videos,
        )

    async def render_page(self, owner: User, viewer: Viewer | None = None) -> str:
        ctx = await self.build_context(owner, viewer)
        logger.debug(f"Rendering profile {owner.id} (viewer={viewer.id if viewer else 'anonymous'})")
        return await self.renderer.render(ctx)
