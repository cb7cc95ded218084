from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape
from loguru import logger

from app.core.config import settings
from app.models.user import CommitCount, Project, User, VideoEntry, Viewer
from app.services.profile_view.duration import DurationFormatter, get_duration_formatter
from app.services.profile_view.ports import TimezoneResolver
from app.services.profile_view.sections import (
    ContributionRow,
    Geolocation,
    Link,
    ProfileView,
    Tab,
    VideoRow,
)
from app.utils import gravatar_url

# app/services/profile_view/renderer.py -> app
templates_dir = Path(__file__).resolve().parents[2] / "templates"

PROFILE_TEMPLATE = "users/show.html"
EDIT_PROFILE_PATH = "/users/edit"
NEW_NEWSLETTER_PATH = "/newsletters/new"


def create_template_env() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(templates_dir)),
        autoescape=select_autoescape(["html"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )


@dataclass(frozen=True)
class ProfileContext:
    """Everything one render needs, gathered by the web layer beforehand."""

    owner: User
    viewer: Viewer | None = None
    commit_counts: list[CommitCount] = field(default_factory=list)
    following_projects: list[Project] = field(default_factory=list)
    following_projects_count: int = 0
    skills: list[str] = field(default_factory=list)
    videos: list[VideoEntry] | None = None


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ProfileViewRenderer:
    """
    Decides which profile sections appear and renders them to HTML.

    Holds no per-render state. The only outbound call is the timezone
    lookup, made once and only when both coordinates are known.
    """

    def __init__(
        self,
        resolver: TimezoneResolver,
        duration_formatter: DurationFormatter | None = None,
        env: Environment | None = None,
        clock: Callable[[], datetime] = _utcnow,
        date_format: str | None = None,
        host_name: str | None = None,
    ):
        self.resolver = resolver
        self.duration_formatter = duration_formatter or get_duration_formatter(settings.MEMBERSHIP_DURATION_STYLE)
        self.env = env or create_template_env()
        self.clock = clock
        self.date_format = date_format or settings.VIDEO_DATE_FORMAT
        self.host_name = (host_name or settings.HOST_NAME).rstrip("/")

    async def render(self, ctx: ProfileContext) -> str:
        view = await self.build_view(ctx)
        template = self.env.get_template(PROFILE_TEMPLATE)
        return template.render(view=view)

    async def build_view(self, ctx: ProfileContext) -> ProfileView:
        owner = ctx.owner
        is_own_profile = ctx.viewer is not None and ctx.viewer.owns(owner)
        latest = owner.latest_status
        videos = self._video_rows(ctx.videos)

        return ProfileView(
            user_id=owner.id,
            full_name=owner.full_name,
            first_name=owner.first_name,
            last_name=owner.last_name,
            avatar_url=gravatar_url(owner.email),
            titles=list(owner.title_list),
            github=Link(text=owner.github_handle, href=owner.github_profile_url) if owner.github_profile_url else None,
            email=Link(text=owner.email, href=f"mailto:{owner.email}") if owner.display_email else None,
            hire_me=Link(text="Hire me", href=owner.path) if owner.display_hire_me else None,
            edit=Link(text="Edit", href=EDIT_PROFILE_PATH) if is_own_profile else None,
            newsletter=(
                Link(text="New Newsletter", href=NEW_NEWSLETTER_PATH)
                if is_own_profile and owner.is_privileged
                else None
            ),
            geolocation=await self._geolocation(owner),
            member_for=self.duration_formatter.format(self._as_aware(owner.created_at), self.clock()),
            tabs=self._tabs(ctx),
            bio=owner.bio if owner.has_bio else None,
            skills=list(ctx.skills),
            followed_projects=[Link(text=p.title, href=p.path) for p in ctx.following_projects],
            contributions=[
                ContributionRow(
                    project_title=cc.project.title,
                    contribution_url=cc.project.contribution_url,
                    commit_count=cc.commit_count,
                )
                for cc in ctx.commit_counts
            ],
            videos=videos,
            no_videos_message=None if videos else f"{owner.full_name} has no publicly viewable Youtube videos.",
            status=latest.status if latest else "",
            status_form_action=f"{owner.path}/status",
            canonical_url=f"{self.host_name}{owner.path}",
        )

    @staticmethod
    def _tabs(ctx: ProfileContext) -> list[Tab]:
        tabs = []
        if ctx.owner.has_bio:
            tabs.append(Tab(label="About", anchor="#about"))
        if ctx.skills:
            tabs.append(Tab(label="Skills", anchor="#user-skills"))
        if ctx.following_projects_count > 0:
            tabs.append(Tab(label="Projects", anchor="#projects"))
        if ctx.commit_counts:
            tabs.append(Tab(label="Activity", anchor="#activity"))
        return tabs

    def _video_rows(self, videos: list[VideoEntry] | None) -> list[VideoRow]:
        if not videos:
            return []
        return [VideoRow(title=v.title, url=v.url, published=v.published.strftime(self.date_format)) for v in videos]

    async def _geolocation(self, owner: User) -> Geolocation:
        zone = None
        if owner.has_coordinates:
            try:
                zone = await self.resolver.resolve(owner.latitude, owner.longitude)
            except Exception as e:
                logger.warning(f"Timezone resolver failed for user {owner.id}: {e}")
                zone = None
            if zone is None:
                logger.debug(f"No timezone for user {owner.id}; omitting clock")
        return Geolocation(country=owner.country or None, timezone=zone)

    @staticmethod
    def _as_aware(moment: datetime) -> datetime:
        return moment if moment.tzinfo else moment.replace(tzinfo=timezone.utc)
