from datetime import date, datetime
from urllib.parse import urlparse

from pydantic import BaseModel, Field


class Status(BaseModel):
    status: str
    created_at: datetime | None = None


class Project(BaseModel):
    id: str
    title: str
    friendly_id: str  # url slug, e.g. "title-1"
    contribution_url: str | None = None

    @property
    def path(self) -> str:
        return f"/projects/{self.friendly_id}"


class CommitCount(BaseModel):
    project: Project
    commit_count: int = 0


class VideoEntry(BaseModel):
    title: str
    url: str
    published: date


class User(BaseModel):
    """
    A member profile as persisted by the user store.

    Optional fields model data the member never filled in; the profile page
    omits the matching sections instead of failing.
    """

    id: str
    first_name: str = ""
    last_name: str = ""
    email: str
    bio: str | None = None
    title_list: list[str] = Field(default_factory=list)
    skill_list: list[str] = Field(default_factory=list)
    created_at: datetime
    github_profile_url: str | None = None
    youtube_id: str | None = None  # YouTube channel id
    country: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    display_email: bool = False
    display_hire_me: bool = False
    is_privileged: bool = False
    # Oldest first, the latest entry is the current status
    status: list[Status] = Field(default_factory=list)
    commit_counts: list[CommitCount] = Field(default_factory=list)
    following_projects: list[Project] = Field(default_factory=list)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def has_bio(self) -> bool:
        return bool(self.bio and self.bio.strip())

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    @property
    def latest_status(self) -> Status | None:
        return self.status[-1] if self.status else None

    @property
    def path(self) -> str:
        return f"/users/{self.id}"

    @property
    def github_handle(self) -> str | None:
        """Last path segment of the GitHub profile url (http://github.com/Eric -> Eric)."""
        if not self.github_profile_url:
            return None
        segments = [s for s in urlparse(self.github_profile_url).path.split("/") if s]
        return segments[-1] if segments else self.github_profile_url


class Viewer(BaseModel):
    """The signed-in visitor. Anonymous visitors are represented by None."""

    id: str

    def owns(self, user: User) -> bool:
        return self.id == user.id
