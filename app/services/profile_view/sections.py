from pydantic import BaseModel, Field


class Tab(BaseModel):
    label: str
    anchor: str  # "#about", "#user-skills", ...


class Link(BaseModel):
    text: str
    href: str


class VideoRow(BaseModel):
    title: str
    url: str
    published: str


class ContributionRow(BaseModel):
    project_title: str
    contribution_url: str | None = None
    commit_count: int

    @property
    def label(self) -> str:
        return f"{self.project_title} - {self.commit_count}"


class Geolocation(BaseModel):
    country: str | None = None
    timezone: str | None = None


class ProfileView(BaseModel):
    """
    Every section decided for one render of a profile page.

    None or an empty list means the section is omitted from the page.
    """

    user_id: str
    full_name: str
    first_name: str
    last_name: str
    avatar_url: str
    titles: list[str] = Field(default_factory=list)
    github: Link | None = None
    email: Link | None = None
    hire_me: Link | None = None
    edit: Link | None = None
    newsletter: Link | None = None
    geolocation: Geolocation = Field(default_factory=Geolocation)
    member_for: str
    tabs: list[Tab] = Field(default_factory=list)
    bio: str | None = None
    skills: list[str] = Field(default_factory=list)
    followed_projects: list[Link] = Field(default_factory=list)
    contributions: list[ContributionRow] = Field(default_factory=list)
    videos: list[VideoRow] = Field(default_factory=list)
    no_videos_message: str | None = None
    status: str = ""
    status_form_action: str
    canonical_url: str
