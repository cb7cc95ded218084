from typing import Protocol

from app.models.user import CommitCount, Project, User, VideoEntry


class ProfileDataProvider(Protocol):
    async def commit_counts(self, user: User) -> list[CommitCount]: ...

    async def following_projects(self, user: User) -> list[Project]: ...

    async def following_projects_count(self, user: User) -> int: ...

    async def skills(self, user: User) -> list[str]: ...


class TimezoneResolver(Protocol):
    async def resolve(self, latitude: float, longitude: float) -> str | None: ...


class VideoProvider(Protocol):
    async def get_videos(self, channel_id: str | None) -> list[VideoEntry] | None: ...
