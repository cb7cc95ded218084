from datetime import date, datetime, timedelta, timezone
from unittest.mock import AsyncMock, Mock

import pytest

from app.models.user import CommitCount, Project, Status, User, VideoEntry
from app.services.profile_view import ProfileContext, ProfileViewRenderer, RailsDistanceFormatter

NOW = datetime(2026, 3, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def projects() -> list[Project]:
    return [
        Project(id="p-1", title="Title 1", friendly_id="title-1", contribution_url="test_url"),
        Project(id="p-2", title="Title 2", friendly_id="title-2"),
        Project(id="p-3", title="Title 3", friendly_id="title-3"),
    ]


@pytest.fixture
def user(projects) -> User:
    """Eric Els, member for 33 days, following three projects."""
    return User(
        id="u-eric",
        first_name="Eric",
        last_name="Els",
        email="eric@somemail.se",
        title_list=["Philanthropist"],
        skill_list=["Shooting", "Hooting"],
        created_at=NOW - timedelta(days=33),
        github_profile_url="http://github.com/Eric",
        bio="Lonesome Cowboy",
        status=[Status(status="Pairing on the scheduler today")],
        following_projects=projects,
        commit_counts=[CommitCount(project=projects[0], commit_count=253)],
    )


@pytest.fixture
def videos() -> list[VideoEntry]:
    return [
        VideoEntry(url="http://www.youtube.com/100", title="Random", published=date(2015, 2, 1)),
        VideoEntry(url="http://www.youtube.com/340", title="Stuff", published=date(2015, 3, 1)),
        VideoEntry(url="http://www.youtube.com/2340", title="Here's something", published=date(2015, 4, 1)),
    ]


@pytest.fixture
def resolver():
    resolver = Mock()
    resolver.resolve = AsyncMock(return_value="Africa/Cairo")
    return resolver


@pytest.fixture
def renderer(resolver) -> ProfileViewRenderer:
    return ProfileViewRenderer(resolver=resolver, duration_formatter=RailsDistanceFormatter(), clock=lambda: NOW)


@pytest.fixture
def make_context(user, projects, videos):
    def _make(**overrides) -> ProfileContext:
        fields = {
            "owner": user,
            "viewer": None,
            "commit_counts": list(user.commit_counts),
            "following_projects": projects,
            "following_projects_count": 2,
            "skills": ["rails", "ruby", "rspec"],
            "videos": videos,
        }
        fields.update(overrides)
        return ProfileContext(**fields)

    return _make
