from .duration import CoarseDistanceFormatter, DurationFormatter, RailsDistanceFormatter, get_duration_formatter
from .renderer import ProfileContext, ProfileViewRenderer
from .sections import ProfileView
from .service import ProfilePageService

__all__ = [
    "CoarseDistanceFormatter",
    "DurationFormatter",
    "ProfileContext",
    "ProfilePageService",
    "ProfileView",
    "ProfileViewRenderer",
    "RailsDistanceFormatter",
    "get_duration_formatter",
]
