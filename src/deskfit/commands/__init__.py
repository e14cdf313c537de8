"""CLI commands for deskfit."""

from .exercises import exercises
from .insights import insights
from .onboard import onboard
from .plan import plan
from .profile import profile, report
from .progress import progress
from .serve import serve
from .session import session

__all__ = [
    "exercises",
    "insights",
    "onboard",
    "plan",
    "profile",
    "progress",
    "report",
    "serve",
    "session",
]
