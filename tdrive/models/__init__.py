from tdrive.models.session import PracticeSession, TimeOfDay
from tdrive.models.summary import PracticeSummary
from tdrive.models.user import CallerIdentity

__all__ = [
    "PracticeSession",
    "TimeOfDay",
    "PracticeSummary",
    "CallerIdentity",
]
