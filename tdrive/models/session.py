from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class TimeOfDay(str, Enum):
    DAY = "day"
    NIGHT = "night"


class PracticeSession(BaseModel):
    """One logged practice session as stored in the collection.

    Serialized with camelCase keys (ownerUserId, durationMinutes, ...),
    which is the on-disk and wire format.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        use_enum_values=True,
    )

    id: str
    owner_user_id: str
    owner_email: Optional[str] = None
    owner_phone: Optional[str] = None
    profile_id: str
    date: str
    start_time: str
    duration_minutes: float
    time_of_day: TimeOfDay
    weather: str
    notes: str = ""
    created_at: str

    def to_record(self) -> dict:
        """Dict form used by the store and the JSON responses."""
        return self.model_dump(by_alias=True)
